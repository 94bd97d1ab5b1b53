#!/usr/bin/env python3

"""Qualified path construction with push/pop-to-marker semantics."""

from ...errors import NameBufferOverflow


class PathBuilder:
    """The current qualified path of the traversal.

    Segments are joined by the separator. With ``capitalize`` every path
    character is upper-cased, the separator included. ``push`` returns a
    marker (the path length before the push) that ``pop`` truncates back to,
    so pushes and pops nest like a stack.

    The path grows as needed, but ``max_length`` is still enforced as a
    capacity: the path plus a terminator slot must fit, otherwise the push
    fails with NameBufferOverflow instead of producing a truncated name.
    """

    def __init__(self, separator: str = "::", capitalize: bool = False,
                 max_length: int | None = None):
        self.separator = separator.upper() if capitalize else separator
        self.capitalize = capitalize
        self.max_length = max_length
        self._path = ""
        self._starts: list[int] = []  # offset of each segment's first character

    def push(self, segment: str) -> int:
        marker = len(self._path)
        if self.capitalize:
            segment = segment.upper()

        joined = f"{self.separator}{segment}" if self._path else segment
        path = self._path + joined
        if self.max_length is not None and len(path) >= self.max_length - 1:
            # Report what fits, the way a fixed buffer would hold it
            raise NameBufferOverflow(path[: self.max_length - 1], self.max_length)

        self._starts.append(len(path) - len(segment))
        self._path = path
        return marker

    def pop(self, marker: int) -> None:
        if marker > len(self._path):
            raise ValueError(f"Marker {marker} is past the end of the path ({len(self._path)})")
        self._path = self._path[:marker]
        while self._starts and self._starts[-1] >= marker:
            self._starts.pop()

    @property
    def path(self) -> str:
        return self._path

    @property
    def segments(self) -> tuple[str, ...]:
        ends = [start - len(self.separator) for start in self._starts[1:]] + [len(self._path)]
        return tuple(self._path[start:end] for start, end in zip(self._starts, ends))

    def __len__(self) -> int:
        return len(self._path)

    def __bool__(self) -> bool:
        return bool(self._path)
