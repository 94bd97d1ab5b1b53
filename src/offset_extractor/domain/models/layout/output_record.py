#!/usr/bin/env python3

"""Output record model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class OutputRecord:
    """One exported field: its qualified path and accumulated bit offset."""

    segments: tuple[str, ...]
    path: str
    offset_bits: int
