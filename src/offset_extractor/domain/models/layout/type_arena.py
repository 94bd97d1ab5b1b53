#!/usr/bin/env python3

"""Index-addressable store of aggregate types."""

from collections.abc import Hashable, Iterator

from .aggregate_type import AggregateType


class TypeArena:
    """Owns every AggregateType of a run and gives each one a stable index.

    The index is the aggregate's identity: the registry of walked aggregates
    and the type references between fields and nested aggregates both use it.
    """

    def __init__(self) -> None:
        self._types: list[AggregateType] = []
        self._by_key: dict[Hashable, int] = {}

    def add(self, aggregate: AggregateType, key: Hashable | None = None) -> AggregateType:
        """Store an aggregate, or return the one already stored under ``key``."""
        if key is not None and key in self._by_key:
            return self._types[self._by_key[key]]

        aggregate.index = len(self._types)
        self._types.append(aggregate)
        if key is not None:
            self._by_key[key] = aggregate.index
        return aggregate

    def __getitem__(self, index: int) -> AggregateType:
        return self._types[index]

    def __len__(self) -> int:
        return len(self._types)

    def __iter__(self) -> Iterator[AggregateType]:
        return iter(self._types)
