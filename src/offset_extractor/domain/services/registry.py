#!/usr/bin/env python3

"""Set of aggregates already walked during a run."""

from ..models.layout import AggregateType


class Registry:
    """Grows monotonically; an aggregate is walked at most once per run."""

    def __init__(self) -> None:
        self._seen: set[int] = set()

    def __contains__(self, aggregate: AggregateType) -> bool:
        return aggregate.index in self._seen

    def add(self, aggregate: AggregateType) -> None:
        self._seen.add(aggregate.index)

    def __len__(self) -> int:
        return len(self._seen)
