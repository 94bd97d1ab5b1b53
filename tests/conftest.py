"""Pytest configuration and shared fixtures."""

import sys
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

# Add src directory to path for imports
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from offset_extractor.domain.models.layout import (
    AggregateKind,
    AggregateType,
    FieldInfo,
    TypeArena,
)
from offset_extractor.domain.services import (
    AttributeMatcher,
    Emitter,
    OffsetWalker,
    PathBuilder,
    Registry,
    TraversalContext,
)
from offset_extractor.infrastructure.logging import LoggerSetup

from .helpers import ListSink


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """Keep LoggerSetup handlers from leaking between tests."""
    yield
    LoggerSetup.reset()


@pytest.fixture
def arena() -> TypeArena:
    return TypeArena()


@pytest.fixture
def sink() -> ListSink:
    return ListSink()


@pytest.fixture
def make_aggregate(arena: TypeArena) -> Callable[..., AggregateType]:
    """Create an aggregate and store it in the test arena."""

    def _make(
        name: str | None,
        fields: list[FieldInfo],
        kind: AggregateKind = AggregateKind.STRUCT,
    ) -> AggregateType:
        return arena.add(AggregateType(kind=kind, name=name, fields=fields))

    return _make


@pytest.fixture
def make_walker(arena: TypeArena, sink: ListSink) -> Callable[..., OffsetWalker]:
    """Build a walker writing into ``sink``; keyword arguments tune the run."""

    def _make(
        separator: str = "::",
        prefix: str = "",
        capitalize: bool = False,
        output_bits: bool = False,
        output_format: str = "plain",
        max_length: int | None = 256,
        marker: str = "extract_offset",
    ) -> OffsetWalker:
        path = PathBuilder(separator, capitalize=capitalize, max_length=max_length)
        context = TraversalContext(
            arena=arena,
            matcher=AttributeMatcher(marker),
            path=path,
            registry=Registry(),
            emitter=Emitter(
                sink,
                prefix=prefix,
                separator=path.separator,
                output_bits=output_bits,
                output_format=output_format,
            ),
        )
        return OffsetWalker(context)

    return _make
