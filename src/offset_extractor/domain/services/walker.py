#!/usr/bin/env python3

"""Depth-first walk of aggregate types producing output records.

For each aggregate the walker pushes the aggregate's name, visits its
fields in declaration order, emits a record for every marked field and
descends into anonymous nested structs/unions so that their members are
flattened into the enclosing name. Named nested aggregates are not
descended into: they get their own walk, starting from their own name,
when their definition is delivered.
"""

from dataclasses import dataclass

from ...errors import InvariantViolation
from ...infrastructure.logging import get_logger
from ..models.layout import AggregateType, OutputRecord, TypeArena
from .attribute_matcher import AttributeMatcher
from .emitter import Emitter
from .path_builder import PathBuilder
from .registry import Registry

logger = get_logger(__name__)


@dataclass
class TraversalContext:
    """State shared by every step of one run's traversal."""

    arena: TypeArena
    matcher: AttributeMatcher
    path: PathBuilder
    registry: Registry
    emitter: Emitter


class OffsetWalker:
    """Walks aggregates and emits the offsets of marked fields."""

    def __init__(self, context: TraversalContext):
        self.context = context

    def visit_top_level(self, aggregate: AggregateType) -> None:
        """Handle one "definition complete" event."""
        if aggregate.is_anonymous:
            # Reached only through a named parent
            logger.debug(f"Skipping anonymous top-level {aggregate.kind.value}")
            return
        self.visit(aggregate, 0)

    def visit(self, aggregate: AggregateType, base_offset_bits: int) -> None:
        ctx = self.context
        if aggregate in ctx.registry:
            return

        aggregate_marker = None
        if aggregate.name is not None:
            aggregate_marker = ctx.path.push(aggregate.name)

        for field in aggregate.fields:
            if field.artificial:
                continue

            field_offset = base_offset_bits + field.bit_offset

            field_marker = None
            if field.name is not None:
                field_marker = ctx.path.push(field.name)

            if ctx.matcher.is_marked(field):
                if field_marker is None:
                    raise InvariantViolation(
                        f"An unnamed field of \"{ctx.path.path}\" at bit {field_offset} "
                        f"is marked with \"{ctx.matcher.marker}\"",
                        hint="Only named fields can be exported; "
                        "anonymous bit-fields are not supported",
                    )
                ctx.emitter.emit(
                    OutputRecord(
                        segments=ctx.path.segments,
                        path=ctx.path.path,
                        offset_bits=field_offset,
                    )
                )

            type_ref = field.type_ref
            if type_ref.is_anonymous_aggregate and type_ref.index is not None:
                self.visit(ctx.arena[type_ref.index], field_offset)

            if field_marker is not None:
                ctx.path.pop(field_marker)

        if aggregate_marker is not None:
            ctx.path.pop(aggregate_marker)

        ctx.registry.add(aggregate)
