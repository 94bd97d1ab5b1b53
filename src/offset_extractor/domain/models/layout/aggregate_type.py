#!/usr/bin/env python3

"""Aggregate (struct/union/class) information model."""

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from .field_info import FieldInfo

if TYPE_CHECKING:
    from .type_arena import TypeArena


class AggregateKind(Enum):
    """Kinds of aggregate type definitions."""

    STRUCT = "struct"
    UNION = "union"
    CLASS = "class"


@dataclass
class AggregateType:
    """A struct, union or class definition with its fields in declaration order."""

    kind: AggregateKind
    name: str | None
    fields: list[FieldInfo] = field(default_factory=list)
    byte_size: int = 0
    index: int = -1  # identity inside the owning TypeArena

    @property
    def is_anonymous(self) -> bool:
        return self.name is None

    def layout_signature(self, arena: "TypeArena | None" = None) -> tuple:
        """Key identifying the same named definition across compilation units.

        Two definitions share a key only when every field has the same name,
        position, markers and type. Anonymous member types have no name to
        compare, so their own signature is looked up in ``arena`` by index.
        """
        return (
            self.kind,
            self.name,
            self.byte_size,
            tuple(
                (
                    f.name,
                    f.bit_offset,
                    f.bit_size,
                    f.attributes,
                    f.artificial,
                    f.type_ref.kind,
                    f.type_ref.name,
                    self._nested_signature(f, arena),
                )
                for f in self.fields
            ),
        )

    @staticmethod
    def _nested_signature(f: FieldInfo, arena: "TypeArena | None") -> tuple | None:
        if not f.type_ref.is_anonymous_aggregate or f.type_ref.index is None:
            return None
        if arena is None or f.type_ref.index >= len(arena):
            # Contents unknown, fall back to the index identity
            return ("unresolved", f.type_ref.index)
        return arena[f.type_ref.index].layout_signature(arena)
