#!/usr/bin/env python3

"""Field information model for aggregate layouts."""

from dataclasses import dataclass, field

from .type_ref import TypeRef


@dataclass
class FieldInfo:
    """A single member of a struct or union."""

    name: str | None
    bit_offset: int  # relative to the immediate parent aggregate
    type_ref: TypeRef
    attributes: tuple[str, ...] = field(default_factory=tuple)
    artificial: bool = False  # compiler-synthesized, never exported
    bit_size: int | None = None
