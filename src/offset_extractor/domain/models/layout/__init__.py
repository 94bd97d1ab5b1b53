#!/usr/bin/env python3

"""Struct/union layout models."""

from .aggregate_type import AggregateKind, AggregateType
from .field_info import FieldInfo
from .output_record import OutputRecord
from .type_arena import TypeArena
from .type_ref import TypeKind, TypeRef

__all__ = [
    "AggregateKind",
    "AggregateType",
    "FieldInfo",
    "OutputRecord",
    "TypeArena",
    "TypeKind",
    "TypeRef",
]
