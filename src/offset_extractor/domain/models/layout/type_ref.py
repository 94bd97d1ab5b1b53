#!/usr/bin/env python3

"""Field type reference model."""

from dataclasses import dataclass
from enum import Enum


class TypeKind(Enum):
    """Whether a field's type is a plain value or a nested aggregate."""

    SCALAR = "scalar"
    AGGREGATE = "aggregate"


@dataclass(frozen=True)
class TypeRef:
    """Reference from a field to its type."""

    kind: TypeKind
    name: str | None = None
    index: int | None = None  # TypeArena index of the nested aggregate, if parsed

    @property
    def is_aggregate(self) -> bool:
        return self.kind is TypeKind.AGGREGATE

    @property
    def is_anonymous_aggregate(self) -> bool:
        """True for a nested struct/union without a declared tag."""
        return self.is_aggregate and self.name is None

    @classmethod
    def scalar(cls, name: str | None = None) -> "TypeRef":
        return cls(TypeKind.SCALAR, name=name)

    @classmethod
    def aggregate(cls, name: str | None = None, index: int | None = None) -> "TypeRef":
        return cls(TypeKind.AGGREGATE, name=name, index=index)
