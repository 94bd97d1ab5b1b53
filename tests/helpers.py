"""Builders for layout models and mocked pyelftools DIEs."""

from typing import Any
from unittest.mock import Mock

from offset_extractor.domain.models.layout import AggregateType, FieldInfo, TypeRef

MARK = ("extract_offset",)


class ListSink:
    """Collects written lines in memory."""

    def __init__(self) -> None:
        self.lines: list[str] = []

    def write_line(self, line: str) -> None:
        self.lines.append(line)


def field(name: str | None, bit_offset: int, marked: bool = False, **kwargs: Any) -> FieldInfo:
    """Scalar field, optionally carrying the default export marker."""
    return FieldInfo(
        name=name,
        bit_offset=bit_offset,
        type_ref=kwargs.pop("type_ref", TypeRef.scalar("int")),
        attributes=MARK if marked else (),
        **kwargs,
    )


def nested(name: str | None, bit_offset: int, aggregate: AggregateType, **kwargs: Any) -> FieldInfo:
    """Field whose type is an aggregate already stored in an arena."""
    return FieldInfo(
        name=name,
        bit_offset=bit_offset,
        type_ref=TypeRef.aggregate(aggregate.name, index=aggregate.index),
        **kwargs,
    )


def attr(value: Any) -> Mock:
    return Mock(value=value)


def make_die(
    tag: str | int,
    attributes: dict[Any, Any] | None = None,
    children: list[Mock] | None = None,
    refs: dict[Any, Mock] | None = None,
    offset: int = 0,
) -> Mock:
    """Mock pyelftools DIE.

    ``attributes`` maps attribute names to raw values; ``refs`` maps
    reference attributes to the DIE they point at.
    """
    refs = refs or {}
    attrs = {key: attr(value) for key, value in (attributes or {}).items()}
    for key in refs:
        attrs.setdefault(key, attr(0))

    die = Mock()
    die.tag = tag
    die.offset = offset
    die.attributes = attrs
    die.has_children = bool(children)
    die.iter_children.side_effect = lambda: iter(children or [])
    die.get_DIE_from_attribute.side_effect = lambda key: refs[key]
    die.is_null.return_value = False
    return die


def make_annotation(value: str, tag: str | int = "DW_TAG_LLVM_annotation") -> Mock:
    return make_die(
        tag,
        {"DW_AT_name": b"btf_decl_tag", "DW_AT_const_value": value.encode("utf-8")},
    )
