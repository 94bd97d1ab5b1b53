#!/usr/bin/env python3

"""DIE classification helpers for the aggregate parser.

Tag checks are kept here so that the parser never guesses what a DIE
is from its attributes alone.
"""

from elftools.dwarf.die import DIE

from ...models.dwarf.tag_constants import AGGREGATE_TAGS, LAYOUT_TRANSPARENT_TAGS
from ...models.layout import AggregateKind

_KIND_BY_TAG = {
    "DW_TAG_structure_type": AggregateKind.STRUCT,
    "DW_TAG_union_type": AggregateKind.UNION,
    "DW_TAG_class_type": AggregateKind.CLASS,
}


def decode_string(value: bytes | str) -> str:
    if isinstance(value, bytes):
        return value.decode("utf-8")
    return str(value)


class DIETypeClassifier:
    """Classifies DIEs. All methods are static; DIEs carry all the state."""

    @staticmethod
    def get_name(die: DIE) -> str | None:
        """Declared name of a DIE, or None when it has none."""
        name_attr = die.attributes.get("DW_AT_name")
        if not name_attr:
            return None
        name = decode_string(name_attr.value)
        return name or None

    @staticmethod
    def has_flag(die: DIE, attribute: str) -> bool:
        attr = die.attributes.get(attribute)
        return bool(attr and attr.value)

    @staticmethod
    def is_aggregate(die: DIE) -> bool:
        """True for struct, union and class DIEs, complete or not."""
        return die.tag in AGGREGATE_TAGS

    @staticmethod
    def is_aggregate_definition(die: DIE) -> bool:
        """True for a complete struct/union/class definition.

        Forward declarations (``DW_AT_declaration``) and type-unit
        stubs (``DW_AT_signature``) do not define a layout.

        Examples:
            - struct Point { int x; } : True
            - struct Point;           : False
        """
        if not DIETypeClassifier.is_aggregate(die):
            return False
        if DIETypeClassifier.has_flag(die, "DW_AT_declaration"):
            return False
        return "DW_AT_signature" not in die.attributes

    @staticmethod
    def get_kind(die: DIE) -> AggregateKind:
        return _KIND_BY_TAG[die.tag]

    @staticmethod
    def is_layout_transparent(die: DIE) -> bool:
        """True for const/volatile/restrict/atomic wrappers."""
        return die.tag in LAYOUT_TRANSPARENT_TAGS

    @staticmethod
    def is_data_member(die: DIE) -> bool:
        """True for a non-static data member.

        DWARF4 and earlier describe C++ static members as ``DW_TAG_member``
        declarations; they occupy no space in the aggregate.
        """
        if die.tag != "DW_TAG_member":
            return False
        if not DIETypeClassifier.has_flag(die, "DW_AT_declaration"):
            return True
        return not DIETypeClassifier.has_flag(die, "DW_AT_external")

    @staticmethod
    def strip_qualifiers(die: DIE | None) -> DIE | None:
        """Follow DW_AT_type through qualifiers to the type that defines layout."""
        while die is not None and DIETypeClassifier.is_layout_transparent(die):
            if "DW_AT_type" not in die.attributes:
                return None  # const void
            die = die.get_DIE_from_attribute("DW_AT_type")
        return die
