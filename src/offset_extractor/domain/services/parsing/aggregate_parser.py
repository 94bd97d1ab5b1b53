#!/usr/bin/env python3

"""Aggregate parsing from DWARF debug information.

Turns struct/union/class DIEs into AggregateType objects stored in a
TypeArena. Anonymous nested aggregates are parsed together with their
parent; named aggregates referenced by members are only named, since they
are parsed when their own definition DIE comes up.
"""

from elftools.dwarf.die import DIE

from ....errors import InvariantViolation
from ....infrastructure.logging import get_logger
from ...models.layout import AggregateType, FieldInfo, TypeArena, TypeRef
from .annotations import collect_decl_tags
from .die_type_classifier import DIETypeClassifier
from .member_location import legacy_bit_offset, parse_location_offset

logger = get_logger(__name__)


class AggregateParser:
    """Parses aggregate DIEs into the run's TypeArena.

    Named aggregates are interned by their layout signature, so the same
    header struct seen in several compilation units (or input files) keeps
    one identity. Definitions that differ in any field, its markers or the
    contents of an anonymous member stay separate. Anonymous aggregates are
    identified by their DIE.
    """

    def __init__(self, arena: TypeArena, little_endian: bool = True):
        self.arena = arena
        self.little_endian = little_endian
        self._by_die_offset: dict[int, AggregateType] = {}

    def parse(self, die: DIE) -> AggregateType:
        """Parse an aggregate definition DIE, reusing earlier results.

        Args:
            die: Complete struct/union/class DIE

        Returns:
            The arena's AggregateType for this definition
        """
        cached = self._by_die_offset.get(die.offset)
        if cached is not None:
            return cached

        name = DIETypeClassifier.get_name(die)
        size_attr = die.attributes.get("DW_AT_byte_size")
        aggregate = AggregateType(
            kind=DIETypeClassifier.get_kind(die),
            name=name,
            byte_size=size_attr.value if size_attr else 0,
        )

        if die.has_children:
            for child in die.iter_children():
                if child.tag == "DW_TAG_inheritance":
                    aggregate.fields.append(self._parse_base_class(child))
                elif DIETypeClassifier.is_data_member(child):
                    aggregate.fields.append(self._parse_member(child, name))

        key = aggregate.layout_signature(self.arena) if name is not None else None
        stored = self.arena.add(aggregate, key)
        if stored is not aggregate:
            logger.debug(
                f"{aggregate.kind.value} {name} at 0x{die.offset:x} duplicates "
                f"arena entry #{stored.index}"
            )
        self._by_die_offset[die.offset] = stored
        return stored

    def _parse_base_class(self, die: DIE) -> FieldInfo:
        """Base class subobjects are compiler-synthesized fields."""
        offset = parse_location_offset(self._attr_value(die, "DW_AT_data_member_location"))
        return FieldInfo(
            name=None,
            bit_offset=(offset or 0) * 8,
            type_ref=TypeRef.scalar(),
            artificial=True,
        )

    def _parse_member(self, die: DIE, parent_name: str | None) -> FieldInfo:
        name = DIETypeClassifier.get_name(die)
        bit_size = self._attr_value(die, "DW_AT_bit_size")
        return FieldInfo(
            name=name,
            bit_offset=self._member_bit_offset(die, name, parent_name),
            type_ref=self._resolve_type(die),
            attributes=collect_decl_tags(die),
            artificial=DIETypeClassifier.has_flag(die, "DW_AT_artificial"),
            bit_size=bit_size,
        )

    def _member_bit_offset(self, die: DIE, name: str | None, parent_name: str | None) -> int:
        data_bit_offset = self._attr_value(die, "DW_AT_data_bit_offset")
        if data_bit_offset is not None:
            return int(data_bit_offset)

        location = self._attr_value(die, "DW_AT_data_member_location")
        if location is None:
            # Union members, and struct members some producers leave at 0
            byte_offset = 0
        else:
            byte_offset = parse_location_offset(location)

        if byte_offset is None or byte_offset < 0:
            raise InvariantViolation(
                f"Cannot determine the offset of member {name or '<anonymous>'} "
                f"of {parent_name or '<anonymous>'} at DIE 0x{die.offset:x} "
                f"(location: {location!r})"
            )

        bit_offset = byte_offset * 8
        legacy = self._attr_value(die, "DW_AT_bit_offset")
        if legacy is not None:
            bit_size = self._attr_value(die, "DW_AT_bit_size") or 0
            storage = self._attr_value(die, "DW_AT_byte_size")
            if storage is None:
                storage = self._type_byte_size(die)
            bit_offset += legacy_bit_offset(legacy, bit_size, storage, self.little_endian)
        return bit_offset

    def _type_byte_size(self, die: DIE) -> int:
        """Byte size of a member's type, looking through typedefs and qualifiers."""
        type_die = die
        while "DW_AT_type" in type_die.attributes:
            type_die = type_die.get_DIE_from_attribute("DW_AT_type")
            size = self._attr_value(type_die, "DW_AT_byte_size")
            if size is not None:
                return int(size)
        raise InvariantViolation(
            f"Bit-field at DIE 0x{die.offset:x} has no storage unit size"
        )

    def _resolve_type(self, die: DIE) -> TypeRef:
        if "DW_AT_type" not in die.attributes:
            return TypeRef.scalar()

        type_die = DIETypeClassifier.strip_qualifiers(die.get_DIE_from_attribute("DW_AT_type"))
        if type_die is None:
            return TypeRef.scalar()

        type_name = DIETypeClassifier.get_name(type_die)
        if not DIETypeClassifier.is_aggregate(type_die):
            return TypeRef.scalar(type_name)

        if type_name is not None:
            return TypeRef.aggregate(type_name)

        nested = self.parse(type_die)
        return TypeRef.aggregate(index=nested.index)

    @staticmethod
    def _attr_value(die: DIE, attribute: str):
        attr = die.attributes.get(attribute)
        return attr.value if attr is not None else None
