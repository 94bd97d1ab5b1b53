#!/usr/bin/env python3

"""Member offset extraction from DWARF member attributes.

A member's position is recorded in one of three ways:

- ``DW_AT_data_bit_offset`` (DWARF4+): bit offset from the start of the parent.
- ``DW_AT_data_member_location``: byte offset, either as an integer constant
  (DWARF3+) or as a location expression ``[DW_OP_plus_uconst, ULEB128]``
  (DWARF2).
- Bit-fields in DWARF2/3 add ``DW_AT_bit_offset``, counted from the most
  significant bit of a storage unit of ``DW_AT_byte_size`` bytes.

Example:
    DWARF3: member_location = 4        -> 32 bits
    DWARF2: member_location = [35, 4]  -> 32 bits
"""

from ....infrastructure.logging import get_logger

logger = get_logger(__name__)

# Location expression opcode: add unsigned constant to the stack top
DW_OP_PLUS_UCONST = 0x23


def _decode_uleb128(data: list[int] | tuple[int, ...]) -> int | None:
    result = 0
    shift = 0
    for byte in data:
        if not isinstance(byte, int):
            return None
        result |= (byte & 0x7F) << shift
        if not byte & 0x80:
            return result
        shift += 7
    return None


def _parse_location_expression(expression: list[int] | tuple[int, ...]) -> int | None:
    if not expression:
        logger.debug("Empty location expression, cannot extract offset")
        return None

    if expression[0] == DW_OP_PLUS_UCONST and len(expression) >= 2:
        return _decode_uleb128(expression[1:])

    if len(expression) == 1 and isinstance(expression[0], int):
        return expression[0]

    logger.warning(f"Unsupported location expression: {list(expression)}")
    return None


def parse_location_offset(attr_value: int | list[int] | tuple[int, ...] | None) -> int | None:
    """Extract a byte offset from a ``DW_AT_data_member_location`` value.

    Args:
        attr_value: Integer constant, location expression bytes, or None

    Returns:
        Offset in bytes, or None if it cannot be determined

    Examples:
        >>> parse_location_offset(4)
        4
        >>> parse_location_offset([35, 4])
        4
        >>> parse_location_offset([35, 0x80, 0x01])
        128
    """
    if attr_value is None:
        return None

    if isinstance(attr_value, bool):
        return None

    if isinstance(attr_value, int):
        return attr_value

    if isinstance(attr_value, (list, tuple)):
        return _parse_location_expression(attr_value)

    logger.warning(
        f"Unknown attribute value type for member location: {type(attr_value).__name__}"
    )
    return None


def legacy_bit_offset(
    bit_offset: int, bit_size: int, storage_bytes: int, little_endian: bool
) -> int:
    """Convert a DWARF2/3 ``DW_AT_bit_offset`` to a bit offset within the storage unit.

    ``DW_AT_bit_offset`` counts from the most significant bit of the storage
    unit; on little-endian targets that is the far end of the unit.
    """
    if little_endian:
        return storage_bytes * 8 - bit_offset - bit_size
    return bit_offset
