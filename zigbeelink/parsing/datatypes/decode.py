"""
Width table and value codec for ZCL attribute data types.

Every attribute value on the wire is preceded by a one-byte type tag. Most tags
have a fixed width; strings carry a one- or two-byte length prefix, and arrays,
sets, bags and structures carry an element count followed by their elements.
A tag missing from the table cannot be skipped safely, so it is rejected
instead of guessed. All multi-byte numbers are little-endian.
"""
from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, NamedTuple, Optional

from zigbeelink.core.binary import Buffer, ByteCursor
from zigbeelink.core.errors import NestingTooDeep, UnknownDataType


class DataType(IntEnum):
    NO_DATA = 0x00
    DATA8 = 0x08
    DATA16 = 0x09
    DATA24 = 0x0A
    DATA32 = 0x0B
    DATA40 = 0x0C
    DATA48 = 0x0D
    DATA56 = 0x0E
    DATA64 = 0x0F
    BOOL = 0x10
    MAP8 = 0x18
    MAP16 = 0x19
    MAP24 = 0x1A
    MAP32 = 0x1B
    MAP40 = 0x1C
    MAP48 = 0x1D
    MAP56 = 0x1E
    MAP64 = 0x1F
    UINT8 = 0x20
    UINT16 = 0x21
    UINT24 = 0x22
    UINT32 = 0x23
    UINT40 = 0x24
    UINT48 = 0x25
    UINT56 = 0x26
    UINT64 = 0x27
    INT8 = 0x28
    INT16 = 0x29
    INT24 = 0x2A
    INT32 = 0x2B
    INT40 = 0x2C
    INT48 = 0x2D
    INT56 = 0x2E
    INT64 = 0x2F
    ENUM8 = 0x30
    ENUM16 = 0x31
    SEMI = 0x38
    SINGLE = 0x39
    DOUBLE = 0x3A
    OCTSTR = 0x41
    STRING = 0x42
    OCTSTR16 = 0x43
    STRING16 = 0x44
    ARRAY = 0x48
    STRUCT = 0x4C
    SET = 0x50
    BAG = 0x51
    TIME_OF_DAY = 0xE0
    DATE = 0xE1
    UTC_TIME = 0xE2
    CLUSTER_ID = 0xE8
    ATTRIBUTE_ID = 0xE9
    BACNET_OID = 0xEA
    IEEE_ADDRESS = 0xF0
    SECURITY_KEY = 0xF1
    UNKNOWN = 0xFF


# Tags with a constant encoded width in bytes.
FIXED_WIDTHS: dict[int, int] = {
    DataType.NO_DATA: 0,
    DataType.DATA8: 1,
    DataType.DATA16: 2,
    DataType.DATA24: 3,
    DataType.DATA32: 4,
    DataType.DATA40: 5,
    DataType.DATA48: 6,
    DataType.DATA56: 7,
    DataType.DATA64: 8,
    DataType.BOOL: 1,
    DataType.MAP8: 1,
    DataType.MAP16: 2,
    DataType.MAP24: 3,
    DataType.MAP32: 4,
    DataType.MAP40: 5,
    DataType.MAP48: 6,
    DataType.MAP56: 7,
    DataType.MAP64: 8,
    DataType.UINT8: 1,
    DataType.UINT16: 2,
    DataType.UINT24: 3,
    DataType.UINT32: 4,
    DataType.UINT40: 5,
    DataType.UINT48: 6,
    DataType.UINT56: 7,
    DataType.UINT64: 8,
    DataType.INT8: 1,
    DataType.INT16: 2,
    DataType.INT24: 3,
    DataType.INT32: 4,
    DataType.INT40: 5,
    DataType.INT48: 6,
    DataType.INT56: 7,
    DataType.INT64: 8,
    DataType.ENUM8: 1,
    DataType.ENUM16: 2,
    DataType.SEMI: 2,
    DataType.SINGLE: 4,
    DataType.DOUBLE: 8,
    DataType.TIME_OF_DAY: 4,
    DataType.DATE: 4,
    DataType.UTC_TIME: 4,
    DataType.CLUSTER_ID: 2,
    DataType.ATTRIBUTE_ID: 2,
    DataType.BACNET_OID: 4,
    DataType.IEEE_ADDRESS: 8,
    DataType.SECURITY_KEY: 16,
    DataType.UNKNOWN: 0,
}

# Strings: tag -> width of the length prefix. An all-ones length marks an invalid value.
LENGTH_PREFIX_WIDTHS: dict[int, int] = {
    DataType.OCTSTR: 1,
    DataType.STRING: 1,
    DataType.OCTSTR16: 2,
    DataType.STRING16: 2,
}

CHARACTER_STRINGS: frozenset[int] = frozenset({DataType.STRING, DataType.STRING16})

# Element type (1 byte) + element count (2 bytes) + elements.
SEQUENCE_TYPES: frozenset[int] = frozenset({DataType.ARRAY, DataType.SET, DataType.BAG})

SIGNED_TYPES: frozenset[int] = frozenset(range(DataType.INT8, DataType.INT64 + 1))

FLOAT_FORMATS: dict[int, str] = {
    DataType.SEMI: "<e",
    DataType.SINGLE: "<f",
    DataType.DOUBLE: "<d",
}

INVALID_COUNT = 0xFFFF

# Arrays and structures may contain arrays and structures; deeper frames are rejected.
MAX_NESTING_DEPTH = 16


class TimeOfDay(NamedTuple):
    hours: int
    minutes: int
    seconds: int
    hundredths: int


class Date(NamedTuple):
    year: int
    month: int
    day: int
    weekday: int


@dataclass(frozen=True)
class ArrayValue:
    """Decoded array, set or bag. ``items`` is ``None`` for the invalid-count marker."""
    element_type: DataType
    items: Optional[tuple[Any, ...]]


@dataclass(frozen=True)
class StructValue:
    """Decoded structure. ``members`` is ``None`` for the invalid-count marker."""
    members: Optional[tuple[tuple[DataType, Any], ...]]


def lookup_data_type(tag: int, offset: int = 0, field: str = "data_type") -> DataType:
    """
    Resolve a tag byte to a ``DataType``.

    Raises:
        UnknownDataType: if the tag is not in the width table.
    """
    try:
        return DataType(tag)
    except ValueError:
        raise UnknownDataType(tag, offset, field) from None


def read_value(cursor: ByteCursor, data_type: DataType, field: str = "value", depth: int = 0) -> Any:
    """
    Decode one value of ``data_type`` at the cursor and advance past it.

    ``depth`` counts the arrays and structures enclosing this value.

    Raises:
        NestingTooDeep: if containers are nested more than ``MAX_NESTING_DEPTH`` levels.
    """
    if data_type in FIXED_WIDTHS:
        return _read_fixed(cursor, data_type, field)
    if data_type in LENGTH_PREFIX_WIDTHS:
        prefix = LENGTH_PREFIX_WIDTHS[data_type]
        length = cursor.uint(prefix, f"{field}.length")
        if length == (1 << (8 * prefix)) - 1:
            return None
        content = cursor.take(length, field)
        if data_type in CHARACTER_STRINGS:
            return content.decode("utf-8", errors="surrogateescape")
        return content
    if (data_type in SEQUENCE_TYPES or data_type == DataType.STRUCT) and depth >= MAX_NESTING_DEPTH:
        raise NestingTooDeep(cursor.offset, field, MAX_NESTING_DEPTH)
    if data_type in SEQUENCE_TYPES:
        tag_offset = cursor.offset
        element_type = lookup_data_type(cursor.u8(f"{field}.element_type"), tag_offset, f"{field}.element_type")
        count = cursor.u16(f"{field}.count")
        if count == INVALID_COUNT:
            return ArrayValue(element_type, None)
        items = tuple(read_value(cursor, element_type, f"{field}[{i}]", depth + 1) for i in range(count))
        return ArrayValue(element_type, items)
    if data_type == DataType.STRUCT:
        count = cursor.u16(f"{field}.count")
        if count == INVALID_COUNT:
            return StructValue(None)
        members = []
        for i in range(count):
            tag_offset = cursor.offset
            member_type = lookup_data_type(cursor.u8(f"{field}[{i}].data_type"), tag_offset, f"{field}[{i}].data_type")
            members.append((member_type, read_value(cursor, member_type, f"{field}[{i}]", depth + 1)))
        return StructValue(tuple(members))
    raise UnknownDataType(int(data_type), cursor.offset, field)


def _read_fixed(cursor: ByteCursor, data_type: DataType, field: str) -> Any:
    width = FIXED_WIDTHS[data_type]
    if width == 0:
        return None
    if data_type in FLOAT_FORMATS:
        return struct.unpack(FLOAT_FORMATS[data_type], cursor.take(width, field))[0]
    if data_type == DataType.BOOL:
        raw = cursor.u8(field)
        return None if raw == 0xFF else bool(raw)
    if data_type == DataType.TIME_OF_DAY:
        return TimeOfDay(*cursor.take(width, field))
    if data_type == DataType.DATE:
        year, month, day, weekday = cursor.take(width, field)
        return Date(1900 + year, month, day, weekday)
    if data_type == DataType.SECURITY_KEY:
        return cursor.take(width, field)
    if data_type in SIGNED_TYPES:
        return cursor.signed(width, field)
    return cursor.uint(width, field)


def decode_value(data: Buffer, offset: int, tag: int) -> tuple[Any, int]:
    """
    Decode the value of type ``tag`` starting at ``offset``.

    Args:
        data: The buffer holding the value.
        offset: Index of the first value byte (just after the type tag).
        tag: The data type tag byte.

    Returns:
        A ``(value, consumed)`` tuple.
    """
    cursor = ByteCursor(data, offset)
    value = read_value(cursor, lookup_data_type(tag, offset))
    return value, cursor.offset - offset


def encode_value(data_type: int, value: Any) -> bytes:
    """
    Encode ``value`` with the same width rules used for decoding.

    Args:
        data_type: The data type tag.
        value: A value shaped like the output of ``decode_value``.

    Returns:
        The encoded value bytes, without the type tag.

    Raises:
        ValueError: if a string is too long for its length prefix.
    """
    data_type = lookup_data_type(data_type)
    if data_type in FIXED_WIDTHS:
        return _encode_fixed(data_type, value)
    if data_type in LENGTH_PREFIX_WIDTHS:
        prefix = LENGTH_PREFIX_WIDTHS[data_type]
        if value is None:
            return b"\xff" * prefix
        content = value.encode("utf-8", errors="surrogateescape") if isinstance(value, str) else bytes(value)
        invalid_length = (1 << (8 * prefix)) - 1
        if len(content) >= invalid_length:
            raise ValueError(
                f"{data_type.name.lower()} holds at most {invalid_length - 1} bytes, got {len(content)}"
            )
        return len(content).to_bytes(prefix, byteorder="little") + content
    if data_type in SEQUENCE_TYPES:
        buf = bytearray([value.element_type])
        if value.items is None:
            buf += INVALID_COUNT.to_bytes(2, byteorder="little")
            return bytes(buf)
        buf += len(value.items).to_bytes(2, byteorder="little")
        for item in value.items:
            buf += encode_value(value.element_type, item)
        return bytes(buf)
    # DataType.STRUCT
    if value.members is None:
        return INVALID_COUNT.to_bytes(2, byteorder="little")
    buf = bytearray(len(value.members).to_bytes(2, byteorder="little"))
    for member_type, member_value in value.members:
        buf.append(member_type)
        buf += encode_value(member_type, member_value)
    return bytes(buf)


def _encode_fixed(data_type: DataType, value: Any) -> bytes:
    width = FIXED_WIDTHS[data_type]
    if width == 0:
        return b""
    if data_type in FLOAT_FORMATS:
        return struct.pack(FLOAT_FORMATS[data_type], value)
    if data_type == DataType.BOOL:
        return bytes([0xFF if value is None else int(bool(value))])
    if data_type == DataType.TIME_OF_DAY:
        return bytes(value)
    if data_type == DataType.DATE:
        return bytes([value.year - 1900, value.month, value.day, value.weekday])
    if data_type == DataType.SECURITY_KEY:
        return bytes(value)
    return int(value).to_bytes(width, byteorder="little", signed=data_type in SIGNED_TYPES)


def value_as_json(value: Any) -> Any:
    """Convert a decoded value into JSON-friendly primitives."""
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).hex()
    if isinstance(value, ArrayValue):
        return {
            "element_type": value.element_type.name.lower(),
            "items": None if value.items is None else [value_as_json(item) for item in value.items],
        }
    if isinstance(value, StructValue):
        if value.members is None:
            return None
        return [
            {"data_type": member_type.name.lower(), "value": value_as_json(member_value)}
            for member_type, member_value in value.members
        ]
    if isinstance(value, (TimeOfDay, Date)):
        return value._asdict()
    if isinstance(value, IntEnum):
        return int(value)
    return value
