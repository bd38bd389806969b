"""
Decoder for single attribute records.

A record's layout depends on the response that carries it, not on its own
content, so the caller picks the ``RecordShape``:

- ``DISCOVERY``: ``[attr_id:2] [type:1]``
- ``READ``: ``[attr_id:2] [status:1]`` then ``[type:1] [value]`` on success
- ``REPORT``: ``[attr_id:2] [type:1] [value]``
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from zigbeelink.core.binary import Buffer, ByteCursor
from zigbeelink.domain.clusters import Status, status_name
from zigbeelink.parsing.datatypes import DataType, encode_value, lookup_data_type, read_value, value_as_json


class RecordShape(str, Enum):
    DISCOVERY = "discovery"
    READ = "read"
    REPORT = "report"


@dataclass(frozen=True)
class AttributeRecord:
    """
    One decoded attribute record.

    Attributes:
        attribute_id: The 16-bit attribute identifier.
        data_type: The value's type, or ``None`` when a read failed.
        consumed: Bytes the record occupied in the frame.
        status: The read status; only set for ``READ`` shaped records.
        value: The decoded value; ``None`` for discovery records and failed reads.
    """
    attribute_id: int
    data_type: Optional[DataType]
    consumed: int
    status: Optional[int] = None
    value: Any = None

    @property
    def succeeded(self) -> bool:
        return self.status is None or self.status == Status.SUCCESS

    def as_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "attribute_id": self.attribute_id,
            "data_type": self.data_type.name.lower() if self.data_type is not None else None,
            "consumed": self.consumed,
        }
        if self.status is not None:
            result["status"] = status_name(self.status)
        result["value"] = value_as_json(self.value)
        return result


def decode_record(data: Buffer, offset: int, shape: RecordShape) -> AttributeRecord:
    """
    Decode the record that starts at ``offset``.

    Args:
        data: The full frame buffer.
        offset: Index of the record's first byte.
        shape: The record layout used by the enclosing response.

    Returns:
        The decoded ``AttributeRecord``; ``offset + record.consumed`` is the
        start of the next record.

    Raises:
        TruncatedPayload: if the record runs past the end of ``data``.
        UnknownDataType: if the type tag is not in the width table.
    """
    cursor = ByteCursor(data, offset)
    attribute_id = cursor.u16("attribute_id")

    status = None
    if shape is RecordShape.READ:
        status = cursor.u8("status")
        if status != Status.SUCCESS:
            return AttributeRecord(attribute_id, None, cursor.offset - offset, status=status)

    tag_offset = cursor.offset
    data_type = lookup_data_type(cursor.u8("data_type"), tag_offset)
    if shape is RecordShape.DISCOVERY:
        return AttributeRecord(attribute_id, data_type, cursor.offset - offset)

    value = read_value(cursor, data_type)
    return AttributeRecord(attribute_id, data_type, cursor.offset - offset, status=status, value=value)


def encode_record(record: AttributeRecord, shape: RecordShape) -> bytes:
    """Encode ``record`` back to its wire layout for ``shape``."""
    buf = bytearray(record.attribute_id.to_bytes(2, byteorder="little"))
    if shape is RecordShape.READ:
        status = Status.SUCCESS if record.status is None else record.status
        buf.append(status)
        if status != Status.SUCCESS:
            return bytes(buf)
    if record.data_type is None:
        raise ValueError(f"attribute 0x{record.attribute_id:04x} has no data type to encode")
    buf.append(record.data_type)
    if shape is not RecordShape.DISCOVERY:
        buf += encode_value(record.data_type, record.value)
    return bytes(buf)
