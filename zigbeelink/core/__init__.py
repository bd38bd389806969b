"""
Low-level building blocks shared by every decoder: bounds-checked byte
readers and the decode error hierarchy.
"""
from zigbeelink.core.binary import ByteCursor, get_bit, read_uint
from zigbeelink.core.errors import (
    DecodeError,
    InconsistentAttributeCount,
    NestingTooDeep,
    TruncatedPayload,
    UnknownDataType,
)

__all__ = [
    "ByteCursor",
    "get_bit",
    "read_uint",
    "DecodeError",
    "InconsistentAttributeCount",
    "NestingTooDeep",
    "TruncatedPayload",
    "UnknownDataType",
]
