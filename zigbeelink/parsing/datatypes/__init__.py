"""
Width table for ZCL attribute data types.

This sub-package maps each one-byte type tag to either a constant width or a
rule that derives the width from the buffer (length-prefixed strings and
count-prefixed arrays and structures), and decodes the value it covers.
"""
from zigbeelink.parsing.datatypes.decode import (
    ArrayValue,
    DataType,
    Date,
    FIXED_WIDTHS,
    LENGTH_PREFIX_WIDTHS,
    MAX_NESTING_DEPTH,
    SEQUENCE_TYPES,
    StructValue,
    TimeOfDay,
    decode_value,
    encode_value,
    lookup_data_type,
    read_value,
    value_as_json,
)

__all__ = [
    "ArrayValue",
    "DataType",
    "Date",
    "FIXED_WIDTHS",
    "LENGTH_PREFIX_WIDTHS",
    "MAX_NESTING_DEPTH",
    "SEQUENCE_TYPES",
    "StructValue",
    "TimeOfDay",
    "decode_value",
    "encode_value",
    "lookup_data_type",
    "read_value",
    "value_as_json",
]
