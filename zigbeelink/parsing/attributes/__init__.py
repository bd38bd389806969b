"""
Attribute record decoding.

This sub-package decodes the three attribute record layouts (discovery,
read-with-status, report) and assembles them into an ``AttributeCollection``
by looping over the count the frame declares.
"""
from zigbeelink.parsing.attributes.collection import AttributeCollection, decode_records
from zigbeelink.parsing.attributes.record import AttributeRecord, RecordShape, decode_record, encode_record

__all__ = [
    "AttributeCollection",
    "AttributeRecord",
    "RecordShape",
    "decode_record",
    "decode_records",
    "encode_record",
]
