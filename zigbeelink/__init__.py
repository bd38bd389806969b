from zigbeelink.config import DecoderSettings, get_settings
from zigbeelink.core import DecodeError, InconsistentAttributeCount, NestingTooDeep, TruncatedPayload, UnknownDataType
from zigbeelink.parsing.attributes import AttributeCollection, AttributeRecord, RecordShape
from zigbeelink.parsing.datatypes import DataType
from zigbeelink.parsing.frames import COMMAND_REGISTRY, FrameHeader, decode_attribute_response, decode_frame_header
from zigbeelink.parsing.messages import MESSAGE_REGISTRY, decode_message
from importlib.metadata import PackageNotFoundError, version

__all__ = [
    "DecoderSettings",
    "get_settings",
    "DecodeError",
    "InconsistentAttributeCount",
    "NestingTooDeep",
    "TruncatedPayload",
    "UnknownDataType",
    "AttributeCollection",
    "AttributeRecord",
    "RecordShape",
    "DataType",
    "COMMAND_REGISTRY",
    "FrameHeader",
    "decode_attribute_response",
    "decode_frame_header",
    "MESSAGE_REGISTRY",
    "decode_message",
]

try:
    __version__ = version("zigbeelink")
except PackageNotFoundError:
    __version__ = "0.0.0"
