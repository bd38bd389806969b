"""
Attribute-bearing response frames.

This sub-package decodes the frame header (with its manufacturer-specific
offset shift), the read/report/discover/default response variants, and the
static command-id table that selects between them.
"""
from zigbeelink.parsing.frames.dispatch import COMMAND_REGISTRY, decode_attribute_response
from zigbeelink.parsing.frames.header import FrameHeader, decode_frame_header
from zigbeelink.parsing.frames.responses import (
    AttributeResponse,
    DefaultResponse,
    DiscoverAttributesResponse,
    ReadAttributesResponse,
    ReportAttributesResponse,
    UnrecognizedResponse,
)

__all__ = [
    "COMMAND_REGISTRY",
    "decode_attribute_response",
    "FrameHeader",
    "decode_frame_header",
    "AttributeResponse",
    "DefaultResponse",
    "DiscoverAttributesResponse",
    "ReadAttributesResponse",
    "ReportAttributesResponse",
    "UnrecognizedResponse",
]
