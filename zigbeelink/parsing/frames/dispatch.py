from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional

from zigbeelink.config import DecoderSettings
from zigbeelink.core.binary import Buffer
from zigbeelink.core.errors import DecodeError
from zigbeelink.logging import get_logger, summarize_payload
from zigbeelink.parsing.frames.header import decode_frame_header
from zigbeelink.parsing.frames.responses import (
    AttributeResponse,
    DefaultResponse,
    DiscoverAttributesResponse,
    ReadAttributesResponse,
    ReportAttributesResponse,
    UnrecognizedResponse,
)

READ_ATTRIBUTES_RESPONSE = 0x01
REPORT_ATTRIBUTES = 0x0A
DEFAULT_RESPONSE = 0x0B
DISCOVER_ATTRIBUTES_RESPONSE = 0x0D

# Command id -> response variant.
COMMAND_REGISTRY: Mapping[int, type[AttributeResponse]] = MappingProxyType(
    {
        READ_ATTRIBUTES_RESPONSE: ReadAttributesResponse,
        REPORT_ATTRIBUTES: ReportAttributesResponse,
        DEFAULT_RESPONSE: DefaultResponse,
        DISCOVER_ATTRIBUTES_RESPONSE: DiscoverAttributesResponse,
    }
)


def decode_attribute_response(
    data: Buffer,
    settings: Optional[DecoderSettings] = None,
) -> AttributeResponse:
    """
    Decode an attribute-bearing frame into its response variant.

    Args:
        data: The complete frame payload.
        settings: Decoder settings; defaults to ``get_settings()``.

    Returns:
        The variant registered for the frame's command id, or an
        ``UnrecognizedResponse`` carrying the header and raw bytes.

    Raises:
        DecodeError: if the header or the variant body cannot be decoded.
    """
    raw = bytes(data)
    logger = get_logger()
    try:
        header = decode_frame_header(raw)
        variant = COMMAND_REGISTRY.get(header.command_id)
        if variant is None:
            logger.info(
                "unrecognized_command",
                extra={"details": {"command_id": header.command_id, "payload": summarize_payload(raw)}},
            )
            return UnrecognizedResponse.decode(header, raw)
        return variant.decode(header, raw, settings=settings)
    except DecodeError as exc:
        logger.warning(
            "attribute_response_failed",
            extra={"details": {"error": str(exc), "offset": exc.offset, "field": exc.field,
                               "payload": summarize_payload(raw)}},
        )
        raise
