from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Mapping

from zigbeelink.core.binary import Buffer
from zigbeelink.logging import get_logger, summarize_payload
from zigbeelink.parsing.frames import decode_attribute_response
from zigbeelink.parsing.zdo import (
    BindResponse,
    ClusterCommandNotSent,
    NodeDescriptorResponse,
    SimpleDescriptorResponse,
    decode_device_joined,
    decode_end_device_announce,
)

DEVICE_JOINED = 0x1011
NODE_DESCRIPTOR_RESPONSE = 0x1014
SIMPLE_DESCRIPTOR_RESPONSE = 0x1015
END_DEVICE_ANNOUNCE = 0x101B
BIND_RESPONSE = 0x1020
ATTRIBUTE_RESPONSE = 0x1031
CLUSTER_COMMAND_NOT_SENT = 0x9030

# Coordinator message type -> payload decoder.
MESSAGE_REGISTRY: Mapping[int, Callable[[Buffer], Any]] = MappingProxyType(
    {
        DEVICE_JOINED: decode_device_joined,
        NODE_DESCRIPTOR_RESPONSE: NodeDescriptorResponse.decode,
        SIMPLE_DESCRIPTOR_RESPONSE: SimpleDescriptorResponse.decode,
        END_DEVICE_ANNOUNCE: decode_end_device_announce,
        BIND_RESPONSE: BindResponse.decode,
        ATTRIBUTE_RESPONSE: decode_attribute_response,
        CLUSTER_COMMAND_NOT_SENT: ClusterCommandNotSent.decode,
    }
)


@dataclass(frozen=True)
class UnrecognizedMessage:
    message_type: int
    raw: bytes

    def as_dict(self) -> dict[str, Any]:
        return {"kind": "unrecognized_message", "message_type": self.message_type, "raw": self.raw.hex()}


def decode_message(message_type: int, payload: Buffer) -> Any:
    """
    Decode a coordinator payload by its 16-bit message type.

    Args:
        message_type: The message type from the transport frame.
        payload: The payload with framing and checksum already removed.

    Returns:
        The decoded message, or ``UnrecognizedMessage`` for unregistered types.
    """
    decoder = MESSAGE_REGISTRY.get(message_type)
    if decoder is None:
        raw = bytes(payload)
        get_logger().info(
            "unrecognized_message",
            extra={"details": {"message_type": message_type, "payload": summarize_payload(raw)}},
        )
        return UnrecognizedMessage(message_type=message_type, raw=raw)
    return decoder(payload)
