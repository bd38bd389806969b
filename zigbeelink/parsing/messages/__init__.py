"""
Coordinator message routing.

Maps the coordinator's 16-bit message type to the decoder for its payload.
"""
from zigbeelink.parsing.messages.registry import (
    ATTRIBUTE_RESPONSE,
    BIND_RESPONSE,
    CLUSTER_COMMAND_NOT_SENT,
    DEVICE_JOINED,
    END_DEVICE_ANNOUNCE,
    MESSAGE_REGISTRY,
    NODE_DESCRIPTOR_RESPONSE,
    SIMPLE_DESCRIPTOR_RESPONSE,
    UnrecognizedMessage,
    decode_message,
)

__all__ = [
    "ATTRIBUTE_RESPONSE",
    "BIND_RESPONSE",
    "CLUSTER_COMMAND_NOT_SENT",
    "DEVICE_JOINED",
    "END_DEVICE_ANNOUNCE",
    "MESSAGE_REGISTRY",
    "NODE_DESCRIPTOR_RESPONSE",
    "SIMPLE_DESCRIPTOR_RESPONSE",
    "UnrecognizedMessage",
    "decode_message",
]
