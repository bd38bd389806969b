"""
Device-object messages: announcements, descriptors and bind results.

These are fixed-layout frames decoded with the same cursor primitives as the
attribute responses. The simple descriptor also carries the count-prefixed
input and output cluster lists.
"""
from zigbeelink.parsing.zdo.decode import (
    AnnounceKind,
    BindResponse,
    BindStatus,
    ClusterCommandNotSent,
    CommandStatus,
    DeviceAnnounce,
    DeviceCapabilities,
    NodeDescriptorResponse,
    NodeType,
    SimpleDescriptorResponse,
    decode_cluster_lists,
    decode_device_joined,
    decode_end_device_announce,
)

__all__ = [
    "AnnounceKind",
    "BindResponse",
    "BindStatus",
    "ClusterCommandNotSent",
    "CommandStatus",
    "DeviceAnnounce",
    "DeviceCapabilities",
    "NodeDescriptorResponse",
    "NodeType",
    "SimpleDescriptorResponse",
    "decode_cluster_lists",
    "decode_device_joined",
    "decode_end_device_announce",
]
