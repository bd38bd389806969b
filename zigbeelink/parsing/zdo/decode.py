"""
Decoders for device-object (ZDO) coordinator messages.

These frames have fixed layouts, apart from the simple descriptor whose two
cluster lists are each prefixed by an element count.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any, Optional, Union

from zigbeelink.core.binary import Buffer, ByteCursor, get_bit
from zigbeelink.domain.clusters import ClusterId, Status, cluster_id, status_name
from zigbeelink.parsing.frames.header import FrameHeader, decode_frame_header

ClusterList = tuple[Union[ClusterId, int], ...]


class NodeType(IntEnum):
    COORDINATOR = 0
    ROUTER = 1
    END_DEVICE = 2


class BindStatus(IntEnum):
    SUCCESS = 0
    NOT_SUPPORTED = 1
    TABLE_FULL = 2


class CommandStatus(IntEnum):
    UNSUPPORTED_CLUSTER_COMMAND = 0x0A
    INSUFFICIENT_SPACE = 0x14
    SOFTWARE_FAILURE = 0x2F


class AnnounceKind(str, Enum):
    END_DEVICE_ANNOUNCE = "end_device_announce"
    DEVICE_JOINED = "device_joined"


def _as_enum(enum_cls, value: int):
    try:
        return enum_cls(value)
    except ValueError:
        return value


def _name(value) -> Optional[str]:
    return value.name.lower() if isinstance(value, Enum) else None


def read_cluster_list(cursor: ByteCursor, field: str) -> ClusterList:
    count = cursor.u8(f"{field}_count")
    return tuple(cluster_id(cursor.u16(f"{field}[{i}]")) for i in range(count))


def decode_cluster_lists(data: Buffer, offset: int) -> tuple[ClusterList, ClusterList, int]:
    """
    Decode the input and output cluster lists of a simple descriptor.

    Layout: ``[in_count:1] [in_ids:2*in_count] [out_count:1] [out_ids:2*out_count]``.

    Args:
        data: The frame buffer.
        offset: Index of the input cluster count byte.

    Returns:
        A ``(input_clusters, output_clusters, end_offset)`` tuple.
    """
    cursor = ByteCursor(data, offset)
    input_clusters = read_cluster_list(cursor, "input_cluster")
    output_clusters = read_cluster_list(cursor, "output_cluster")
    return input_clusters, output_clusters, cursor.offset


@dataclass(frozen=True)
class DeviceCapabilities:
    """MAC capability flags announced by a joining device."""
    raw: int

    @property
    def alternate_coordinator(self) -> bool:
        return get_bit(self.raw, 0)

    @property
    def full_function_device(self) -> bool:
        return get_bit(self.raw, 1)

    @property
    def mains_powered(self) -> bool:
        return get_bit(self.raw, 2)

    @property
    def rx_on_when_idle(self) -> bool:
        return get_bit(self.raw, 3)

    @property
    def high_security(self) -> bool:
        return get_bit(self.raw, 6)

    @property
    def allocate_address(self) -> bool:
        return get_bit(self.raw, 7)

    def as_dict(self) -> dict[str, bool]:
        return {
            "alternate_coordinator": self.alternate_coordinator,
            "full_function_device": self.full_function_device,
            "mains_powered": self.mains_powered,
            "rx_on_when_idle": self.rx_on_when_idle,
            "high_security": self.high_security,
            "allocate_address": self.allocate_address,
        }


@dataclass(frozen=True)
class DeviceAnnounce:
    """
    A device announcing itself on the network.

    The same layout serves end-device announcements and the coordinator's
    device-joined notification; ``kind`` tells them apart.
    """
    kind: AnnounceKind
    short_address: int
    ieee_address: int
    capabilities: DeviceCapabilities
    raw: bytes

    def as_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "short_address": self.short_address,
            "ieee_address": f"{self.ieee_address:016x}",
            "capabilities": self.capabilities.as_dict(),
        }


def _decode_announce(kind: AnnounceKind, data: Buffer) -> DeviceAnnounce:
    cursor = ByteCursor(data)
    return DeviceAnnounce(
        kind=kind,
        short_address=cursor.u16("short_address"),
        ieee_address=cursor.u64("ieee_address"),
        capabilities=DeviceCapabilities(cursor.u8("capabilities")),
        raw=cursor.data,
    )


def decode_end_device_announce(data: Buffer) -> DeviceAnnounce:
    return _decode_announce(AnnounceKind.END_DEVICE_ANNOUNCE, data)


def decode_device_joined(data: Buffer) -> DeviceAnnounce:
    return _decode_announce(AnnounceKind.DEVICE_JOINED, data)


@dataclass(frozen=True)
class NodeDescriptorResponse:
    status: int
    source_address: int
    node_type: Optional[Union[NodeType, int]]
    mac_capabilities: Optional[int]
    manufacturer_code: Optional[int]
    raw: bytes

    @property
    def success(self) -> bool:
        return self.status == Status.SUCCESS

    @classmethod
    def decode(cls, data: Buffer) -> "NodeDescriptorResponse":
        """Layout: ``[status:1] [addr:2] [node_type:2] [mac_flags:1] [manufacturer:2]``."""
        cursor = ByteCursor(data)
        status = cursor.u8("status")
        source_address = cursor.u16("source_address")
        if status != Status.SUCCESS and cursor.at_end():
            return cls(status, source_address, None, None, None, cursor.data)
        return cls(
            status=status,
            source_address=source_address,
            node_type=_as_enum(NodeType, cursor.u16("node_type")),
            mac_capabilities=cursor.u8("mac_capabilities"),
            manufacturer_code=cursor.u16("manufacturer_code"),
            raw=cursor.data,
        )

    def as_dict(self) -> dict[str, Any]:
        return {
            "kind": "node_descriptor",
            "status": status_name(self.status),
            "source_address": self.source_address,
            "node_type": _name(self.node_type) or self.node_type,
            "mac_capabilities": self.mac_capabilities,
            "manufacturer_code": self.manufacturer_code,
        }


@dataclass(frozen=True)
class SimpleDescriptorResponse:
    status: int
    address: int
    length: int
    endpoint: Optional[int]
    profile_id: Optional[int]
    device_id: Optional[int]
    device_version: Optional[int]
    input_clusters: ClusterList
    output_clusters: ClusterList
    raw: bytes

    @property
    def success(self) -> bool:
        return self.status == Status.SUCCESS

    @classmethod
    def decode(cls, data: Buffer) -> "SimpleDescriptorResponse":
        """
        Layout: ``[status:1] [addr:2] [length:1] [endpoint:1] [profile:2]
        [device:2] [version:1]`` followed by the two cluster lists.
        """
        cursor = ByteCursor(data)
        status = cursor.u8("status")
        address = cursor.u16("address")
        length = cursor.u8("length")
        if status != Status.SUCCESS or length == 0:
            return cls(status, address, length, None, None, None, None, (), (), cursor.data)
        endpoint = cursor.u8("endpoint")
        profile_id = cursor.u16("profile_id")
        device_id = cursor.u16("device_id")
        device_version = cursor.u8("device_version")
        input_clusters, output_clusters, _ = decode_cluster_lists(cursor.data, cursor.offset)
        return cls(
            status=status,
            address=address,
            length=length,
            endpoint=endpoint,
            profile_id=profile_id,
            device_id=device_id,
            device_version=device_version,
            input_clusters=input_clusters,
            output_clusters=output_clusters,
            raw=cursor.data,
        )

    def as_dict(self) -> dict[str, Any]:
        return {
            "kind": "simple_descriptor",
            "status": status_name(self.status),
            "address": self.address,
            "endpoint": self.endpoint,
            "profile_id": self.profile_id,
            "device_id": self.device_id,
            "device_version": self.device_version,
            "input_clusters": [int(c) for c in self.input_clusters],
            "output_clusters": [int(c) for c in self.output_clusters],
        }


@dataclass(frozen=True)
class BindResponse:
    status: Union[BindStatus, int]
    source_address: int
    raw: bytes

    @property
    def success(self) -> bool:
        return self.status == BindStatus.SUCCESS

    @classmethod
    def decode(cls, data: Buffer) -> "BindResponse":
        cursor = ByteCursor(data)
        status = _as_enum(BindStatus, cursor.u8("status"))
        return cls(status=status, source_address=cursor.u16("source_address"), raw=cursor.data)

    def as_dict(self) -> dict[str, Any]:
        return {
            "kind": "bind",
            "status": _name(self.status) or int(self.status),
            "source_address": self.source_address,
        }


@dataclass(frozen=True)
class ClusterCommandNotSent:
    """The coordinator could not deliver a cluster command; carries the frame header and a status."""
    header: FrameHeader
    status: Union[CommandStatus, int]
    raw: bytes

    @classmethod
    def decode(cls, data: Buffer) -> "ClusterCommandNotSent":
        raw = bytes(data)
        header = decode_frame_header(raw)
        status = _as_enum(CommandStatus, ByteCursor(raw, header.payload_offset).u8("status"))
        return cls(header=header, status=status, raw=raw)

    def as_dict(self) -> dict[str, Any]:
        return {
            "kind": "cluster_command_not_sent",
            "header": self.header.as_dict(),
            "is_group_address": self.header.is_group_address,
            "disable_default_response": self.header.disable_default_response,
            "direction_server_to_client": self.header.direction_server_to_client,
            "status": _name(self.status) or int(self.status),
        }
