"""
Header decoder for attribute-bearing coordinator frames.

Layout: ``[control:1] ([manufacturer:2]) [src_addr:2] [src_ep:1] [cluster:2] [command:1]``.
The manufacturer code is present only when bit 6 of the control byte is set,
which moves every later field two bytes further into the frame.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from zigbeelink.core.binary import Buffer, ByteCursor, get_bit
from zigbeelink.domain.clusters import ClusterId, cluster_id

MANUFACTURER_SPECIFIC_BIT = 6
DISABLE_DEFAULT_RESPONSE_BIT = 3
DIRECTION_BIT = 4
ADDRESS_MODE_MASK = 0x03
GROUP_ADDRESS_MODE = 0x01


@dataclass(frozen=True)
class FrameHeader:
    frame_control: int
    is_manufacturer_specific: bool
    manufacturer_code: int
    source_address: int
    source_endpoint: int
    cluster_id: Union[ClusterId, int]
    command_id: int
    payload_offset: int

    @property
    def is_group_address(self) -> bool:
        return (self.frame_control & ADDRESS_MODE_MASK) == GROUP_ADDRESS_MODE

    @property
    def disable_default_response(self) -> bool:
        return get_bit(self.frame_control, DISABLE_DEFAULT_RESPONSE_BIT)

    @property
    def direction_server_to_client(self) -> bool:
        return get_bit(self.frame_control, DIRECTION_BIT)

    def as_dict(self) -> dict[str, Any]:
        return {
            "frame_control": self.frame_control,
            "is_manufacturer_specific": self.is_manufacturer_specific,
            "manufacturer_code": self.manufacturer_code,
            "source_address": self.source_address,
            "source_endpoint": self.source_endpoint,
            "cluster_id": int(self.cluster_id),
            "cluster": self.cluster_id.name.lower() if isinstance(self.cluster_id, ClusterId) else None,
            "command_id": self.command_id,
        }


def decode_frame_header(data: Buffer) -> FrameHeader:
    """
    Decode the header fields of an attribute response.

    Args:
        data: The complete frame payload.

    Returns:
        The decoded ``FrameHeader``; ``payload_offset`` points at the first
        byte after the command id.

    Raises:
        TruncatedPayload: if ``data`` is too short for the header implied by
            the manufacturer-specific flag.
    """
    cursor = ByteCursor(data)
    frame_control = cursor.u8("frame_control")
    is_manufacturer_specific = get_bit(frame_control, MANUFACTURER_SPECIFIC_BIT)
    manufacturer_code = cursor.u16("manufacturer_code") if is_manufacturer_specific else 0
    source_address = cursor.u16("source_address")
    source_endpoint = cursor.u8("source_endpoint")
    cluster = cluster_id(cursor.u16("cluster_id"))
    # Byte 6, or byte 8 with a manufacturer code: the shift applies to the command id too.
    command_id = cursor.u8("command_id")
    return FrameHeader(
        frame_control=frame_control,
        is_manufacturer_specific=is_manufacturer_specific,
        manufacturer_code=manufacturer_code,
        source_address=source_address,
        source_endpoint=source_endpoint,
        cluster_id=cluster,
        command_id=command_id,
        payload_offset=cursor.offset,
    )
