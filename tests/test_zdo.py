"""Tests for device-object message decoders and cluster lists."""
import pytest

from zigbeelink.core.errors import TruncatedPayload
from zigbeelink.domain.clusters import ClusterId, Status
from zigbeelink.parsing.zdo import (
    AnnounceKind,
    BindResponse,
    BindStatus,
    ClusterCommandNotSent,
    CommandStatus,
    NodeDescriptorResponse,
    NodeType,
    SimpleDescriptorResponse,
    decode_cluster_lists,
    decode_device_joined,
    decode_end_device_announce,
)


def _u16(value: int) -> bytes:
    return value.to_bytes(2, "little")


def _simple_descriptor(inputs: list[int], outputs: list[int], status: int = 0x00) -> bytes:
    """Helper: build a simple descriptor response payload."""
    body = bytes([0x01]) + _u16(0x0104) + _u16(0x0100) + bytes([0x01])
    body += bytes([len(inputs)]) + b"".join(_u16(c) for c in inputs)
    body += bytes([len(outputs)]) + b"".join(_u16(c) for c in outputs)
    return bytes([status]) + _u16(0xABCD) + bytes([len(body)]) + body


def test_cluster_lists_both_populated():
    data = bytes([0x02]) + _u16(0x0000) + _u16(0x0006) + bytes([0x01]) + _u16(0x0019)
    inputs, outputs, end = decode_cluster_lists(data, 0)
    assert inputs == (ClusterId.BASIC, ClusterId.ON_OFF)
    assert outputs == (ClusterId.OTA_UPGRADE,)
    assert end == len(data)


def test_cluster_lists_empty_input():
    data = bytes([0x00, 0x02]) + _u16(0x0003) + _u16(0x0004)
    inputs, outputs, end = decode_cluster_lists(data, 0)
    assert inputs == ()
    assert outputs == (ClusterId.IDENTIFY, ClusterId.GROUPS)
    assert end == 6


def test_cluster_lists_both_empty():
    assert decode_cluster_lists(b"\x00\x00", 0) == ((), (), 2)


def test_cluster_lists_unknown_id_kept_as_int():
    data = bytes([0x01]) + _u16(0xFC01) + bytes([0x00])
    inputs, _, _ = decode_cluster_lists(data, 0)
    assert inputs == (0xFC01,)


def test_cluster_lists_truncated_output():
    data = bytes([0x00, 0x02]) + _u16(0x0003)
    with pytest.raises(TruncatedPayload) as excinfo:
        decode_cluster_lists(data, 0)
    assert excinfo.value.field == "output_cluster[1]"


def test_simple_descriptor():
    data = _simple_descriptor([0x0000, 0x0006, 0x0008], [0x0019])
    resp = SimpleDescriptorResponse.decode(data)
    assert resp.success
    assert resp.address == 0xABCD
    assert resp.endpoint == 0x01
    assert resp.profile_id == 0x0104
    assert resp.device_id == 0x0100
    assert resp.device_version == 0x01
    assert resp.input_clusters == (ClusterId.BASIC, ClusterId.ON_OFF, ClusterId.LEVEL_CONTROL)
    assert resp.output_clusters == (ClusterId.OTA_UPGRADE,)
    assert resp.as_dict()["input_clusters"] == [0x0000, 0x0006, 0x0008]


def test_simple_descriptor_failure_has_no_descriptor():
    data = bytes([0x83]) + _u16(0xABCD) + bytes([0x00])
    resp = SimpleDescriptorResponse.decode(data)
    assert not resp.success
    assert resp.endpoint is None
    assert resp.input_clusters == ()


def test_node_descriptor():
    data = bytes([0x00]) + _u16(0x1234) + _u16(0x0001) + bytes([0x8E]) + _u16(0x115F)
    resp = NodeDescriptorResponse.decode(data)
    assert resp.success
    assert resp.source_address == 0x1234
    assert resp.node_type is NodeType.ROUTER
    assert resp.mac_capabilities == 0x8E
    assert resp.manufacturer_code == 0x115F


def test_node_descriptor_failure_short_payload():
    resp = NodeDescriptorResponse.decode(bytes([Status.NOT_FOUND]) + _u16(0x1234))
    assert not resp.success
    assert resp.node_type is None


def test_end_device_announce_and_device_joined_share_layout():
    data = _u16(0x1A2B) + bytes.fromhex("0807060504030201") + bytes([0x8E])
    announce = decode_end_device_announce(data)
    joined = decode_device_joined(data)
    assert announce.kind is AnnounceKind.END_DEVICE_ANNOUNCE
    assert joined.kind is AnnounceKind.DEVICE_JOINED
    for msg in (announce, joined):
        assert msg.short_address == 0x1A2B
        assert msg.ieee_address == 0x0102030405060708
        caps = msg.capabilities
        assert caps.alternate_coordinator is False
        assert caps.full_function_device is True
        assert caps.mains_powered is True
        assert caps.rx_on_when_idle is True
        assert caps.high_security is False
        assert caps.allocate_address is True
    assert announce.as_dict()["ieee_address"] == "0102030405060708"


def test_announce_truncated():
    with pytest.raises(TruncatedPayload) as excinfo:
        decode_end_device_announce(_u16(0x1A2B) + b"\x01\x02")
    assert excinfo.value.field == "ieee_address"


def test_bind_response():
    resp = BindResponse.decode(bytes([0x02]) + _u16(0x4321))
    assert resp.status is BindStatus.TABLE_FULL
    assert resp.source_address == 0x4321
    assert not resp.success
    assert resp.as_dict()["status"] == "table_full"


def test_cluster_command_not_sent():
    data = bytes([0x40]) + _u16(0x115F) + _u16(0x1234) + bytes([0x01]) + _u16(0x0006) + bytes([0x02, 0x0A])
    resp = ClusterCommandNotSent.decode(data)
    assert resp.header.is_manufacturer_specific
    assert resp.header.manufacturer_code == 0x115F
    assert resp.header.source_address == 0x1234
    assert resp.header.cluster_id is ClusterId.ON_OFF
    assert resp.header.command_id == 0x02
    assert resp.status is CommandStatus.UNSUPPORTED_CLUSTER_COMMAND
