"""Tests for the attribute frame header decoder."""
import pytest

from zigbeelink.core.errors import TruncatedPayload
from zigbeelink.domain.clusters import ClusterId
from zigbeelink.parsing.frames import decode_frame_header


def test_header_without_manufacturer_code():
    data = bytes([0x18, 0x34, 0x12, 0x01, 0x06, 0x00, 0x0A, 0x00])
    header = decode_frame_header(data)
    assert header.is_manufacturer_specific is False
    assert header.manufacturer_code == 0
    assert header.source_address == 0x1234
    assert header.source_endpoint == 0x01
    assert header.cluster_id is ClusterId.ON_OFF
    assert header.command_id == 0x0A
    assert header.payload_offset == 7


def test_header_with_manufacturer_code_shifts_fields():
    data = bytes([0x40, 0x5F, 0x11, 0x34, 0x12, 0x01, 0x06, 0x00, 0x0A, 0x00])
    header = decode_frame_header(data)
    assert header.is_manufacturer_specific is True
    assert header.manufacturer_code == 0x115F
    assert header.source_address == 0x1234
    assert header.source_endpoint == 0x01
    assert header.cluster_id is ClusterId.ON_OFF
    assert header.command_id == 0x0A
    assert header.payload_offset == 9


def test_header_unknown_cluster_kept_as_int():
    data = bytes([0x00, 0x01, 0x00, 0x02, 0x00, 0xFC, 0x01])
    header = decode_frame_header(data)
    assert header.cluster_id == 0xFC00
    assert not isinstance(header.cluster_id, ClusterId)
    assert header.as_dict()["cluster"] is None


def test_header_frame_control_flags():
    header = decode_frame_header(bytes([0x19, 0x00, 0x00, 0x01, 0x00, 0x00, 0x0B]))
    assert header.is_group_address is True
    assert header.disable_default_response is True
    assert header.direction_server_to_client is True

    header = decode_frame_header(bytes([0x02, 0x00, 0x00, 0x01, 0x00, 0x00, 0x0B]))
    assert header.is_group_address is False
    assert header.disable_default_response is False
    assert header.direction_server_to_client is False


def test_header_exactly_long_enough():
    header = decode_frame_header(bytes([0x00, 0x00, 0x00, 0x01, 0x00, 0x00, 0x01]))
    assert header.payload_offset == 7


def test_header_truncated_command_id():
    with pytest.raises(TruncatedPayload) as excinfo:
        decode_frame_header(bytes([0x00, 0x34, 0x12, 0x01, 0x06, 0x00]))
    assert excinfo.value.field == "command_id"
    assert excinfo.value.offset == 6


def test_header_truncated_when_flag_requires_more():
    # Long enough unshifted, two bytes short once the manufacturer code is present.
    with pytest.raises(TruncatedPayload) as excinfo:
        decode_frame_header(bytes([0x40, 0x5F, 0x11, 0x34, 0x12, 0x01, 0x06]))
    assert excinfo.value.field == "cluster_id"
    assert excinfo.value.offset == 6


def test_header_empty_buffer():
    with pytest.raises(TruncatedPayload) as excinfo:
        decode_frame_header(b"")
    assert excinfo.value.field == "frame_control"
