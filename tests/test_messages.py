"""Tests for coordinator message routing."""
import pytest

from zigbeelink.parsing.frames import ReportAttributesResponse
from zigbeelink.parsing.messages import (
    ATTRIBUTE_RESPONSE,
    BIND_RESPONSE,
    DEVICE_JOINED,
    END_DEVICE_ANNOUNCE,
    MESSAGE_REGISTRY,
    SIMPLE_DESCRIPTOR_RESPONSE,
    UnrecognizedMessage,
    decode_message,
)
from zigbeelink.parsing.zdo import AnnounceKind, BindResponse, SimpleDescriptorResponse
from zigbeelink.logging import get_events


ANNOUNCE = bytes.fromhex("2b1a" "0807060504030201" "8e")


def test_registry_is_read_only():
    with pytest.raises(TypeError):
        MESSAGE_REGISTRY[0x0700] = lambda data: data


def test_routes_announce_and_joined():
    assert decode_message(END_DEVICE_ANNOUNCE, ANNOUNCE).kind is AnnounceKind.END_DEVICE_ANNOUNCE
    assert decode_message(DEVICE_JOINED, ANNOUNCE).kind is AnnounceKind.DEVICE_JOINED


def test_routes_bind_response():
    assert isinstance(decode_message(BIND_RESPONSE, bytes.fromhex("003412")), BindResponse)


def test_routes_simple_descriptor():
    payload = bytes.fromhex("00cdab" "08" "01" "0401" "0001" "01" "00" "00")
    resp = decode_message(SIMPLE_DESCRIPTOR_RESPONSE, payload)
    assert isinstance(resp, SimpleDescriptorResponse)
    assert resp.input_clusters == ()
    assert resp.output_clusters == ()


def test_routes_attribute_response():
    payload = bytes.fromhex("00" "3412" "01" "0604" "0a" "01" "0000" "29" "6608")
    resp = decode_message(ATTRIBUTE_RESPONSE, payload)
    assert isinstance(resp, ReportAttributesResponse)
    assert resp.attributes.get(0x0000).value == 2150


def test_unknown_message_type_degrades():
    resp = decode_message(0x0700, b"\x01\x02")
    assert resp == UnrecognizedMessage(message_type=0x0700, raw=b"\x01\x02")
    assert resp.as_dict()["raw"] == "0102"
    event = get_events()[-1]
    assert event["event"] == "unrecognized_message"
    assert event["details"]["message_type"] == 0x0700
