"""Tests for the frame debugging command."""
import json

import pytest

from zigbeelink.tools.frame_debug import main, parse_hex

REPORT_FRAME = "00 34 12 01 02 04 0a 01 00 00 29 66 08"


@pytest.mark.parametrize(
    "text",
    ["00341201", "00 34 12 01", "00:34:12:01", "0x00341201"],
)
def test_parse_hex_accepts_common_notations(text):
    assert parse_hex(text) == bytes([0x00, 0x34, 0x12, 0x01])


def test_attribute_frame_prints_json(capsys):
    assert main([REPORT_FRAME]) == 0
    result = json.loads(capsys.readouterr().out)
    assert result["kind"] == "report_attributes"
    assert result["header"]["source_address"] == 0x1234
    assert result["attributes"][0]["value"] == 2150


def test_invalid_hex_exit_code(capsys):
    assert main(["zz"]) == 2
    assert "invalid hex payload" in capsys.readouterr().err


def test_truncated_frame_exit_code(capsys):
    assert main(["00 34 12"]) == 1
    err = capsys.readouterr().err
    assert "decode failed" in err
    assert "endpoint" in err


def test_message_type_route(capsys):
    assert main(["--message-type", "0x1020", "00 34 12"]) == 0
    result = json.loads(capsys.readouterr().out)
    assert result["source_address"] == 0x1234
