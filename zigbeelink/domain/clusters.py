"""
Zigbee cluster and status catalog.

Provides the cluster identifiers a coordinator reports in attribute responses
and descriptor frames, together with the ZCL status codes carried by
read-attribute records and default responses. Identifiers outside the catalog
are legal on the wire and are passed through as plain integers.
"""
from __future__ import annotations

from enum import IntEnum
from typing import Union


class ClusterId(IntEnum):
    """Well-known cluster identifiers."""
    BASIC = 0x0000
    POWER_CONFIGURATION = 0x0001
    DEVICE_TEMPERATURE = 0x0002
    IDENTIFY = 0x0003
    GROUPS = 0x0004
    SCENES = 0x0005
    ON_OFF = 0x0006
    ON_OFF_SWITCH_CONFIGURATION = 0x0007
    LEVEL_CONTROL = 0x0008
    ALARMS = 0x0009
    TIME = 0x000A
    ANALOG_INPUT = 0x000C
    MULTISTATE_INPUT = 0x0012
    OTA_UPGRADE = 0x0019
    POLL_CONTROL = 0x0020
    GREEN_POWER = 0x0021
    DOOR_LOCK = 0x0101
    WINDOW_COVERING = 0x0102
    THERMOSTAT = 0x0201
    FAN_CONTROL = 0x0202
    COLOR_CONTROL = 0x0300
    ILLUMINANCE_MEASUREMENT = 0x0400
    TEMPERATURE_MEASUREMENT = 0x0402
    PRESSURE_MEASUREMENT = 0x0403
    RELATIVE_HUMIDITY = 0x0405
    OCCUPANCY_SENSING = 0x0406
    IAS_ZONE = 0x0500
    IAS_WD = 0x0502
    PRICE = 0x0700
    DEMAND_RESPONSE_LOAD_CONTROL = 0x0701
    METERING = 0x0702
    MESSAGING = 0x0703
    ELECTRICAL_MEASUREMENT = 0x0B04
    DIAGNOSTICS = 0x0B05
    TOUCHLINK = 0x1000


class Status(IntEnum):
    """ZCL status codes."""
    SUCCESS = 0x00
    FAILURE = 0x01
    NOT_AUTHORIZED = 0x7E
    MALFORMED_COMMAND = 0x80
    UNSUP_CLUSTER_COMMAND = 0x81
    UNSUP_GENERAL_COMMAND = 0x82
    UNSUP_MANUF_CLUSTER_COMMAND = 0x83
    UNSUP_MANUF_GENERAL_COMMAND = 0x84
    INVALID_FIELD = 0x85
    UNSUPPORTED_ATTRIBUTE = 0x86
    INVALID_VALUE = 0x87
    READ_ONLY = 0x88
    INSUFFICIENT_SPACE = 0x89
    NOT_FOUND = 0x8B
    UNREPORTABLE_ATTRIBUTE = 0x8C
    INVALID_DATA_TYPE = 0x8D
    WRITE_ONLY = 0x8F
    TIMEOUT = 0x94
    HARDWARE_FAILURE = 0xC0
    SOFTWARE_FAILURE = 0xC1


def cluster_id(value: int) -> Union[ClusterId, int]:
    """Map a raw identifier to ``ClusterId`` when it is catalogued."""
    try:
        return ClusterId(value)
    except ValueError:
        return value


def status_name(code: int) -> str:
    try:
        return Status(code).name.lower()
    except ValueError:
        return f"0x{code:02x}"
