"""
Attribute response variants.

Each variant decodes the bytes after the frame header. Offsets below are
relative to ``FrameHeader.payload_offset``:

- read attributes: ``[count:1] [read records...]``
- report attributes: ``[count:1] [report records...]``
- discover attributes: ``[count:1] [complete:1] [discovery records...]``
- default response: ``[status:1]``
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Optional

from zigbeelink.config import DecoderSettings, get_settings
from zigbeelink.core.binary import ByteCursor
from zigbeelink.domain.clusters import Status, status_name
from zigbeelink.parsing.attributes import AttributeCollection, RecordShape, decode_records
from zigbeelink.parsing.frames.header import FrameHeader

LIST_COMPLETE = 0x01


@dataclass(frozen=True)
class AttributeResponse:
    kind: ClassVar[str] = "attribute_response"

    header: FrameHeader
    raw: bytes

    @property
    def command_id(self) -> int:
        return self.header.command_id

    @classmethod
    def decode(
        cls,
        header: FrameHeader,
        data: bytes,
        settings: Optional[DecoderSettings] = None,
    ) -> "AttributeResponse":
        raise NotImplementedError

    def as_dict(self) -> dict[str, Any]:
        return {"kind": self.kind, "header": self.header.as_dict()}


def _decode_counted(
    header: FrameHeader,
    data: bytes,
    shape: RecordShape,
    settings: Optional[DecoderSettings],
    has_list_complete: bool = False,
) -> tuple[int, bool, AttributeCollection]:
    if settings is None:
        settings = get_settings()
    cursor = ByteCursor(data, header.payload_offset)
    count = cursor.u8("attribute_count")
    is_list_complete = cursor.u8("list_complete") == LIST_COMPLETE if has_list_complete else True
    attributes = decode_records(data, cursor.offset, count, shape, strict=settings.strict_length)
    return count, is_list_complete, attributes


@dataclass(frozen=True)
class ReadAttributesResponse(AttributeResponse):
    kind: ClassVar[str] = "read_attributes"

    attribute_count: int
    attributes: AttributeCollection

    @classmethod
    def decode(cls, header, data, settings=None) -> "ReadAttributesResponse":
        count, _, attributes = _decode_counted(header, data, RecordShape.READ, settings)
        return cls(header=header, raw=data, attribute_count=count, attributes=attributes)

    def as_dict(self) -> dict[str, Any]:
        result = super().as_dict()
        result["attributes"] = self.attributes.as_dict()
        return result


@dataclass(frozen=True)
class ReportAttributesResponse(AttributeResponse):
    kind: ClassVar[str] = "report_attributes"

    attribute_count: int
    attributes: AttributeCollection

    @classmethod
    def decode(cls, header, data, settings=None) -> "ReportAttributesResponse":
        count, _, attributes = _decode_counted(header, data, RecordShape.REPORT, settings)
        return cls(header=header, raw=data, attribute_count=count, attributes=attributes)

    def as_dict(self) -> dict[str, Any]:
        result = super().as_dict()
        result["attributes"] = self.attributes.as_dict()
        return result


@dataclass(frozen=True)
class DiscoverAttributesResponse(AttributeResponse):
    kind: ClassVar[str] = "discover_attributes"

    attribute_count: int
    is_list_complete: bool
    attributes: AttributeCollection

    @classmethod
    def decode(cls, header, data, settings=None) -> "DiscoverAttributesResponse":
        count, is_list_complete, attributes = _decode_counted(
            header, data, RecordShape.DISCOVERY, settings, has_list_complete=True
        )
        return cls(
            header=header,
            raw=data,
            attribute_count=count,
            is_list_complete=is_list_complete,
            attributes=attributes,
        )

    def as_dict(self) -> dict[str, Any]:
        result = super().as_dict()
        result["is_list_complete"] = self.is_list_complete
        result["attributes"] = self.attributes.as_dict()
        return result


@dataclass(frozen=True)
class DefaultResponse(AttributeResponse):
    kind: ClassVar[str] = "default_response"

    status_code: int

    @property
    def success(self) -> bool:
        return self.status_code == Status.SUCCESS

    @classmethod
    def decode(cls, header, data, settings=None) -> "DefaultResponse":
        status_code = ByteCursor(data, header.payload_offset).u8("status_code")
        return cls(header=header, raw=data, status_code=status_code)

    def as_dict(self) -> dict[str, Any]:
        result = super().as_dict()
        result["status"] = status_name(self.status_code)
        return result


@dataclass(frozen=True)
class UnrecognizedResponse(AttributeResponse):
    """A command id with no registered variant; only the header is decoded."""
    kind: ClassVar[str] = "unrecognized"

    @classmethod
    def decode(cls, header, data, settings=None) -> "UnrecognizedResponse":
        return cls(header=header, raw=data)

    def as_dict(self) -> dict[str, Any]:
        result = super().as_dict()
        result["raw"] = self.raw.hex()
        return result
