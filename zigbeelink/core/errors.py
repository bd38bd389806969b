"""
Errors raised while decoding coordinator payloads.

Every error carries the byte ``offset`` where decoding stopped and the name of
the ``field`` that could not be read, so callers can report exactly which part
of a frame was malformed.
"""
from __future__ import annotations

from typing import Optional


class DecodeError(ValueError):
    """Base class for all payload decoding failures."""

    def __init__(self, message: str, *, offset: Optional[int] = None, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.offset = offset
        self.field = field


class TruncatedPayload(DecodeError):
    """The buffer ends before a field's required extent."""

    def __init__(self, field: str, offset: int, needed: int, available: int) -> None:
        super().__init__(
            f"{field}: need {needed} byte(s) at offset {offset}, {max(available, 0)} available",
            offset=offset,
            field=field,
        )
        self.needed = needed
        self.available = max(available, 0)


class UnknownDataType(DecodeError):
    """A data type tag has no entry in the width table."""

    def __init__(self, tag: int, offset: int, field: str = "data_type") -> None:
        super().__init__(f"{field}: unknown data type 0x{tag:02x} at offset {offset}", offset=offset, field=field)
        self.tag = tag


class InconsistentAttributeCount(TruncatedPayload):
    """The declared attribute count does not match the bytes in the frame."""

    def __init__(self, declared: int, decoded: int, offset: int, needed: int, available: int) -> None:
        DecodeError.__init__(
            self,
            f"attribute_count: declared {declared} record(s), buffer "
            f"{'ends' if needed > available else 'has trailing bytes'} at offset {offset} "
            f"after {decoded} record(s)",
            offset=offset,
            field="attribute_count",
        )
        self.needed = needed
        self.available = max(available, 0)
        self.declared = declared
        self.decoded = decoded


class NestingTooDeep(DecodeError):
    """Arrays or structures are nested deeper than the decoder follows."""

    def __init__(self, offset: int, field: str, limit: int) -> None:
        super().__init__(f"{field}: nesting deeper than {limit} level(s) at offset {offset}", offset=offset, field=field)
        self.limit = limit
