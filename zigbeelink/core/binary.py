from __future__ import annotations

from typing import Union

from zigbeelink.core.errors import TruncatedPayload

Buffer = Union[bytes, bytearray, memoryview]


def get_bit(byte_value: int, bit_index: int) -> bool:
    if bit_index < 0 or bit_index > 7:
        raise ValueError("bit_index must be between 0 and 7")
    return bool(byte_value & (1 << bit_index))


def require(data: Buffer, offset: int, size: int, field: str) -> None:
    if offset < 0 or offset + size > len(data):
        raise TruncatedPayload(field, offset, size, len(data) - offset)


def read_uint(data: Buffer, offset: int, size: int, field: str = "value") -> int:
    """Read a little-endian unsigned integer of ``size`` bytes."""
    require(data, offset, size, field)
    return int.from_bytes(data[offset: offset + size], byteorder="little")


def read_int(data: Buffer, offset: int, size: int, field: str = "value") -> int:
    """Read a little-endian two's complement integer of ``size`` bytes."""
    require(data, offset, size, field)
    return int.from_bytes(data[offset: offset + size], byteorder="little", signed=True)


class ByteCursor:
    """
    A read position over an immutable buffer.

    Each read checks the remaining length first and advances ``offset`` by the
    width of the field, so a decoder never re-derives offsets by hand.
    """

    def __init__(self, data: Buffer, offset: int = 0) -> None:
        self.data = data if isinstance(data, bytes) else bytes(data)
        self.offset = offset

    def at_end(self) -> bool:
        return self.offset >= len(self.data)

    def take(self, size: int, field: str) -> bytes:
        require(self.data, self.offset, size, field)
        chunk = self.data[self.offset: self.offset + size]
        self.offset += size
        return chunk

    def uint(self, size: int, field: str) -> int:
        value = read_uint(self.data, self.offset, size, field)
        self.offset += size
        return value

    def signed(self, size: int, field: str) -> int:
        value = read_int(self.data, self.offset, size, field)
        self.offset += size
        return value

    def u8(self, field: str) -> int:
        return self.uint(1, field)

    def u16(self, field: str) -> int:
        return self.uint(2, field)

    def u64(self, field: str) -> int:
        return self.uint(8, field)
