from __future__ import annotations

from typing import Any, Iterable, Iterator, Optional

from zigbeelink.core.binary import Buffer
from zigbeelink.core.errors import InconsistentAttributeCount, TruncatedPayload
from zigbeelink.parsing.attributes.record import AttributeRecord, RecordShape, decode_record


class AttributeCollection:
    """
    Attribute records in decode order, with lookup by attribute id.

    A report may legally repeat an attribute id; lookup returns the last record
    with that id while iteration still yields every record.
    """

    __slots__ = ("_records", "_by_id")

    def __init__(self, records: Iterable[AttributeRecord] = ()) -> None:
        self._records: tuple[AttributeRecord, ...] = tuple(records)
        self._by_id: dict[int, AttributeRecord] = {}
        for record in self._records:
            self._by_id[record.attribute_id] = record

    def __iter__(self) -> Iterator[AttributeRecord]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __getitem__(self, index: int) -> AttributeRecord:
        return self._records[index]

    def __contains__(self, attribute_id: object) -> bool:
        return attribute_id in self._by_id

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AttributeCollection):
            return NotImplemented
        return self._records == other._records

    def __hash__(self) -> int:
        return hash(self._records)

    def __repr__(self) -> str:
        return f"AttributeCollection({list(self._records)!r})"

    def get(self, attribute_id: int, default: Optional[AttributeRecord] = None) -> Optional[AttributeRecord]:
        return self._by_id.get(attribute_id, default)

    def ids(self) -> list[int]:
        """Distinct attribute ids in first-seen order."""
        return list(dict.fromkeys(record.attribute_id for record in self._records))

    @property
    def consumed(self) -> int:
        return sum(record.consumed for record in self._records)

    def as_dict(self) -> list[dict[str, Any]]:
        return [record.as_dict() for record in self._records]


def decode_records(
    data: Buffer,
    offset: int,
    count: int,
    shape: RecordShape,
    strict: bool = True,
) -> AttributeCollection:
    """
    Decode exactly ``count`` consecutive records starting at ``offset``.

    Args:
        data: The full frame buffer.
        offset: Index of the first record.
        count: The attribute count declared by the frame.
        shape: The record layout of the enclosing response.
        strict: Reject bytes left over after the last record. When false
            they are ignored.

    Returns:
        An ``AttributeCollection`` holding the records in wire order.

    Raises:
        InconsistentAttributeCount: if the declared count overruns the buffer
            or, with ``strict``, leaves trailing bytes.
        UnknownDataType: if any record uses a tag missing from the width table.
    """
    records: list[AttributeRecord] = []
    cursor = offset
    for index in range(count):
        try:
            record = decode_record(data, cursor, shape)
        except TruncatedPayload as exc:
            raise InconsistentAttributeCount(
                declared=count,
                decoded=index,
                offset=exc.offset if exc.offset is not None else cursor,
                needed=exc.needed,
                available=exc.available,
            ) from exc
        records.append(record)
        cursor += record.consumed

    if strict and cursor != len(data):
        raise InconsistentAttributeCount(
            declared=count,
            decoded=count,
            offset=cursor,
            needed=0,
            available=len(data) - cursor,
        )
    return AttributeCollection(records)
