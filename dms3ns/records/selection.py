"""
Deterministic choice of the best record among conflicting copies.

Records are ordered by sequence number, then by end of life. Records this
leaves unordered are ordered by their serialized bytes, so every node that
sees the same set of records picks the same winner.
"""

from collections.abc import (
    Sequence,
)
from enum import (
    IntEnum,
)

from dms3ns.records.codec import (
    Record,
)
from dms3ns.records.entry import (
    parse_validity,
)
from dms3ns.records.exceptions import (
    NoUsableRecords,
)


class Ordering(IntEnum):
    OLDER = -1
    UNORDERED = 0
    NEWER = 1


def compare(a: Record, b: Record) -> Ordering:
    """
    Compare two records by sequence number, then by end of life.

    Returns ``NEWER`` if ``a`` is newer than ``b`` and ``OLDER`` if it is
    older. ``UNORDERED`` means the records cannot be told apart this way,
    not that they are equal; see :func:`compare_total`.

    This does *not* validate the records, callers must validate first.

    :raise MalformedRecord: if either validity cannot be parsed
    """
    if a.sequence > b.sequence:
        return Ordering.NEWER
    elif a.sequence < b.sequence:
        return Ordering.OLDER

    at = parse_validity(a)
    bt = parse_validity(b)

    if at > bt:
        return Ordering.NEWER
    elif at < bt:
        return Ordering.OLDER

    return Ordering.UNORDERED


def compare_total(a: Record, a_raw: bytes, b: Record, b_raw: bytes) -> int:
    """
    Total order over records: :func:`compare`, with pairs it leaves
    unordered ranked by their serialized forms ``a_raw`` and ``b_raw``.

    Returns a negative number, zero or a positive number as ``a`` ranks
    below, equal to or above ``b``. Zero only for identical bytes.
    """
    order = compare(a, b)
    if order is not Ordering.UNORDERED:
        return int(order)
    return (a_raw > b_raw) - (a_raw < b_raw)


def select_record(records: Sequence[Record], values: Sequence[bytes]) -> int:
    """
    Return the index of the best record.

    ``values[i]`` must be the serialized form of ``records[i]``. The winner
    does not depend on the order of the input.

    :raise NoUsableRecords: if ``records`` is empty
    :raise MalformedRecord: if a validity cannot be parsed
    """
    if len(records) != len(values):
        raise ValueError("records and values must have the same length")
    if not records:
        raise NoUsableRecords("no usable records in given set")

    best = 0
    for i in range(1, len(records)):
        if compare_total(records[best], values[best], records[i], values[i]) < 0:
            best = i
    return best
