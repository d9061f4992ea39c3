from datetime import (
    datetime,
    timedelta,
    timezone,
)

import pytest

from dms3ns.records.timestamp import (
    NANOSECONDS_PER_SECOND,
    format_rfc3339,
    parse_rfc3339,
)

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def test_format_rfc3339_utc():
    t = datetime(2024, 1, 2, 3, 4, 5, 123456, tzinfo=timezone.utc)
    assert format_rfc3339(t) == "2024-01-02T03:04:05.123456000Z"


def test_format_rfc3339_converts_to_utc():
    t = datetime(2024, 1, 2, 4, 4, 5, tzinfo=timezone(timedelta(hours=1)))
    assert format_rfc3339(t) == "2024-01-02T03:04:05.000000000Z"


def test_format_rfc3339_pads_small_years():
    t = datetime(9, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    assert format_rfc3339(t) == "0009-01-02T03:04:05.000000000Z"


def test_parse_rfc3339_epoch():
    assert parse_rfc3339("1970-01-01T00:00:00.000000000Z") == 0
    assert parse_rfc3339("1969-12-31T23:59:59.999999999Z") == -1


def test_parse_rfc3339_matches_format():
    t = datetime(2024, 1, 2, 3, 4, 5, 123456, tzinfo=timezone.utc)
    seconds = (t.replace(microsecond=0) - EPOCH) // timedelta(seconds=1)
    expected = seconds * NANOSECONDS_PER_SECOND + 123456000

    assert parse_rfc3339(format_rfc3339(t)) == expected
    assert parse_rfc3339(format_rfc3339(t).encode()) == expected


def test_parse_rfc3339_offsets():
    utc = parse_rfc3339("2024-01-02T03:04:05.000000001Z")
    assert parse_rfc3339("2024-01-02T04:04:05.000000001+01:00") == utc
    assert parse_rfc3339("2024-01-02T01:34:05.000000001-01:30") == utc
    assert parse_rfc3339("2024-01-02T03:04:05.000000001+00:00") == utc


def test_parse_rfc3339_keeps_nanoseconds():
    earlier = parse_rfc3339("2024-01-02T03:04:05.000000001Z")
    later = parse_rfc3339("2024-01-02T03:04:05.000000002Z")
    assert later - earlier == 1


bad_timestamps = [
    "",
    "2024-01-02T03:04:05Z",
    "2024-01-02T03:04:05.123456Z",
    "2024-01-02T03:04:05.1234567890Z",
    "2024-01-02T03:04:05.000000000",
    "2024-01-02T03:04:05.000000000z",
    "2024-01-02 03:04:05.000000000Z",
    "2024-01-02T03:04:05.000000000Z\n",
    " 2024-01-02T03:04:05.000000000Z",
    "2024-13-02T03:04:05.000000000Z",
    "2024-02-30T03:04:05.000000000Z",
    "2024-01-02T24:04:05.000000000Z",
    "2024-01-02T03:04:60.000000000Z",
    "2024-01-02T03:04:05.000000000+24:00",
    "2024-01-02T03:04:05.000000000+0100",
    "٢٠٢٤-01-02T03:04:05.000000000Z",
    b"\xff\xfe",
]


@pytest.mark.parametrize("timestamp", bad_timestamps)
def test_parse_rfc3339_rejects(timestamp):
    with pytest.raises(ValueError):
        parse_rfc3339(timestamp)
