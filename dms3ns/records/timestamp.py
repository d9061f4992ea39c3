"""
RFC3339 timestamps with a fixed nanosecond profile.

Record validity is carried as ``YYYY-MM-DDTHH:MM:SS.fffffffffZ``: exactly
nine fractional digits and either ``Z`` or a ``+HH:MM``/``-HH:MM`` offset.
Python's ``datetime`` stops at microseconds, so parsed timestamps are
returned as integer nanoseconds since the Unix epoch.
"""

from datetime import (
    datetime,
    timedelta,
    timezone,
)
import re
import time

TIME_FORMAT = "YYYY-MM-DDTHH:MM:SS.nnnnnnnnnZ"

NANOSECONDS_PER_SECOND = 10**9

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

_RFC3339_NANO = re.compile(
    r"([0-9]{4})-([0-9]{2})-([0-9]{2})"
    r"T([0-9]{2}):([0-9]{2}):([0-9]{2})\.([0-9]{9})"
    r"(?:(Z)|([+-])([0-9]{2}):([0-9]{2}))"
)


def format_rfc3339(t: datetime) -> str:
    """
    Format ``t`` in UTC using the nanosecond profile.

    Naive datetimes are taken to be local time.
    """
    t = t.astimezone(timezone.utc)
    return (
        f"{t.year:04d}-{t.month:02d}-{t.day:02d}"
        f"T{t.hour:02d}:{t.minute:02d}:{t.second:02d}"
        f".{t.microsecond * 1000:09d}Z"
    )


def parse_rfc3339(s: str | bytes) -> int:
    """
    Parse a profile timestamp into nanoseconds since the Unix epoch.

    :raise ValueError: if ``s`` does not match the profile exactly or names
        an impossible date or offset
    """
    if isinstance(s, bytes):
        try:
            s = s.decode("ascii")
        except UnicodeDecodeError as e:
            raise ValueError(f"timestamp is not ASCII: {s!r}") from e

    m = _RFC3339_NANO.fullmatch(s)
    if m is None:
        raise ValueError(f"timestamp does not match {TIME_FORMAT}: {s!r}")

    year, month, day, hour, minute, second = (
        int(g) for g in m.group(1, 2, 3, 4, 5, 6)
    )
    nanos = int(m.group(7))

    if m.group(8):
        tz = timezone.utc
    else:
        off_hours, off_minutes = int(m.group(10)), int(m.group(11))
        if off_hours > 23 or off_minutes > 59:
            raise ValueError(f"timestamp offset out of range: {s!r}")
        offset = timedelta(hours=off_hours, minutes=off_minutes)
        tz = timezone(-offset if m.group(9) == "-" else offset)

    t = datetime(year, month, day, hour, minute, second, tzinfo=tz)
    seconds = (t - _EPOCH) // timedelta(seconds=1)
    return seconds * NANOSECONDS_PER_SECOND + nanos


def now_ns() -> int:
    """Current time as nanoseconds since the Unix epoch."""
    return time.time_ns()
