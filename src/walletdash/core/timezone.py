"""UTC time helpers for chart timestamps."""

import time
from datetime import datetime

import pytz

UTC_TZ = pytz.utc


def epoch_seconds() -> float:
    """Return the current wall-clock time as epoch seconds."""
    return time.time()


def from_timestamp(seconds: float) -> datetime:
    """Convert epoch seconds to an aware UTC datetime."""
    return datetime.fromtimestamp(seconds, UTC_TZ)


def to_iso8601(seconds: float) -> str:
    """
    Format epoch seconds as an ISO-8601 UTC string.

    Millisecond precision with a trailing "Z", e.g. 2024-06-15T14:30:00.000Z.
    """
    dt = from_timestamp(seconds)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.") + f"{dt.microsecond // 1000:03d}Z"
