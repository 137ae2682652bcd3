"""
Conversion between Ripple time and Unix time

Ripple time counts seconds since 2000-01-01T00:00:00Z. Unix timestamps here
are milliseconds since 1970-01-01T00:00:00Z.
"""

import math
from datetime import datetime, timedelta, timezone
from typing import Union

from ..constants import RIPPLE_EPOCH_OFFSET

UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def to_timestamp(rpepoch: int) -> int:
    """Ripple time (seconds) -> Unix time (milliseconds)"""
    return (rpepoch + RIPPLE_EPOCH_OFFSET) * 1000


def unix_ms_to_ripple_time(timestamp: Union[int, float]) -> int:
    """
    Unix time (milliseconds) -> Ripple time (seconds)

    Sub-second input is rounded half up, so 500ms rounds to the next second.
    """
    return math.floor(timestamp / 1000 + 0.5) - RIPPLE_EPOCH_OFFSET


def datetime_to_ripple_time(dt: datetime) -> int:
    """Datetime -> Ripple time (seconds). Naive datetimes are taken as UTC."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return unix_ms_to_ripple_time((dt - UNIX_EPOCH) / timedelta(milliseconds=1))


def from_timestamp(timestamp: Union[int, float, datetime]) -> int:
    """
    Unix time -> Ripple time (seconds)

    Args:
        timestamp: Milliseconds since the Unix epoch, or a datetime

    Returns:
        Seconds since the Ripple epoch
    """
    if isinstance(timestamp, datetime):
        return datetime_to_ripple_time(timestamp)
    return unix_ms_to_ripple_time(timestamp)


def ripple_time_to_datetime(rpepoch: int) -> datetime:
    """Ripple time (seconds) -> timezone-aware UTC datetime"""
    return UNIX_EPOCH + timedelta(seconds=rpepoch + RIPPLE_EPOCH_OFFSET)


# Names used by callers that think in terms of "Ripple time"
from_ripple = to_timestamp
to_ripple = from_timestamp
