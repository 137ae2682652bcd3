# Utility package exports
from .arrays import array_set, array_unique
from .debug import assert_that, trace
from .numbers import get_mantissa_decimal_string
from .time import (
    to_timestamp,
    from_timestamp,
    unix_ms_to_ripple_time,
    datetime_to_ripple_time,
    ripple_time_to_datetime,
    from_ripple,
    to_ripple,
)

__all__ = [
    "array_set",
    "array_unique",
    "assert_that",
    "trace",
    "get_mantissa_decimal_string",
    "to_timestamp",
    "from_timestamp",
    "unix_ms_to_ripple_time",
    "datetime_to_ripple_time",
    "ripple_time_to_datetime",
    "from_ripple",
    "to_ripple",
]
