"""
Numeric formatting for amount serialization
"""

import re
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Union

from ..constants import MANTISSA_DIGITS

Number = Union[int, float, Decimal]

_EXPONENT_RE = re.compile(r"e.*$", re.IGNORECASE)
_LEADING_ZEROES_RE = re.compile(r"^0*")


def get_mantissa_decimal_string(value: Number) -> str:
    """
    Extract the 16 significant decimal digits of a number

    The value is rounded to 16 significant digits (ties away from zero), then
    the decimal point, exponent and leading zeroes are stripped and the result
    is right-padded with zeroes to 16 characters.

    Args:
        value: int, float or Decimal

    Returns:
        16-digit mantissa string, e.g. ``"1234560000000000"`` for ``123.456``
    """
    # Decimal(float) is exact, so rounding sees the true binary value
    with localcontext() as ctx:
        ctx.prec = MANTISSA_DIGITS
        ctx.rounding = ROUND_HALF_UP
        rounded = +Decimal(value)

    formatted = format(rounded, f".{MANTISSA_DIGITS - 1}e")

    mantissa = formatted.replace(".", "", 1)
    mantissa = _EXPONENT_RE.sub("", mantissa)
    mantissa = _LEADING_ZEROES_RE.sub("", mantissa)

    return mantissa.ljust(MANTISSA_DIGITS, "0")
