"""
ripple-utils
Conversion, time and crypto-condition helpers for Ripple client libraries

Example:
    ```python
    from ripple_utils import passphrase_to_condition, passphrase_to_fulfillment

    condition = passphrase_to_condition("open sesame")
    fulfillment = passphrase_to_fulfillment("open sesame")
    ```
"""

__version__ = "1.0.0"

# Hex / string / byte codecs
from .codec import (
    string_to_hex,
    hex_to_string,
    string_to_array,
    hex_to_array,
    array_to_hex,
    convert_string_to_hex,
    convert_hex_to_string,
    chunk_string,
)

# Utilities
from .utils import (
    array_set,
    array_unique,
    assert_that,
    trace,
    get_mantissa_decimal_string,
    to_timestamp,
    from_timestamp,
    unix_ms_to_ripple_time,
    datetime_to_ripple_time,
    ripple_time_to_datetime,
    from_ripple,
    to_ripple,
)

# Crypto-conditions
from .crypto import (
    Condition,
    Fulfillment,
    passphrase_to_fulfillment,
    passphrase_to_condition,
    ed25519_fulfillment,
    fulfillment_to_condition,
    validate_fulfillment,
)

# Errors
from .errors import (
    RippleUtilsError,
    AssertionFailedError,
    InvalidHexError,
    UnsupportedConditionTypeError,
    MalformedEncodingError,
)

__all__ = [
    "__version__",
    # Codecs
    "string_to_hex",
    "hex_to_string",
    "string_to_array",
    "hex_to_array",
    "array_to_hex",
    "convert_string_to_hex",
    "convert_hex_to_string",
    "chunk_string",
    # Utilities
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
    # Crypto-conditions
    "Condition",
    "Fulfillment",
    "passphrase_to_fulfillment",
    "passphrase_to_condition",
    "ed25519_fulfillment",
    "fulfillment_to_condition",
    "validate_fulfillment",
    # Errors
    "RippleUtilsError",
    "AssertionFailedError",
    "InvalidHexError",
    "UnsupportedConditionTypeError",
    "MalformedEncodingError",
]
