"""
Custom exception classes for ripple-utils
Every error carries a stable code so callers can branch without string matching
"""

from typing import Optional, Dict, Any


class RippleUtilsError(Exception):
    """Base ripple-utils error class"""

    def __init__(
        self,
        code: str,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class AssertionFailedError(RippleUtilsError):
    """Precondition check failed"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__("ASSERTION_FAILED", message, details)


class InvalidHexError(RippleUtilsError, ValueError):
    """Input is not a hexadecimal string"""

    def __init__(self, value: str):
        super().__init__(
            "INVALID_HEX",
            f"Invalid hex string: {value!r}",
            {"value": value},
        )
        self.value = value


class UnsupportedConditionTypeError(RippleUtilsError):
    """Descriptor type tag is not known to the condition codec"""

    def __init__(self, type_name: Any, supported: Optional[list] = None):
        details: Dict[str, Any] = {"type": type_name}
        if supported:
            details["supported"] = list(supported)
        super().__init__(
            "UNSUPPORTED_TYPE",
            f"Unsupported crypto-condition type: {type_name!r}",
            details,
        )
        self.type_name = type_name


class MalformedEncodingError(RippleUtilsError):
    """Binary condition or fulfillment could not be decoded"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__("MALFORMED_ENCODING", message, details)
