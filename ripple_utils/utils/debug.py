"""
Diagnostic helpers: call tracing and precondition checks
"""

import functools
import logging
from typing import Any, Callable, Optional, TypeVar

from ..errors import AssertionFailedError

T = TypeVar('T')


def trace(comment: str, func: Callable[..., T], logger: logging.Logger) -> Callable[..., T]:
    """
    Wrap a function so every call is logged before it runs

    Args:
        comment: Label written at the start of each log line
        func: Function to wrap
        logger: Logger that receives the DEBUG record

    Returns:
        Wrapper with the same signature and return value as ``func``

    Example:
        >>> log = logging.getLogger("ripple.amount")
        >>> parse = trace("parse_amount", parse_amount, log)
        >>> parse("1.5")
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> T:
        logger.debug("%s: args=%r kwargs=%r", comment, args, kwargs)
        return func(*args, **kwargs)

    return wrapper


def assert_that(condition: Any, message: Optional[str] = None) -> None:
    """Raise AssertionFailedError when ``condition`` is falsy"""
    if not condition:
        text = f"Assertion failed: {message}" if message else "Assertion failed."
        raise AssertionFailedError(text)
