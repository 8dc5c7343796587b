"""wrapped-error: tag exceptions raised by caller-supplied callbacks.

``WrappedError`` separates "the callback failed" from "the function that
called it failed", even when both raise the same exception type.
"""

from .boundary import call_wrapped, wrap_callback, wrap_errors
from .errors import (
    CyclicCauseError,
    InvalidArgumentError,
    WrappedError,
    exception_to_error,
    is_wrapped,
    iter_wrapped,
    root_cause,
    wrap_depth,
)

__all__ = [
    "CyclicCauseError",
    "InvalidArgumentError",
    "WrappedError",
    "call_wrapped",
    "exception_to_error",
    "is_wrapped",
    "iter_wrapped",
    "root_cause",
    "wrap_callback",
    "wrap_depth",
    "wrap_errors",
]
