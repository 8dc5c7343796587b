"""Public error API: the callback-boundary wrapper and its normalization."""

from . import codes
from .factories import (
    dependency_error,
    internal_error,
    make_error,
    not_found_error,
    policy_error,
    validation_error,
)
from .normalize import exception_to_error
from .types import ErrorCategory, ErrorDetail
from .wrapped import (
    CyclicCauseError,
    InvalidArgumentError,
    WrappedError,
    is_wrapped,
    iter_wrapped,
    root_cause,
    wrap_depth,
)

__all__ = [
    "CyclicCauseError",
    "ErrorCategory",
    "ErrorDetail",
    "InvalidArgumentError",
    "WrappedError",
    "codes",
    "dependency_error",
    "exception_to_error",
    "internal_error",
    "is_wrapped",
    "iter_wrapped",
    "make_error",
    "not_found_error",
    "policy_error",
    "root_cause",
    "validation_error",
    "wrap_depth",
]
