"""Factory helpers for building ``ErrorDetail`` values per category."""

from __future__ import annotations

from typing import Mapping

from . import codes
from .types import ErrorCategory, ErrorDetail


def make_error(
    category: ErrorCategory,
    message: str,
    *,
    code: str,
    retryable: bool = False,
    wrapped: bool = False,
    metadata: Mapping[str, str] | None = None,
) -> ErrorDetail:
    """Create an ``ErrorDetail`` with normalized metadata."""
    return ErrorDetail(
        code=code,
        message=message,
        category=category,
        retryable=retryable,
        wrapped=wrapped,
        metadata=dict(metadata) if metadata is not None else {},
    )


def validation_error(
    message: str, *, code: str = codes.INVALID_ARGUMENT, **kwargs: object
) -> ErrorDetail:
    """Create a validation-category error."""
    return make_error(ErrorCategory.VALIDATION, message, code=code, **kwargs)


def not_found_error(
    message: str, *, code: str = codes.RESOURCE_NOT_FOUND, **kwargs: object
) -> ErrorDetail:
    """Create a not-found-category error."""
    return make_error(ErrorCategory.NOT_FOUND, message, code=code, **kwargs)


def policy_error(
    message: str, *, code: str = codes.PERMISSION_DENIED, **kwargs: object
) -> ErrorDetail:
    """Create a policy-category error."""
    return make_error(ErrorCategory.POLICY, message, code=code, **kwargs)


def dependency_error(
    message: str,
    *,
    code: str = codes.DEPENDENCY_UNAVAILABLE,
    retryable: bool = True,
    **kwargs: object,
) -> ErrorDetail:
    """Create a dependency-category error; retryable unless told otherwise."""
    return make_error(
        ErrorCategory.DEPENDENCY, message, code=code, retryable=retryable, **kwargs
    )


def internal_error(
    message: str, *, code: str = codes.UNEXPECTED_EXCEPTION, **kwargs: object
) -> ErrorDetail:
    """Create an internal-category error."""
    return make_error(ErrorCategory.INTERNAL, message, code=code, **kwargs)
