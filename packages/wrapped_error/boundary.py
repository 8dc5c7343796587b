"""Callback boundaries that tag callback failures with ``WrappedError``.

Two styles are supported:

1. Wrap everything the callback raises. Callers always get a
   ``WrappedError`` for callback failures; the isolation is simple to
   reason about::

       def read(consumer, length):
           if length > 2048:
               raise OSError("length too big")
           with wrap_errors():
               consumer(b"\\x01\\x02\\x03")

2. Wrap only the types that could be confused with the function's own
   errors. Other callback failures pass through unchanged::

       def check_permission(supplier, department):
           with wrap_errors(PermissionError):
               granted = supplier()
           if department not in granted:
               raise PermissionError(department)

If a callback never raises anything that could be mistaken for the
function's own errors, no boundary is needed.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from functools import wraps
from typing import Any, Callable, Iterator, ParamSpec, TypeVar

from .config import BoundarySettings
from .errors import InvalidArgumentError, WrappedError, root_cause, wrap_depth
from .logging import fields, get_logger, log_context

_LOGGER = get_logger(__name__)

P = ParamSpec("P")
R = TypeVar("R")


@contextmanager
def wrap_errors(
    *error_types: type[BaseException],
    message: str | None = None,
    settings: BoundarySettings | None = None,
) -> Iterator[None]:
    """Re-raise matching exceptions from the block as ``WrappedError``.

    Args:
        error_types: Exception classes to wrap. Defaults to ``Exception``,
            so ``KeyboardInterrupt`` and ``SystemExit`` always pass through.
        message: Optional wrapper message; derived from the cause when omitted.
        settings: Controls logging of wrapped errors.

    Raises:
        InvalidArgumentError: ``error_types`` contains a non-exception class,
            or ``message`` is neither text nor ``None``. Checked on entry.
        WrappedError: The block raised one of ``error_types``.
    """
    types = _exception_types(error_types)
    _check_message(message)
    try:
        yield
    except types as exc:
        wrapped = WrappedError(message, exc)
        _report(wrapped, settings or BoundarySettings())
        raise wrapped from exc


def call_wrapped(
    callback: Callable[..., R],
    /,
    *args: Any,
    wrap: type[BaseException] | tuple[type[BaseException], ...] = (),
    message: str | None = None,
    settings: BoundarySettings | None = None,
    **kwargs: Any,
) -> R:
    """Invoke ``callback`` and return its result, wrapping its failures.

    ``wrap`` takes one exception class or a tuple of them, as ``except`` does.
    """
    if not isinstance(wrap, tuple):
        wrap = (wrap,)
    with wrap_errors(*wrap, message=message, settings=settings):
        return callback(*args, **kwargs)


def wrap_callback(
    callback: Callable[P, R],
    *error_types: type[BaseException],
    message: str | None = None,
    settings: BoundarySettings | None = None,
) -> Callable[P, R]:
    """Return ``callback`` guarded so its failures surface as ``WrappedError``."""
    types = _exception_types(error_types)
    _check_message(message)

    @wraps(callback)
    def guarded(*args: P.args, **kwargs: P.kwargs) -> R:
        with wrap_errors(*types, message=message, settings=settings):
            return callback(*args, **kwargs)

    return guarded


def _exception_types(
    error_types: tuple[type[BaseException], ...],
) -> tuple[type[BaseException], ...]:
    if not error_types:
        return (Exception,)
    for error_type in error_types:
        if not (isinstance(error_type, type) and issubclass(error_type, BaseException)):
            raise InvalidArgumentError(
                f"error types must be exception classes, got {error_type!r}"
            )
    return tuple(error_types)


def _report(wrapped: WrappedError, settings: BoundarySettings) -> None:
    if not settings.log_wrapped:
        return
    level = logging.getLevelNamesMapping()[settings.log_level]
    with log_context(
        {
            fields.ERROR_TYPE: type(wrapped.cause).__name__,
            fields.ROOT_CAUSE_TYPE: type(root_cause(wrapped)).__name__,
            fields.WRAP_DEPTH: wrap_depth(wrapped),
        }
    ):
        _LOGGER.log(level, "Callback error wrapped: %s", wrapped.message)


def _check_message(message: object) -> None:
    if message is not None and not isinstance(message, str):
        raise InvalidArgumentError(
            f"message must be a string or None, got {type(message).__name__}"
        )
