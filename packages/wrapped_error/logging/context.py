"""Structured logging context carried in a ``ContextVar``.

Bound values are attached to every record emitted in the same thread or task,
so boundary code does not have to repeat them on each log call.
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Mapping

_LOG_CONTEXT: ContextVar[dict[str, str]] = ContextVar(
    "wrapped_error_log_context", default={}
)


def get_context() -> dict[str, str]:
    """Return a copy of the bound context."""
    return dict(_LOG_CONTEXT.get())


def bind_context(**values: object) -> None:
    """Bind values (stringified, ``None`` skipped) into the current context."""
    updated = {
        str(key): str(value) for key, value in values.items() if value is not None
    }
    if updated:
        _LOG_CONTEXT.set({**_LOG_CONTEXT.get(), **updated})


def clear_context(*keys: str) -> None:
    """Drop the given keys, or everything when called without keys."""
    if not keys:
        _LOG_CONTEXT.set({})
        return
    _LOG_CONTEXT.set(
        {key: value for key, value in _LOG_CONTEXT.get().items() if key not in keys}
    )


@contextmanager
def log_context(values: Mapping[str, object]) -> Iterator[None]:
    """Bind ``values`` for the duration of the block only."""
    token = _LOG_CONTEXT.set(dict(_LOG_CONTEXT.get()))
    try:
        bind_context(**dict(values))
        yield
    finally:
        _LOG_CONTEXT.reset(token)
