"""Provenance-tagging exception wrapper.

``WrappedError`` marks an exception as coming from a caller-supplied callback
rather than from the function that invoked the callback. Given::

    def read(consumer, length):
        if length > 2048:
            raise OSError("length too big")
        consumer(b"\\x01\\x02\\x03")

a caller catching ``OSError`` cannot tell whether ``read`` failed or whether
``consumer`` raised an ``OSError`` of its own. Wrapping the callback's failure
removes the ambiguity::

    def read(consumer, length):
        if length > 2048:
            raise OSError("length too big")
        try:
            consumer(b"\\x01\\x02\\x03")
        except Exception as exc:
            raise WrappedError(exc) from exc

Callers catch ``WrappedError`` for callback failures and call ``root_cause()``
when they need the original exception. Wrappers nest: a callback that itself
calls ``read`` produces a chain that ``root_cause()`` walks to the innermost
non-wrapper exception.
"""

from __future__ import annotations

from typing import Iterator, final, overload

from . import codes

_MISSING: object = object()


class InvalidArgumentError(ValueError):
    """Argument rejected by a construction contract.

    Args:
        message: Human-readable error message.
        code: Machine-readable code from ``codes``.
    """

    def __init__(self, message: str, *, code: str = codes.INVALID_ARGUMENT) -> None:
        super().__init__(message)
        self.code = code

    def __reduce__(self) -> tuple[object, ...]:
        return (_rebuild_invalid_argument, (str(self), self.code))


class CyclicCauseError(RuntimeError):
    """A wrapper chain loops back onto one of its own layers."""


@final
class WrappedError(Exception):
    """Exception raised at a callback boundary to carry the callback's failure.

    Accepts ``WrappedError(cause)`` or ``WrappedError(message, cause)``. When
    no message is given (or it is ``None``) the message is derived from the
    cause. ``cause`` is mandatory; omitting it raises ``InvalidArgumentError``
    with code ``MISSING_CAUSE``, including when only a message is given.

    Instances are immutable and compare by identity.
    """

    @overload
    def __init__(self, cause: BaseException, /) -> None: ...

    @overload
    def __init__(self, message: str | None, cause: BaseException) -> None: ...

    @overload
    def __init__(self, *, cause: BaseException) -> None: ...

    def __init__(self, message: object = _MISSING, cause: object = _MISSING) -> None:
        if cause is _MISSING and not isinstance(message, str):
            # Single non-text argument is the cause; lone text is a message.
            message, cause = None, message
        if message is _MISSING:
            message = None

        if cause is _MISSING or cause is None:
            raise InvalidArgumentError(
                "cause must not be None", code=codes.MISSING_CAUSE
            )
        if not isinstance(cause, BaseException):
            raise InvalidArgumentError(
                f"cause must be an exception instance, got {type(cause).__name__}"
            )
        if message is not None and not isinstance(message, str):
            raise InvalidArgumentError(
                f"message must be a string or None, got {type(message).__name__}"
            )

        text = message if message is not None else _describe(cause)
        super().__init__(text)
        self._message = text
        self._cause = cause
        # Keep tracebacks pointing at the wrapped failure.
        self.__cause__ = cause
        self.__suppress_context__ = True

    @property
    def message(self) -> str:
        """Human-readable text, explicit or derived from the cause."""
        return self._message

    @property
    def cause(self) -> BaseException:
        """The immediately wrapped exception."""
        return self._cause

    def root_cause(self) -> BaseException:
        """Return the innermost non-wrapper exception of this chain."""
        innermost = self
        for innermost in iter_wrapped(self):
            pass
        return innermost._cause

    def __str__(self) -> str:
        return self._message

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self._message!r}, "
            f"cause={type(self._cause).__name__})"
        )

    def __reduce__(self) -> tuple[object, ...]:
        return (type(self), (self._message, self._cause))


def iter_wrapped(error: BaseException) -> Iterator[WrappedError]:
    """Yield each wrapper layer of ``error``, outermost first.

    Yields nothing when ``error`` is not a ``WrappedError``. Raises
    ``CyclicCauseError`` if a layer is reached twice.
    """
    seen: set[int] = set()
    current: BaseException = error
    while isinstance(current, WrappedError):
        if id(current) in seen:
            raise CyclicCauseError(
                f"wrapper chain loops after {len(seen)} layer(s)"
            )
        seen.add(id(current))
        yield current
        current = current._cause


def root_cause(error: BaseException) -> BaseException:
    """Return the root cause of ``error``, or ``error`` itself if unwrapped."""
    if isinstance(error, WrappedError):
        return error.root_cause()
    return error


def wrap_depth(error: BaseException) -> int:
    """Count the ``WrappedError`` layers around the root cause."""
    return sum(1 for _ in iter_wrapped(error))


def is_wrapped(error: BaseException) -> bool:
    """Whether ``error`` came through a callback boundary."""
    return isinstance(error, WrappedError)


def _describe(cause: BaseException) -> str:
    text = str(cause)
    name = type(cause).__name__
    return f"{name}: {text}" if text else name


def _rebuild_invalid_argument(message: str, code: str) -> InvalidArgumentError:
    return InvalidArgumentError(message, code=code)
