"""Tests for WrappedError construction contracts and root-cause resolution."""

from __future__ import annotations

import pickle

import pytest

from packages.wrapped_error.errors import (
    CyclicCauseError,
    InvalidArgumentError,
    WrappedError,
    codes,
    is_wrapped,
    iter_wrapped,
    root_cause,
    wrap_depth,
)


def _nest(error: BaseException, layers: int) -> BaseException:
    for _ in range(layers):
        error = WrappedError(error)
    return error


def test_single_argument_form_derives_message_from_cause() -> None:
    """Omitting the message should describe the cause by type and text."""
    cause = OSError("disk full")

    wrapped = WrappedError(cause)

    assert wrapped.cause is cause
    assert wrapped.message == "OSError: disk full"
    assert str(wrapped) == "OSError: disk full"


def test_derived_message_uses_type_name_for_empty_cause_text() -> None:
    """A cause with no text should still produce a readable message."""
    assert WrappedError(RuntimeError()).message == "RuntimeError"


def test_two_argument_form_keeps_explicit_message() -> None:
    """An explicit message should be used verbatim."""
    cause = ValueError("bad byte")

    wrapped = WrappedError("consumer rejected chunk", cause)

    assert wrapped.message == "consumer rejected chunk"
    assert wrapped.cause is cause


def test_keyword_forms_match_positional_forms() -> None:
    """``cause=`` should be accepted alone or after a message."""
    cause = KeyError("missing")

    assert WrappedError(cause=cause).cause is cause
    assert WrappedError("lookup failed", cause=cause).message == "lookup failed"


def test_none_message_falls_back_to_derived_message() -> None:
    """``WrappedError(None, cause)`` should behave like ``WrappedError(cause)``."""
    cause = OSError("lambda error")
    assert WrappedError(None, cause).message == WrappedError(cause).message


@pytest.mark.parametrize(
    ("args", "kwargs"),
    [
        ((), {}),
        ((None,), {}),
        (("message", None), {}),
        (("message",), {"cause": None}),
        ((), {"cause": None}),
        ((), {"message": "callback failed"}),
        (("callback failed",), {}),
    ],
)
def test_missing_cause_is_rejected_in_every_form(
    args: tuple[object, ...], kwargs: dict[str, object]
) -> None:
    """Absent or ``None`` causes must fail construction immediately."""
    with pytest.raises(InvalidArgumentError) as exc_info:
        WrappedError(*args, **kwargs)

    assert exc_info.value.code == codes.MISSING_CAUSE
    assert isinstance(exc_info.value, ValueError)


@pytest.mark.parametrize("cause", [OSError, 42, b"bytes"])
def test_non_exception_cause_is_rejected(cause: object) -> None:
    """Exception classes and other non-exception values are not valid causes."""
    with pytest.raises(InvalidArgumentError) as exc_info:
        WrappedError(cause)  # type: ignore[call-overload]

    assert exc_info.value.code == codes.INVALID_ARGUMENT


def test_non_string_message_is_rejected() -> None:
    """Messages must be strings or ``None``."""
    with pytest.raises(InvalidArgumentError):
        WrappedError(123, OSError("x"))  # type: ignore[call-overload]


def test_python_chaining_points_at_cause() -> None:
    """Tracebacks should show the wrapped failure as the direct cause."""
    cause = OSError("boom")

    wrapped = WrappedError(cause)

    assert wrapped.__cause__ is cause
    assert wrapped.__suppress_context__ is True


def test_fields_are_read_only() -> None:
    """Message and cause cannot be reassigned after construction."""
    wrapped = WrappedError(OSError("boom"))

    with pytest.raises(AttributeError):
        wrapped.cause = OSError("other")  # type: ignore[misc]
    with pytest.raises(AttributeError):
        wrapped.message = "other"  # type: ignore[misc]


def test_single_layer_root_cause_is_the_cause() -> None:
    """One wrapper should resolve directly to its cause object."""
    cause = OSError("lambda error")
    assert WrappedError(cause).root_cause() is cause


@pytest.mark.parametrize("layers", [1, 2, 3, 10, 200])
def test_nested_root_cause_resolves_innermost_error(layers: int) -> None:
    """Any nesting depth should resolve to the original exception object."""
    cause = OSError("lambda error")
    outer = _nest(cause, layers)

    assert isinstance(outer, WrappedError)
    assert outer.root_cause() is cause
    assert wrap_depth(outer) == layers


def test_root_cause_keeps_explicit_messages_out_of_the_result() -> None:
    """Wrapper messages should not leak into the resolved root cause."""
    cause = ValueError("inner")
    outer = WrappedError("outer", WrappedError("middle", cause))

    assert outer.root_cause() is cause
    assert str(outer.root_cause()) == "inner"


def test_wrappers_compare_by_identity() -> None:
    """Two wrappers around the same cause are distinct values."""
    cause = OSError("same")
    first = WrappedError(cause)
    second = WrappedError(cause)

    assert first != second
    assert first == first
    assert first.root_cause() is second.root_cause()


def test_free_function_helpers_accept_plain_exceptions() -> None:
    """Chain helpers should treat unwrapped errors as zero-depth chains."""
    plain = RuntimeError("direct")

    assert root_cause(plain) is plain
    assert wrap_depth(plain) == 0
    assert list(iter_wrapped(plain)) == []
    assert is_wrapped(plain) is False


def test_iter_wrapped_yields_layers_outermost_first() -> None:
    """Layer iteration should follow the chain from the outside in."""
    cause = OSError("root")
    inner = WrappedError("inner", cause)
    outer = WrappedError("outer", inner)

    assert list(iter_wrapped(outer)) == [outer, inner]
    assert is_wrapped(outer) is True


def test_cyclic_chain_is_detected_instead_of_looping() -> None:
    """A tampered chain that loops back must raise rather than hang."""
    first = WrappedError(OSError("root"))
    second = WrappedError(first)
    first._cause = second  # simulate out-of-contract tampering

    with pytest.raises(CyclicCauseError):
        second.root_cause()
    with pytest.raises(CyclicCauseError):
        wrap_depth(second)


def test_repr_names_message_and_cause_type() -> None:
    """repr should be informative without recursing into the cause."""
    wrapped = WrappedError("consumer failed", OSError("x"))
    assert repr(wrapped) == "WrappedError('consumer failed', cause=OSError)"


def test_pickle_round_trip_preserves_message_and_cause() -> None:
    """Wrappers should survive pickling, e.g. across process pools."""
    original = WrappedError("outer", WrappedError(ValueError("inner")))

    restored = pickle.loads(pickle.dumps(original))

    assert isinstance(restored, WrappedError)
    assert restored.message == "outer"
    assert isinstance(restored.cause, WrappedError)
    assert isinstance(restored.root_cause(), ValueError)
    assert str(restored.root_cause()) == "inner"


def test_invalid_argument_error_pickle_keeps_code() -> None:
    """Construction failures should keep their code when pickled."""
    error = InvalidArgumentError("cause must not be None", code=codes.MISSING_CAUSE)

    restored = pickle.loads(pickle.dumps(error))

    assert restored.code == codes.MISSING_CAUSE
    assert str(restored) == "cause must not be None"


def test_wrapped_error_is_a_distinct_exception_kind() -> None:
    """WrappedError must not share a hierarchy with common domain errors."""
    assert issubclass(WrappedError, Exception)
    assert not issubclass(WrappedError, (OSError, ValueError))
