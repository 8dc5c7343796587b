"""Exception normalization into ``ErrorDetail`` values.

Classification always looks through callback boundaries: a ``TimeoutError``
raised inside a callback and wrapped on the way out still normalizes as a
retryable dependency failure. Where the failure came from is recorded in
metadata instead.
"""

from __future__ import annotations

from typing import Mapping

from . import codes
from .factories import (
    dependency_error,
    internal_error,
    not_found_error,
    policy_error,
    validation_error,
)
from .types import ErrorDetail
from .wrapped import CyclicCauseError, InvalidArgumentError, root_cause, wrap_depth


def exception_to_error(exc: BaseException) -> ErrorDetail:
    """Normalize ``exc`` (wrapped or not) into an ``ErrorDetail``.

    Metadata always carries ``exception_type`` naming the root cause's type.
    For wrapped errors it also carries ``origin="callback"``, ``wrap_depth``
    and ``wrapper_message``.
    """
    try:
        root = root_cause(exc)
    except CyclicCauseError as cycle:
        return internal_error(
            str(cycle),
            code=codes.CYCLIC_CAUSE_CHAIN,
            wrapped=True,
            metadata={"exception_type": type(exc).__name__},
        )

    depth = wrap_depth(exc)
    metadata = {"exception_type": type(root).__name__}
    if depth:
        metadata["origin"] = "callback"
        metadata["wrap_depth"] = str(depth)
        metadata["wrapper_message"] = str(exc)
    return _classify(root, wrapped=depth > 0, metadata=metadata)


def _classify(
    root: BaseException, *, wrapped: bool, metadata: Mapping[str, str]
) -> ErrorDetail:
    message = str(root)

    if isinstance(root, InvalidArgumentError):
        return validation_error(
            message, code=root.code, wrapped=wrapped, metadata=metadata
        )

    if isinstance(root, ValueError):
        return validation_error(message, wrapped=wrapped, metadata=metadata)

    if isinstance(root, KeyError):
        return not_found_error(message, wrapped=wrapped, metadata=metadata)

    if isinstance(root, PermissionError):
        return policy_error(message, wrapped=wrapped, metadata=metadata)

    if isinstance(root, TimeoutError):
        return dependency_error(
            message or "dependency timeout",
            code=codes.DEPENDENCY_TIMEOUT,
            wrapped=wrapped,
            metadata=metadata,
        )

    if isinstance(root, ConnectionError):
        return dependency_error(
            message or "dependency unavailable",
            wrapped=wrapped,
            metadata=metadata,
        )

    return internal_error(
        message or "unexpected exception", wrapped=wrapped, metadata=metadata
    )
