"""Structured error shape for handing failures to logging and transport code."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping


class ErrorCategory(str, Enum):
    """Coarse classification of a normalized failure."""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    POLICY = "policy"
    DEPENDENCY = "dependency"
    INTERNAL = "internal"


@dataclass(frozen=True)
class ErrorDetail:
    """Normalized view of one exception.

    ``wrapped`` is true when the exception reached the handler through one or
    more callback boundaries; ``code``/``category`` always describe the root
    cause.
    """

    code: str
    message: str
    category: ErrorCategory
    retryable: bool = False
    wrapped: bool = False
    metadata: Mapping[str, str] = field(default_factory=dict)
