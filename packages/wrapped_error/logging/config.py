"""Stdout logging configuration.

Records are emitted as JSON lines by default. When a record carries a
``WrappedError`` the formatter also reports the root cause, so log consumers
see the original failure without unwrapping it themselves.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime
from typing import IO, Any

from ..config import LoggingSettings
from ..errors import CyclicCauseError, WrappedError, root_cause, wrap_depth
from . import fields
from .context import bind_context, get_context


class ContextFilter(logging.Filter):
    """Snapshot the bound context onto the record as ``record.context``.

    Boundary fields such as ``error_type`` and ``wrap_depth`` ride along here
    when the record is emitted inside ``log_context``.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        setattr(record, "context", get_context())
        return True


class JsonFormatter(logging.Formatter):
    """One JSON object per line; wrapped exceptions also report their root."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            fields.TIMESTAMP: datetime.now(UTC).isoformat(),
            fields.LEVEL: record.levelname,
            fields.LOGGER: record.name,
            fields.MESSAGE: record.getMessage(),
            **_record_context(record),
        }
        if record.exc_info:
            payload[fields.EXCEPTION] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str, separators=(",", ":"))


class PlainFormatter(logging.Formatter):
    """Console lines for local runs, with context and root cause as ``key=value``."""

    def __init__(self) -> None:
        super().__init__(
            fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S%z",
        )

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        extras = _record_context(record)
        if not extras:
            return line
        pairs = " ".join(f"{key}={value}" for key, value in sorted(extras.items()))
        return f"{line} {pairs}"


def configure_logging(
    settings: LoggingSettings | None = None,
    *,
    stream: IO[str] | None = None,
) -> None:
    """Install a single stream handler on the root logger.

    Existing root handlers are replaced, so calling this twice does not
    duplicate output. ``service`` and ``environment`` are bound into the
    logging context.
    """
    settings = settings or LoggingSettings()

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(settings.level)

    handler = logging.StreamHandler(stream=stream or sys.stdout)
    handler.setLevel(settings.level)
    handler.addFilter(ContextFilter())
    handler.setFormatter(JsonFormatter() if settings.json_output else PlainFormatter())
    root.addHandler(handler)

    bind_context(
        **{fields.SERVICE: settings.service, fields.ENVIRONMENT: settings.environment}
    )


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger from the standard logging hierarchy."""
    return logging.getLogger(name)


def _wrapped_fields(error: BaseException | None) -> dict[str, str]:
    if not isinstance(error, WrappedError):
        return {}
    try:
        root = root_cause(error)
    except CyclicCauseError:
        return {fields.ROOT_CAUSE: "<cyclic>"}
    return {
        fields.ROOT_CAUSE: f"{type(root).__name__}: {root}",
        fields.WRAP_DEPTH: str(wrap_depth(error)),
    }


def _record_context(record: logging.LogRecord) -> dict[str, str]:
    """Bound context plus root-cause fields for a wrapped ``exc_info``."""
    context = getattr(record, "context", None)
    merged = dict(context) if isinstance(context, dict) else {}
    if record.exc_info:
        merged.update(_wrapped_fields(record.exc_info[1]))
    return merged
