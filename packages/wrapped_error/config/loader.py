"""Settings loading with deterministic precedence.

The cascade is always:
1) CLI params
2) Environment variables
3) ``~/.config/wrapped_error/config.yaml``
4) Model defaults

Environment variable format:
- Prefix: ``WRAPPED_ERROR_``
- Nested keys: ``__`` separator
- Example: ``WRAPPED_ERROR_BOUNDARY__LOG_LEVEL=INFO`` -> ``boundary.log_level``
"""

from __future__ import annotations

import copy
from pathlib import Path
from typing import Any, ClassVar, Mapping

from .models import DEFAULT_CONFIG_PATH, ENV_PREFIX, WrappedErrorSettings


def load_settings(
    *,
    cli_params: Mapping[str, Any] | None = None,
    environ: Mapping[str, str] | None = None,
    config_path: str | Path | None = None,
) -> WrappedErrorSettings:
    """Resolve settings through the standard precedence cascade.

    ``environ`` replaces the process environment when given, which keeps
    tests hermetic. A missing YAML file contributes nothing.
    """
    overrides: dict[str, Any] = {}
    if environ is not None:
        overrides = _env_overrides(environ, prefix=ENV_PREFIX)
    if cli_params:
        overrides = _merge_dicts(overrides, cli_params)

    settings_cls = _bind_sources(
        config_path=Path(config_path) if config_path is not None else DEFAULT_CONFIG_PATH,
        read_process_env=environ is None,
    )
    return settings_cls(**overrides)


def _bind_sources(
    *, config_path: Path, read_process_env: bool
) -> type[WrappedErrorSettings]:
    """Return a settings class reading the given YAML path and env policy."""

    class _LoadedSettings(WrappedErrorSettings):
        _config_path: ClassVar[Path] = config_path
        _read_process_env: ClassVar[bool] = read_process_env

    return _LoadedSettings


def _env_overrides(environ: Mapping[str, str], *, prefix: str) -> dict[str, Any]:
    """Map prefixed variables into a nested dict; pydantic coerces the values."""
    output: dict[str, Any] = {}
    for key, raw_value in environ.items():
        if not key.upper().startswith(prefix):
            continue
        path = [
            segment.strip().lower()
            for segment in key[len(prefix) :].split("__")
            if segment.strip()
        ]
        if not path:
            continue

        cursor = output
        for segment in path[:-1]:
            child = cursor.get(segment)
            if not isinstance(child, dict):
                child = cursor[segment] = {}
            cursor = child
        cursor[path[-1]] = raw_value
    return output


def _merge_dicts(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Recursively merge mappings, with ``override`` taking precedence."""
    result = {key: copy.deepcopy(value) for key, value in base.items()}
    for key, value in override.items():
        current = result.get(key)
        if isinstance(current, dict) and isinstance(value, Mapping):
            result[key] = _merge_dicts(current, value)
        else:
            result[key] = copy.deepcopy(value)
    return result
