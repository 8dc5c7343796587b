"""Public API for wrapped-error configuration."""

from .loader import load_settings
from .models import (
    DEFAULT_CONFIG_PATH,
    BoundarySettings,
    LoggingSettings,
    WrappedErrorSettings,
)

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "BoundarySettings",
    "LoggingSettings",
    "WrappedErrorSettings",
    "load_settings",
]
