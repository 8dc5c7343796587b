"""Typed configuration models for wrapped-error runtime settings."""

from __future__ import annotations

from pathlib import Path
from typing import ClassVar, Literal

from pydantic import BaseModel, Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "wrapped_error" / "config.yaml"
ENV_PREFIX = "WRAPPED_ERROR_"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LoggingSettings(BaseModel):
    """Root logging setup applied by ``configure_logging``."""

    level: LogLevel = "INFO"
    json_output: bool = True
    service: str = "wrapped-error"
    environment: str = "dev"


class BoundarySettings(BaseModel):
    """How callback boundaries report the errors they wrap."""

    log_wrapped: bool = True
    log_level: LogLevel = "DEBUG"


class WrappedErrorSettings(BaseSettings):
    """Root settings resolved from init/env/yaml/defaults sources."""

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_nested_delimiter="__",
        extra="ignore",
        nested_model_default_partial_update=True,
    )

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    boundary: BoundarySettings = Field(default_factory=BoundarySettings)

    _config_path: ClassVar[Path] = DEFAULT_CONFIG_PATH
    _read_process_env: ClassVar[bool] = True

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Precedence: init > env > yaml; model defaults fill the rest."""
        sources: list[PydanticBaseSettingsSource] = [init_settings]
        if cls._read_process_env:
            sources.append(env_settings)
        sources.append(
            YamlConfigSettingsSource(
                settings_cls,
                yaml_file=cls._config_path,
                yaml_file_encoding="utf-8",
            )
        )
        return tuple(sources)
