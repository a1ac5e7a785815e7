"""Configuration management for swift-devtools."""

from __future__ import annotations

from typing import Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigurationError
from .logging_utils import LogLevel, configure_logging


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_prefix="SWIFT_DEVTOOLS_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Server Configuration
    server_name: str = Field(default="Swift Dev Tools Server", description="Name reported to MCP clients")
    server_version: str = Field(default="1.0.0", description="Version reported to MCP clients")

    # Logging Configuration
    log_level: LogLevel = Field(default="INFO", description="Log level")
    log_format: Literal["text", "json"] = Field(default="text", description="Log format")

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().upper()
        return value


def get_settings(**overrides: object) -> Settings:
    """Get application settings and configure logging from them.

    Args:
        overrides: Explicit values that take precedence over the environment

    Returns:
        Settings instance

    Raises:
        ConfigurationError: If the environment holds invalid values
    """
    try:
        settings = Settings(**overrides)  # type: ignore[arg-type]
    except ValidationError as exc:
        raise ConfigurationError(str(exc)) from exc

    configure_logging(settings.log_level, settings.log_format)
    return settings
