"""Environment-based configuration using pydantic-settings.

Controls the ambient behaviour of errorlist: how the structured logger renders,
which verbosity gates mutation logging, and how much of the call stack leaves
capture.

Example:
    >>> from errorlist.config import get_settings
    >>> settings = get_settings()
    >>> settings.logging.add_threshold
    3
    >>> settings.trace.enabled
    True

    # Or with environment variables:
    # ERRORLIST_LOG_VERBOSITY=3
    # ERRORLIST_TRACE_MAX_FRAMES=20
"""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated, Literal

from pydantic import Field, NonNegativeInt, PositiveInt, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="ERRORLIST_LOG_",
        extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: Literal["console", "json", "none"] = "console"
    verbosity: NonNegativeInt = Field(default=0, description="glog-style -v level of loggers from get_logger()")
    add_threshold: NonNegativeInt = Field(default=3, description="Verbosity required before Errors.add logs")
    colors: bool | None = None

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        """Accept lowercase level names."""
        return v.upper() if isinstance(v, str) else v


class TraceSettings(BaseSettings):
    """Stack capture configuration for leaf errors."""

    model_config = SettingsConfigDict(
        env_prefix="ERRORLIST_TRACE_",
        extra="ignore",
    )

    enabled: bool = True
    max_frames: Annotated[PositiveInt | None, Field(description="Keep only the innermost N frames")] = None


class ErrorlistSettings(BaseSettings):
    """Root settings for errorlist.

    Loads configuration from environment variables with ERRORLIST_ prefix.

    Example environment variables:
        ERRORLIST_LOG_LEVEL=DEBUG
        ERRORLIST_LOG_FORMAT=json
        ERRORLIST_LOG_VERBOSITY=3
        ERRORLIST_TRACE_ENABLED=false
    """

    model_config = SettingsConfigDict(
        env_prefix="ERRORLIST_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    trace: TraceSettings = Field(default_factory=TraceSettings)


@lru_cache(maxsize=1)
def get_settings() -> ErrorlistSettings:
    """Get the global settings instance (cached)."""
    return ErrorlistSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing).

    After calling this, the next get_settings() call will
    reload configuration from environment.
    """
    get_settings.cache_clear()
