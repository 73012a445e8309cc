"""Configuration management using pydantic-settings."""

from .settings import (
    ErrorlistSettings,
    LoggingSettings,
    TraceSettings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    "ErrorlistSettings",
    "LoggingSettings",
    "TraceSettings",
    "clear_settings_cache",
    "get_settings",
]
