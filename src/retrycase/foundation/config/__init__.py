"""Configuration for retrycase."""

from .settings import (
    BackOffSettings,
    LoggingSettings,
    RetrycaseSettings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    "BackOffSettings",
    "LoggingSettings",
    "RetrycaseSettings",
    "get_settings",
    "clear_settings_cache",
]
