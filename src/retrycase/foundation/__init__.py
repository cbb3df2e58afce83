"""Foundation: outcome types, errors, configuration and logging setup."""

from .config import BackOffSettings, LoggingSettings, RetrycaseSettings, clear_settings_cache, get_settings
from .errors import (
    Err,
    ErrorCode,
    InvalidArgumentError,
    Ok,
    Result,
    RetryCanceled,
    RetryException,
    catching,
)
from .log import configure_logging

__all__ = [
    # Result
    "Result", "Ok", "Err", "catching",
    # Errors
    "ErrorCode", "RetryException", "InvalidArgumentError", "RetryCanceled",
    # Config
    "BackOffSettings", "LoggingSettings", "RetrycaseSettings", "get_settings", "clear_settings_cache",
    # Logging
    "configure_logging",
]
