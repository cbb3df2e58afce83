"""Environment-based configuration using pydantic-settings.

Supplies defaults for the exponential strategy and for the library logger.
Nothing in the retry loops reads settings implicitly; callers opt in through
``ExponentialBackOff.from_settings()`` and ``configure_logging()``.

Example:
    >>> from retrycase.foundation.config import get_settings
    >>> settings = get_settings()
    >>> settings.backoff.initial_interval
    0.5

    # Or with environment variables:
    # RETRYCASE_BACKOFF_MULTIPLIER=2.0
    # RETRYCASE_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated, Literal

from pydantic import Field, NonNegativeFloat, PositiveFloat, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class BackOffSettings(BaseSettings):
    """Defaults for ExponentialBackOff."""

    model_config = SettingsConfigDict(
        env_prefix="RETRYCASE_BACKOFF_",
        extra="ignore",
    )

    initial_interval: NonNegativeFloat = Field(default=0.5, description="First wait in seconds")
    randomization_factor: Annotated[float, Field(ge=0.0, le=1.0)] = 0.5
    multiplier: Annotated[float, Field(ge=1.0)] = 1.5
    max_interval: NonNegativeFloat = Field(default=60.0, description="Cap on a single wait in seconds")
    max_elapsed_time: NonNegativeFloat = Field(
        default=900.0,
        description="Stop once this many seconds have elapsed since reset (0 = never)",
    )

    @computed_field
    @property
    def elapsed_capped(self) -> bool:
        """Whether the strategy stops on elapsed time at all."""
        return self.max_elapsed_time > 0


class LoggingSettings(BaseSettings):
    """Logging configuration for the ``retrycase`` logger."""

    model_config = SettingsConfigDict(
        env_prefix="RETRYCASE_LOG_",
        extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    propagate: bool = True

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


class RetrycaseSettings(BaseSettings):
    """Root settings for retrycase.

    Example environment variables:
        RETRYCASE_BACKOFF_INITIAL_INTERVAL=0.1
        RETRYCASE_BACKOFF_MAX_ELAPSED_TIME=0
        RETRYCASE_LOG_LEVEL=DEBUG
    """

    model_config = SettingsConfigDict(
        env_prefix="RETRYCASE_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    backoff: BackOffSettings = Field(default_factory=BackOffSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    # Used by log_notify when no logger is passed
    notify_logger: str = "retrycase.notify"
    notify_min_wait: PositiveFloat | None = Field(
        default=None,
        description="Suppress notification logs for waits shorter than this",
    )


@lru_cache(maxsize=1)
def get_settings() -> RetrycaseSettings:
    """Get the global settings instance (cached)."""
    return RetrycaseSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache so the next get_settings() re-reads the environment."""
    get_settings.cache_clear()
