"""Error codes, exceptions and the canceled outcome.

Operation failures are never represented here: they travel as the operation's
own ``Err`` payload. This module only covers the library's own conditions.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt


class ErrorCode(StrEnum):
    """Conditions raised or reported by retrycase itself."""
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    CANCELED = "CANCELED"


class RetryException(Exception):
    """Base class for exceptions raised by retrycase."""

    code: ErrorCode

    def __init__(self, message: str, code: ErrorCode) -> None:
        self.code = code
        super().__init__(message)


class InvalidArgumentError(RetryException, ValueError):
    """Raised for arguments a retry call or strategy cannot accept."""

    def __init__(self, message: str) -> None:
        super().__init__(message, ErrorCode.INVALID_ARGUMENT)

    @classmethod
    def require(cls, condition: bool, message: str) -> None:
        """Raise with ``message`` unless ``condition`` holds."""
        if not condition:
            raise cls(message)


class RetryCanceled(BaseModel):
    """Terminal outcome of a retry call whose cancel signal fired mid-wait.

    Returned as ``Err(RetryCanceled(...))`` so callers can tell a canceled
    sequence apart from one that simply ran out of attempts.
    """

    model_config = ConfigDict(frozen=True)

    attempts: NonNegativeInt = Field(description="Operation invocations made before cancellation")
    last_error: Any = Field(default=None, description="Most recent operation error")
    code: ErrorCode = ErrorCode.CANCELED

    @classmethod
    def after(cls, attempts: int, last_error: object) -> Self:
        """Factory used by the retry loops."""
        return cls(attempts=attempts, last_error=last_error)

    def __str__(self) -> str:
        return f"retry canceled after {self.attempts} attempt(s): {self.last_error}"
