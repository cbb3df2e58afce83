"""Per-attempt decisions shared by the sync and async loops."""

from __future__ import annotations

import logging

from retrycase.foundation.errors import InvalidArgumentError

from .backoff import BackOff, is_stop

logger = logging.getLogger("retrycase.retry")


def check_max_attempts(max_attempts: int) -> None:
    """Reject caps that are not a positive int.

    Raises:
        InvalidArgumentError: If max_attempts is not an int >= 1
    """
    InvalidArgumentError.require(
        isinstance(max_attempts, int) and not isinstance(max_attempts, bool) and max_attempts >= 1,
        f"max_attempts must be an int >= 1, got {max_attempts!r}",
    )


def next_wait(
    name: str,
    attempt: int,
    max_attempts: int | None,
    backoff: BackOff,
    error: object,
) -> float | None:
    """Decide what follows failed attempt number ``attempt``.

    The cap is checked before the strategy is queried, so the attempt that
    reaches the cap never advances the strategy.

    Returns:
        Wait in seconds before the next attempt, or None when the sequence ends
    """
    if max_attempts is not None and attempt >= max_attempts:
        logger.debug(f"[{name}] Giving up after {attempt}/{max_attempts} attempts: {error!r}")
        return None

    if is_stop(delay := backoff.next_backoff()):
        logger.debug(f"[{name}] Backoff stopped after {attempt} attempt(s): {error!r}")
        return None

    logger.debug(f"[{name}] Attempt {attempt} failed, retrying in {delay:.3f}s: {error!r}")
    return delay
