"""Ready-made observers for retry_notify() and retry_n()."""

from __future__ import annotations

import logging
from typing import Callable


def log_notify(
    logger: logging.Logger | str | None = None,
    level: int = logging.WARNING,
    *,
    min_wait: float | None = None,
) -> Callable[[object, float], None]:
    """Build an observer that logs each retried failure.

    Args:
        logger: Logger or logger name (default: the configured ``notify_logger``)
        level: Log level for the message (default: WARNING)
        min_wait: Skip waits shorter than this many seconds (default: the
            configured ``notify_min_wait``, or log everything)

    Example:
        >>> retry_notify(fetch, ExponentialBackOff(), log_notify("myapp.fetch"))
    """
    if logger is None or min_wait is None:
        from retrycase.foundation.config import get_settings
        settings = get_settings()
        logger = settings.notify_logger if logger is None else logger
        min_wait = settings.notify_min_wait if min_wait is None else min_wait
    log = logging.getLogger(logger) if isinstance(logger, str) else logger

    def notify(error: object, wait: float) -> None:
        if min_wait is not None and wait < min_wait:
            return
        log.log(level, "Operation failed (%s); retrying in %.1f s", error, wait)

    return notify
