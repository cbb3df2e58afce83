"""Logger setup for the ``retrycase`` logger hierarchy.

Library modules only ever call ``logging.getLogger("retrycase.<area>")``;
applications that want the output wired up call ``configure_logging()`` once.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, TextIO

from .config import get_settings

if TYPE_CHECKING:
    from .config import LoggingSettings

ROOT_LOGGER = "retrycase"

logging.getLogger(ROOT_LOGGER).addHandler(logging.NullHandler())


def configure_logging(
    settings: LoggingSettings | None = None,
    *,
    stream: TextIO | None = None,
) -> logging.Logger:
    """Attach a stream handler to the ``retrycase`` logger.

    Idempotent: a handler installed by an earlier call is replaced.

    Args:
        settings: Logging settings; defaults to ``get_settings().logging``
        stream: Output stream (default: stderr)
    """
    settings = settings or get_settings().logging
    logger = logging.getLogger(ROOT_LOGGER)
    for handler in [h for h in logger.handlers if getattr(h, "_retrycase", False)]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(settings.format))
    handler._retrycase = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.setLevel(settings.level)
    logger.propagate = settings.propagate
    return logger
