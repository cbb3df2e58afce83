"""Runtime - retry loops and backoff strategies."""

from __future__ import annotations

from .retrying import (
    STOP,
    BackOff,
    ConstantBackOff,
    ExponentialBackOff,
    MaxRetriesBackOff,
    Stop,
    StopBackOff,
    ZeroBackOff,
    is_stop,
    log_notify,
    retry,
    retry_async,
    retry_n,
    retry_n_async,
    retry_notify,
    retry_notify_async,
    with_max_retries,
)

__all__ = [
    # Strategy contract
    "BackOff", "Stop", "STOP", "is_stop",
    # Strategies
    "ZeroBackOff", "StopBackOff", "ConstantBackOff", "ExponentialBackOff",
    "MaxRetriesBackOff", "with_max_retries",
    # Loops
    "retry", "retry_notify", "retry_n",
    "retry_async", "retry_notify_async", "retry_n_async",
    # Observers
    "log_notify",
]
