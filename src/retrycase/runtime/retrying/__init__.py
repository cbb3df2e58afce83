"""Retry loops with pluggable backoff strategies.

Example:
    >>> from retrycase.runtime.retrying import ConstantBackOff, retry_n, log_notify
    >>> outcome = retry_n(5, ConstantBackOff(0.2), log_notify(), fetch_config)
"""

from .async_loop import AsyncNotify, AsyncOperation, retry_async, retry_n_async, retry_notify_async
from .backoff import STOP, BackOff, Delay, Stop, is_stop
from .loop import Notify, Operation, retry, retry_n, retry_notify
from .notify import log_notify
from .strategies import (
    ConstantBackOff,
    ExponentialBackOff,
    MaxRetriesBackOff,
    StopBackOff,
    ZeroBackOff,
    with_max_retries,
)

__all__ = [
    # Strategy contract
    "BackOff", "Delay", "Stop", "STOP", "is_stop",
    # Strategies
    "ZeroBackOff", "StopBackOff", "ConstantBackOff", "ExponentialBackOff",
    "MaxRetriesBackOff", "with_max_retries",
    # Loops
    "Operation", "Notify", "retry", "retry_notify", "retry_n",
    "AsyncOperation", "AsyncNotify", "retry_async", "retry_notify_async", "retry_n_async",
    # Observers
    "log_notify",
]
