"""Retrycase - retry loops with pluggable backoff strategies.

Invoke a fallible operation until it succeeds, the backoff strategy says
stop, or an attempt cap is reached. Operations report failure by returning
``Err``; the loops hand back the most recent error untouched.

Quick Start:
    >>> from retrycase import ExponentialBackOff, Err, Ok, retry
    >>>
    >>> def connect() -> Result[None, OSError]:
    ...     try:
    ...         socket.create_connection(("db", 5432), timeout=1).close()
    ...     except OSError as e:
    ...         return Err(e)
    ...     return Ok()
    >>>
    >>> outcome = retry(connect, ExponentialBackOff(max_elapsed_time=60))

Exception-raising code:
    >>> from retrycase import catching, retry_n, ConstantBackOff, log_notify
    >>> op = catching(lambda: httpx.get(url).raise_for_status(), httpx.HTTPError)
    >>> outcome = retry_n(5, ConstantBackOff(1.0), log_notify(), op)

Cancellation:
    >>> stop = threading.Event()
    >>> outcome = retry(connect, ExponentialBackOff(), cancel=stop)
    >>> # another thread: stop.set() -> outcome is Err(RetryCanceled(...))
"""

from __future__ import annotations

__version__ = "0.1.0"

# Outcomes & errors
from .foundation.errors import (
    Err,
    ErrorCode,
    InvalidArgumentError,
    Ok,
    Result,
    RetryCanceled,
    RetryException,
    catching,
)

# Configuration & logging
from .foundation.config import (
    BackOffSettings,
    LoggingSettings,
    RetrycaseSettings,
    clear_settings_cache,
    get_settings,
)
from .foundation.log import configure_logging

# Strategy contract & strategies
from .runtime.retrying import (
    STOP,
    BackOff,
    ConstantBackOff,
    Delay,
    ExponentialBackOff,
    MaxRetriesBackOff,
    Notify,
    Operation,
    Stop,
    StopBackOff,
    ZeroBackOff,
    is_stop,
    with_max_retries,
)

# Loops & observers
from .runtime.retrying import (
    log_notify,
    retry,
    retry_async,
    retry_n,
    retry_n_async,
    retry_notify,
    retry_notify_async,
)

__all__ = [
    # Version
    "__version__",
    # Outcomes
    "Result",
    "Ok",
    "Err",
    "catching",
    # Errors
    "ErrorCode",
    "RetryException",
    "InvalidArgumentError",
    "RetryCanceled",
    # Configuration
    "BackOffSettings",
    "LoggingSettings",
    "RetrycaseSettings",
    "get_settings",
    "clear_settings_cache",
    "configure_logging",
    # Strategy contract
    "BackOff",
    "Delay",
    "Stop",
    "STOP",
    "is_stop",
    # Strategies
    "ZeroBackOff",
    "StopBackOff",
    "ConstantBackOff",
    "ExponentialBackOff",
    "MaxRetriesBackOff",
    "with_max_retries",
    # Loops
    "Operation",
    "Notify",
    "retry",
    "retry_notify",
    "retry_n",
    "retry_async",
    "retry_notify_async",
    "retry_n_async",
    # Observers
    "log_notify",
]
