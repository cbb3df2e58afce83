"""Retry loops.

Invoke a fallible operation until it succeeds, the backoff strategy answers
STOP, or an attempt cap is reached. The operation reports failure by
returning ``Err``; the loops never decide whether an error is worth retrying.

Example:
    >>> from retrycase import ExponentialBackOff, Ok, Err, retry
    >>>
    >>> def ping() -> Result[None, str]:
    ...     return Ok() if server.up() else Err("server down")
    >>>
    >>> outcome = retry(ping, ExponentialBackOff(max_elapsed_time=30))
    >>> if outcome.is_err():
    ...     print("gave up:", outcome.unwrap_err())
"""

from __future__ import annotations

import threading
import time
from collections.abc import Callable
from typing import TypeAlias, TypeVar, cast

from retrycase.foundation.errors import Err, Result, RetryCanceled

from .attempts import check_max_attempts, logger, next_wait
from .backoff import BackOff

T = TypeVar("T")
E = TypeVar("E")

Operation: TypeAlias = Callable[[], Result[T, E]]
Notify: TypeAlias = Callable[[E, float], None]

# Blocking wait between attempts, looked up per call
_sleep = time.sleep


def retry(
    operation: Operation[T, E],
    backoff: BackOff,
    *,
    cancel: threading.Event | None = None,
) -> Result[T, E | RetryCanceled]:
    """Retry ``operation`` until it succeeds or ``backoff`` answers STOP.

    The operation always runs at least once. There is no implicit cap: an
    operation that keeps failing paired with a strategy that never stops
    loops forever.

    Args:
        operation: Zero-argument callable returning Ok or Err
        backoff: Strategy supplying the wait after each failure
        cancel: Optional event; setting it during a wait ends the call with
            ``Err(RetryCanceled)``

    Returns:
        The first Ok, or the most recent Err when retries end
    """
    return _run(operation, backoff, None, None, cancel)


def retry_notify(
    operation: Operation[T, E],
    backoff: BackOff,
    notify: Notify[E] | None,
    *,
    cancel: threading.Event | None = None,
) -> Result[T, E | RetryCanceled]:
    """Like retry(), calling ``notify(error, wait)`` before each wait.

    ``notify`` runs synchronously in the calling thread, once per failure
    that is followed by a wait. It is not called for the failure that ends
    the sequence. An exception raised by ``notify`` aborts the retry call
    and propagates unchanged.
    """
    return _run(operation, backoff, notify, None, cancel)


def retry_n(
    max_attempts: int,
    backoff: BackOff,
    notify: Notify[E] | None,
    operation: Operation[T, E],
    *,
    cancel: threading.Event | None = None,
) -> Result[T, E | RetryCanceled]:
    """Like retry_notify(), but make at most ``max_attempts`` attempts.

    The error from the last attempt is returned as-is whether the sequence
    ended on the cap or on STOP; callers cannot tell the two apart.

    Raises:
        InvalidArgumentError: If max_attempts is not an int >= 1
    """
    check_max_attempts(max_attempts)
    return _run(operation, backoff, notify, max_attempts, cancel)


def _run(
    operation: Operation[T, E],
    backoff: BackOff,
    notify: Notify[E] | None,
    max_attempts: int | None,
    cancel: threading.Event | None,
) -> Result[T, E | RetryCanceled]:
    name = getattr(operation, "__name__", "operation")
    backoff.reset()
    attempt = 0

    while True:
        attempt += 1
        if (result := operation()).is_ok():
            return cast("Result[T, E | RetryCanceled]", result)
        error = result.unwrap_err()

        if (delay := next_wait(name, attempt, max_attempts, backoff, error)) is None:
            return cast("Result[T, E | RetryCanceled]", result)

        if notify is not None:
            notify(error, delay)

        if cancel is None:
            _sleep(delay)
        elif cancel.wait(delay):
            logger.debug(f"[{name}] Canceled after {attempt} attempt(s)")
            return Err(RetryCanceled.after(attempt, error))
