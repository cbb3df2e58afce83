"""Async retry loops.

Same semantics as the synchronous loops for coroutine operations. The wait
uses ``asyncio.sleep``, so cancelling the surrounding task interrupts it and
``asyncio.CancelledError`` propagates to the caller.
"""

from __future__ import annotations

import asyncio
import inspect
from collections.abc import Awaitable, Callable
from typing import TypeAlias, TypeVar

from retrycase.foundation.errors import Result

from .attempts import check_max_attempts, next_wait
from .backoff import BackOff

T = TypeVar("T")
E = TypeVar("E")

AsyncOperation: TypeAlias = Callable[[], Awaitable[Result[T, E]]]
AsyncNotify: TypeAlias = Callable[[E, float], None] | Callable[[E, float], Awaitable[None]]

# Non-blocking wait between attempts, looked up per call
_sleep = asyncio.sleep


async def retry_async(operation: AsyncOperation[T, E], backoff: BackOff) -> Result[T, E]:
    """Async retry(): await ``operation`` until Ok or STOP."""
    return await _run_async(operation, backoff, None, None)


async def retry_notify_async(
    operation: AsyncOperation[T, E],
    backoff: BackOff,
    notify: AsyncNotify[E] | None,
) -> Result[T, E]:
    """Async retry_notify(). ``notify`` may be a plain function or a coroutine function."""
    return await _run_async(operation, backoff, notify, None)


async def retry_n_async(
    max_attempts: int,
    backoff: BackOff,
    notify: AsyncNotify[E] | None,
    operation: AsyncOperation[T, E],
) -> Result[T, E]:
    """Async retry_n().

    Raises:
        InvalidArgumentError: If max_attempts is not an int >= 1
    """
    check_max_attempts(max_attempts)
    return await _run_async(operation, backoff, notify, max_attempts)


async def _run_async(
    operation: AsyncOperation[T, E],
    backoff: BackOff,
    notify: AsyncNotify[E] | None,
    max_attempts: int | None,
) -> Result[T, E]:
    name = getattr(operation, "__name__", "operation")
    backoff.reset()
    attempt = 0

    while True:
        attempt += 1
        if (result := await operation()).is_ok():
            return result
        error = result.unwrap_err()

        if (delay := next_wait(name, attempt, max_attempts, backoff, error)) is None:
            return result

        if notify is not None and inspect.isawaitable(outcome := notify(error, delay)):
            await outcome

        await _sleep(delay)
