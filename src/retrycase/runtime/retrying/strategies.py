"""Concrete backoff strategies.

- ZeroBackOff: retry immediately, forever
- StopBackOff: never retry
- ConstantBackOff: fixed wait
- ExponentialBackOff: growing randomized wait, capped by elapsed time
- MaxRetriesBackOff: stop another strategy after N waits
"""

from __future__ import annotations

import random
import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Self

from retrycase.foundation.errors import InvalidArgumentError

from .backoff import STOP, BackOff, Delay, is_stop

if TYPE_CHECKING:
    from retrycase.foundation.config import BackOffSettings


@dataclass(slots=True)
class ZeroBackOff:
    """Always answers a zero wait. Pair with an attempt cap."""

    def reset(self) -> None:
        pass

    def next_backoff(self) -> Delay:
        return 0.0


@dataclass(slots=True)
class StopBackOff:
    """Always answers STOP, so the operation runs exactly once."""

    def reset(self) -> None:
        pass

    def next_backoff(self) -> Delay:
        return STOP


@dataclass(slots=True)
class ConstantBackOff:
    """Fixed wait between attempts.

    Attributes:
        interval: Wait in seconds (default: 1.0)
    """

    interval: float = 1.0

    def __post_init__(self) -> None:
        InvalidArgumentError.require(self.interval >= 0, f"interval must be >= 0, got {self.interval}")

    def reset(self) -> None:
        pass

    def next_backoff(self) -> Delay:
        return self.interval


@dataclass(slots=True)
class ExponentialBackOff:
    """Exponentially growing wait with randomization and an elapsed-time cap.

    Each answer is drawn uniformly from
    ``[current * (1 - randomization_factor), current * (1 + randomization_factor)]``,
    after which ``current`` is multiplied by ``multiplier`` up to ``max_interval``.

    With the defaults (0.5s, factor 0.5, multiplier 1.5) the unrandomized
    sequence is 0.5, 0.75, 1.125, 1.69, 2.53, ... capped at 60s.

    Once more than ``max_elapsed_time`` seconds have passed since ``reset()``
    the strategy answers STOP. ``max_elapsed_time=0`` never stops.

    Attributes:
        initial_interval: First wait before randomization (default: 0.5)
        randomization_factor: Jitter as a fraction of the wait, 0..1 (default: 0.5)
        multiplier: Growth factor per answer, >= 1 (default: 1.5)
        max_interval: Cap on the unrandomized wait (default: 60.0)
        max_elapsed_time: Seconds after reset before answering STOP (default: 900.0)
        clock: Monotonic clock in seconds (default: time.monotonic)
        rand: Uniform [0, 1) source (default: random.random)
    """

    initial_interval: float = 0.5
    randomization_factor: float = 0.5
    multiplier: float = 1.5
    max_interval: float = 60.0
    max_elapsed_time: float = 900.0
    clock: Callable[[], float] = field(default=time.monotonic, repr=False)
    rand: Callable[[], float] = field(default=random.random, repr=False)
    current_interval: float = field(default=0.0, init=False)
    _started: float = field(default=0.0, init=False, repr=False)

    def __post_init__(self) -> None:
        InvalidArgumentError.require(self.initial_interval >= 0, f"initial_interval must be >= 0, got {self.initial_interval}")
        InvalidArgumentError.require(
            0.0 <= self.randomization_factor <= 1.0,
            f"randomization_factor must be within [0, 1], got {self.randomization_factor}",
        )
        InvalidArgumentError.require(self.multiplier >= 1.0, f"multiplier must be >= 1, got {self.multiplier}")
        InvalidArgumentError.require(self.max_interval >= 0, f"max_interval must be >= 0, got {self.max_interval}")
        InvalidArgumentError.require(self.max_elapsed_time >= 0, f"max_elapsed_time must be >= 0, got {self.max_elapsed_time}")
        self.reset()

    @classmethod
    def from_settings(cls, settings: BackOffSettings | None = None, **overrides: object) -> Self:
        """Build from BackOffSettings (default: the global settings), applying keyword overrides."""
        if settings is None:
            from retrycase.foundation.config import get_settings
            settings = get_settings().backoff
        params = settings.model_dump(exclude={"elapsed_capped"})
        params.update(overrides)
        return cls(**params)  # type: ignore[arg-type]

    def reset(self) -> None:
        self.current_interval = self.initial_interval
        self._started = self.clock()

    def elapsed(self) -> float:
        """Seconds since the last reset()."""
        return self.clock() - self._started

    def next_backoff(self) -> Delay:
        if self.max_elapsed_time and self.elapsed() > self.max_elapsed_time:
            return STOP
        delay = self._randomized(self.current_interval)
        self._grow()
        return delay

    def _randomized(self, interval: float) -> float:
        delta = self.randomization_factor * interval
        low, high = interval - delta, interval + delta
        return low + self.rand() * (high - low)

    def _grow(self) -> None:
        # Compare before multiplying so the cap is never overshot
        if self.current_interval >= self.max_interval / self.multiplier:
            self.current_interval = self.max_interval
        else:
            self.current_interval *= self.multiplier


@dataclass(slots=True)
class MaxRetriesBackOff:
    """Wraps a strategy and answers STOP after ``max_retries`` waits.

    ``max_retries=0`` stops on the first failure, so an operation wrapped this
    way runs at most ``max_retries + 1`` times.
    """

    delegate: BackOff
    max_retries: int
    _issued: int = field(default=0, init=False, repr=False)

    def __post_init__(self) -> None:
        InvalidArgumentError.require(self.max_retries >= 0, f"max_retries must be >= 0, got {self.max_retries}")

    @property
    def retries(self) -> int:
        """Waits handed out since the last reset()."""
        return self._issued

    def reset(self) -> None:
        self._issued = 0
        self.delegate.reset()

    def next_backoff(self) -> Delay:
        if self._issued >= self.max_retries:
            return STOP
        delay = self.delegate.next_backoff()
        if not is_stop(delay):
            self._issued += 1
        return delay


def with_max_retries(backoff: BackOff, max_retries: int) -> MaxRetriesBackOff:
    """Cap ``backoff`` at ``max_retries`` waits."""
    return MaxRetriesBackOff(backoff, max_retries)
