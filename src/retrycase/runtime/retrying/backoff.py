"""Backoff strategy contract.

A strategy is a mutable cursor over a sequence of waits. The retry loops call
``reset()`` once per retry call and ``next_backoff()`` after every failed
attempt; they never inspect the strategy beyond that.

Waits are float seconds. ``STOP`` is the one value that is not a wait: it
tells the loop to give up and return the last error.
"""

from __future__ import annotations

from enum import Enum
from typing import Literal, Protocol, TypeAlias, TypeGuard, runtime_checkable


class Stop(Enum):
    """Stop sentinel type. Its only member is ``STOP``."""
    STOP = "stop"

    def __repr__(self) -> str:
        return "STOP"


STOP = Stop.STOP

Delay: TypeAlias = float | Literal[Stop.STOP]


def is_stop(value: Delay) -> TypeGuard[Stop]:
    """Check whether a strategy answer is the stop sentinel."""
    return value is STOP


@runtime_checkable
class BackOff(Protocol):
    """Protocol every backoff strategy satisfies.

    Instances belong to one retry call at a time. They carry no locking and
    must not be shared between retry calls running concurrently; reusing one
    after a call has returned is fine since the next call resets it.
    """

    def reset(self) -> None:
        """Rewind the cursor to the starting state. Must not fail."""
        ...

    def next_backoff(self) -> Delay:
        """Advance the cursor.

        Returns:
            Non-negative wait in seconds, or ``STOP``
        """
        ...
