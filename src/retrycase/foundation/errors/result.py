"""Result monad used as the outcome of every retry call.

An operation reports success with ``Ok(value)`` and failure with ``Err(error)``.
The retry loops only look at the variant; the error payload is opaque to them
and is handed back to the caller untouched.

Example:
    >>> def fetch() -> Result[int, str]:
    ...     return Ok(200)
    >>> fetch().map(lambda status: status == 200).unwrap()
    True
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Generic, TypeVar, cast

if TYPE_CHECKING:
    from collections.abc import Iterator

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type
U = TypeVar("U")
F = TypeVar("F")

_OK = True
_ERR = False


class Result(Generic[T, E]):
    """Success (Ok) or failure (Err) of a single operation.

    Immutable; every transformation returns a new Result.

    Examples:
        >>> Ok(2).map(lambda x: x * 3)
        Ok(6)
        >>> Err("boom").map(lambda x: x * 3)
        Err('boom')
    """

    __slots__ = ("_value", "_is_ok")
    __match_args__ = ("_value",)

    def __init__(self, value: T | E, is_ok: bool) -> None:
        """Private constructor. Use Ok() or Err() instead."""
        self._value: T | E = value
        self._is_ok: bool = is_ok

    # ─────────────────────────────────────────────────────────────────
    # Variant checks
    # ─────────────────────────────────────────────────────────────────

    def is_ok(self) -> bool:
        return self._is_ok

    def is_err(self) -> bool:
        return not self._is_ok

    # ─────────────────────────────────────────────────────────────────
    # Extraction
    # ─────────────────────────────────────────────────────────────────

    def unwrap(self) -> T:
        """Return the Ok value.

        Raises:
            RuntimeError: If Result is Err
        """
        if self._is_ok:
            return cast(T, self._value)
        raise RuntimeError(f"Called unwrap() on Err value: {self._value!r}")

    def unwrap_err(self) -> E:
        """Return the Err value.

        Raises:
            RuntimeError: If Result is Ok
        """
        if not self._is_ok:
            return cast(E, self._value)
        raise RuntimeError(f"Called unwrap_err() on Ok value: {self._value!r}")

    def unwrap_or(self, default: T) -> T:
        return cast(T, self._value) if self._is_ok else default

    def ok(self) -> T | None:
        return cast(T, self._value) if self._is_ok else None

    def err(self) -> E | None:
        return None if self._is_ok else cast(E, self._value)

    # ─────────────────────────────────────────────────────────────────
    # Transformation
    # ─────────────────────────────────────────────────────────────────

    def map(self, f: Callable[[T], U]) -> Result[U, E]:
        """Apply f to the Ok value, pass Err through unchanged."""
        if self._is_ok:
            return Ok(f(cast(T, self._value)))
        return Err(cast(E, self._value))

    def map_err(self, f: Callable[[E], F]) -> Result[T, F]:
        """Apply f to the Err value, pass Ok through unchanged."""
        if self._is_ok:
            return Ok(cast(T, self._value))
        return Err(f(cast(E, self._value)))

    def flat_map(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Chain another fallible step after an Ok."""
        if self._is_ok:
            return f(cast(T, self._value))
        return Err(cast(E, self._value))

    def match(self, *, ok: Callable[[T], U], err: Callable[[E], U]) -> U:
        """Exhaustive case analysis over both variants.

        Example:
            >>> Err("late").match(ok=str, err=lambda e: f"failed: {e}")
            'failed: late'
        """
        if self._is_ok:
            return ok(cast(T, self._value))
        return err(cast(E, self._value))

    # ─────────────────────────────────────────────────────────────────
    # Dunder Methods
    # ─────────────────────────────────────────────────────────────────

    def __bool__(self) -> bool:
        return self._is_ok

    def __repr__(self) -> str:
        return f"{'Ok' if self._is_ok else 'Err'}({self._value!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Result):
            return NotImplemented
        return self._is_ok == other._is_ok and self._value == other._value

    def __hash__(self) -> int:
        return hash((self._is_ok, self._value))

    def __iter__(self) -> Iterator[T]:
        if self._is_ok:
            yield cast(T, self._value)


def Ok(value: T = None) -> Result[T, E]:  # type: ignore[assignment]  # noqa: N802
    """Construct a success. ``Ok()`` with no value stands for a void success."""
    return Result(value, _OK)


def Err(error: E) -> Result[T, E]:  # noqa: N802
    """Construct a failure carrying ``error`` verbatim."""
    return Result(error, _ERR)


def catching(
    fn: Callable[[], T],
    *exc_types: type[Exception],
) -> Callable[[], Result[T, Exception]]:
    """Adapt an exception-raising callable into a Result-returning operation.

    Only ``exc_types`` (default: ``Exception``) are turned into ``Err(exc)``;
    anything else propagates, so the caller decides which exceptions count
    as ordinary failures.

    Example:
        >>> op = catching(lambda: int("x"), ValueError)
        >>> op().is_err()
        True
    """
    caught = exc_types or (Exception,)

    def operation() -> Result[T, Exception]:
        try:
            return Result(fn(), _OK)
        except caught as e:
            return Result(e, _ERR)

    operation.__name__ = getattr(fn, "__name__", "operation")
    operation.__doc__ = getattr(fn, "__doc__", None)
    return operation
