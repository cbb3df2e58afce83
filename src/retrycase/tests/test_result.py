"""Tests for the Result monad and the catching() adapter."""

from __future__ import annotations

import pytest

from retrycase import Err, Ok, Result, catching


# ═════════════════════════════════════════════════════════════════════════════
# Variants
# ═════════════════════════════════════════════════════════════════════════════


def test_ok_construction() -> None:
    result: Result[int, str] = Ok(42)

    assert result.is_ok()
    assert not result.is_err()
    assert result.unwrap() == 42
    assert result.ok() == 42
    assert result.err() is None
    assert bool(result)


def test_void_ok() -> None:
    """Ok() with no value is a void success."""
    assert Ok() == Ok(None)
    assert Ok().unwrap() is None


def test_err_construction() -> None:
    result: Result[int, str] = Err("failed")

    assert result.is_err()
    assert result.unwrap_err() == "failed"
    assert result.ok() is None
    assert result.err() == "failed"
    assert not result


def test_unwrap_wrong_variant_raises() -> None:
    with pytest.raises(RuntimeError, match="unwrap\\(\\) on Err"):
        Err("x").unwrap()
    with pytest.raises(RuntimeError, match="unwrap_err\\(\\) on Ok"):
        Ok(1).unwrap_err()


def test_unwrap_or() -> None:
    assert Ok(1).unwrap_or(0) == 1
    assert Err("x").unwrap_or(0) == 0


# ═════════════════════════════════════════════════════════════════════════════
# Transformations
# ═════════════════════════════════════════════════════════════════════════════


def test_map_and_map_err() -> None:
    assert Ok(5).map(lambda x: x * 2) == Ok(10)
    assert Err("e").map(lambda x: x * 2) == Err("e")
    assert Err("e").map_err(str.upper) == Err("E")
    assert Ok(1).map_err(str.upper) == Ok(1)


def test_flat_map_short_circuits() -> None:
    def half(x: int) -> Result[int, str]:
        return Ok(x // 2) if x % 2 == 0 else Err(f"odd: {x}")

    assert Ok(8).flat_map(half).flat_map(half) == Ok(2)
    assert Ok(6).flat_map(half).flat_map(half) == Err("odd: 3")


def test_match() -> None:
    assert Ok(3).match(ok=lambda v: v + 1, err=len) == 4
    assert Err("abc").match(ok=lambda v: v + 1, err=len) == 3


def test_equality_hash_repr() -> None:
    assert Ok(1) != Err(1)
    assert len({Ok(1), Ok(1), Err(1)}) == 2
    assert repr(Ok(1)) == "Ok(1)"
    assert repr(Err("x")) == "Err('x')"
    assert list(Ok(1)) == [1]
    assert list(Err(1)) == []


# ═════════════════════════════════════════════════════════════════════════════
# catching()
# ═════════════════════════════════════════════════════════════════════════════


def test_catching_success() -> None:
    assert catching(lambda: 7)() == Ok(7)


def test_catching_listed_exception() -> None:
    result = catching(lambda: int("nope"), ValueError)()
    assert isinstance(result.unwrap_err(), ValueError)


def test_catching_defaults_to_exception() -> None:
    def boom() -> None:
        raise KeyError("k")

    assert isinstance(catching(boom)().unwrap_err(), KeyError)


def test_catching_unlisted_exception_propagates() -> None:
    def boom() -> None:
        raise KeyError("k")

    with pytest.raises(KeyError):
        catching(boom, ValueError)()


def test_catching_keeps_name() -> None:
    def fetch_config() -> str:
        return "cfg"

    assert catching(fetch_config).__name__ == "fetch_config"
