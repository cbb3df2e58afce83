"""Shared fixtures for retrycase tests."""

from __future__ import annotations

import pytest

from retrycase.foundation.config import clear_settings_cache
from retrycase.runtime.retrying import async_loop, loop


@pytest.fixture
def sleeps(monkeypatch: pytest.MonkeyPatch) -> list[float]:
    """Replace the blocking sleep used by the sync loops with a recorder."""
    recorded: list[float] = []
    monkeypatch.setattr(loop, "_sleep", recorded.append)
    return recorded


@pytest.fixture
def async_sleeps(monkeypatch: pytest.MonkeyPatch) -> list[float]:
    """Replace asyncio.sleep in the async loops with a recorder."""
    recorded: list[float] = []

    async def fake_sleep(delay: float) -> None:
        recorded.append(delay)

    monkeypatch.setattr(async_loop, "_sleep", fake_sleep)
    return recorded


@pytest.fixture(autouse=True)
def clean_settings() -> object:
    """Reset cached settings around each test."""
    clear_settings_cache()
    yield
    clear_settings_cache()
