"""Tests for the public import surface."""

from __future__ import annotations

import importlib
import sys
import time

import retrycase
import retrycase.runtime
from retrycase.runtime.retrying import loop


def test_retrying_subpackage_not_shadowed() -> None:
    """Exported loop functions never replace the subpackage attribute."""
    module = importlib.import_module("retrycase.runtime.retrying")

    assert retrycase.runtime.retrying is module
    assert retrycase.runtime.retrying is sys.modules["retrycase.runtime.retrying"]
    assert retrycase.runtime.retrying.loop is sys.modules["retrycase.runtime.retrying.loop"]
    assert retrycase.runtime.retry is retrycase.retry
    assert callable(retrycase.runtime.retry)


def test_fake_sleep_leaves_time_module_alone(sleeps: list[float]) -> None:
    """The sleeps fixture swaps the loop's hook, not time.sleep."""
    assert loop._sleep is not time.sleep
    assert time.sleep.__module__ == "time"


def test_all_exports_resolve() -> None:
    for name in retrycase.__all__:
        assert hasattr(retrycase, name), name
