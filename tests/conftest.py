"""Shared test configuration utilities for logitkit."""

from __future__ import annotations

import os

import numpy as np
import pytest

from logitkit.core.config import ENV_NUM_THREADS, set_num_workers

_ENV_FULL = "LOGITKIT_RUN_FULL_TESTS"


def pytest_collection_modifyitems(items):
    """Skip large-array tests unless the full-test environment variable is set."""
    if os.environ.get(_ENV_FULL):
        return

    skip_marker = pytest.mark.skip(
        reason=f"Skipped to keep the default test run fast. Set {_ENV_FULL}=1 to execute the full test battery."
    )
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_marker)


@pytest.fixture(autouse=True)
def _reset_worker_config(monkeypatch):
    monkeypatch.delenv(ENV_NUM_THREADS, raising=False)
    set_num_workers(None)
    yield
    set_num_workers(None)


@pytest.fixture
def rng():
    return np.random.default_rng(20240607)


@pytest.fixture
def probabilities():
    return np.array([0.0944, 0.9366, 0.2583, 0.9309, 0.5553])
