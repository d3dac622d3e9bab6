"""Shared pytest fixtures for all tests."""

import pytest

from undocalc import Accumulator, Operation


@pytest.fixture
def accumulator():
    """Fresh unbounded accumulator at 0.0."""
    return Accumulator()


@pytest.fixture
def accumulator_at_five(accumulator):
    """Accumulator brought to 5.0, with the history reset."""
    accumulator.execute(Operation.ADD, 5)
    accumulator.clear()
    return accumulator


@pytest.fixture
def clean_env(monkeypatch):
    """Remove undocalc environment overrides."""
    for key in ("UNDOCALC_MAX_HISTORY", "UNDOCALC_LOG_LEVEL", "LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "slow: Slow running tests")
