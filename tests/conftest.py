"""Shared test fixtures."""

import pytest

from now_time import ClockProvider, FixedClock, parse_iso8601

pytest_plugins = ["now_time.testing.plugin", "pytester"]

Y2K = 946_684_800_000  # 2000-01-01T00:00:00Z


@pytest.fixture
def provider():
    return ClockProvider()


@pytest.fixture
def y2k():
    return Y2K


@pytest.fixture
def frozen_provider():
    """A private provider stuck at 2000-01-02T00:00:00Z."""
    return ClockProvider(FixedClock(parse_iso8601("2000-01-02T00:00:00Z")))
