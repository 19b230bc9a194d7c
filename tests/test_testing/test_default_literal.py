"""A module whose rule freezes undirected tests at a fixed default."""

import pytest

from now_time import after_days, now, parse_iso8601
from now_time.testing import FreezeRule

pytestmark = pytest.mark.usefixtures("frozen_now")


@pytest.fixture
def now_rule():
    return FreezeRule("2000-02-01T00:00:00Z")


def test_undirected_uses_default():
    assert now() == parse_iso8601("2000-02-01T00:00:00Z")


def test_undirected_after_days():
    assert after_days(13) == parse_iso8601("2000-02-14T00:00:00Z")


@pytest.mark.now("2000-03-01T00:00:00Z")
def test_directive_overrides_default():
    assert now() == parse_iso8601("2000-03-01T00:00:00Z")
    assert after_days(13) == parse_iso8601("2000-03-14T00:00:00Z")


@pytest.mark.now
def test_bare_marker_still_means_y2k():
    assert now() == parse_iso8601("2000-01-01T00:00:00Z")
