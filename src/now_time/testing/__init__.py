"""Test harness for freezing ``now()`` during a single test.

Usage with pytest::

    # conftest.py
    pytest_plugins = ["now_time.testing.plugin"]

    # test_something.py
    @pytest.mark.now("2000-01-02T00:00:00Z")
    def test_two_weeks_later():
        assert after_days(13) == parse_iso8601("2000-01-15T00:00:00Z")

The rule is not thread-safe.  Do not freeze time for tests that run
concurrently in one process.
"""

from now_time.testing.rule import ABSENT, DEFAULT_DIRECTIVE, FreezeRule

__all__ = ["ABSENT", "DEFAULT_DIRECTIVE", "FreezeRule"]
