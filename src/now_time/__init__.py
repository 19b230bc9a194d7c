"""now_time — a swappable "current time" for deterministic tests.

Production code reads the clock through :func:`now` and the helpers built
on it.  Tests freeze it with :mod:`now_time.testing`.
"""

from now_time.clock import Clock, FixedClock, SystemClock
from now_time.exceptions import ClockLockError, Iso8601ParseError, TimeError
from now_time.provider import DEFAULT_PROVIDER, ClockProvider
from now_time.times import (
    TIME_ZONE,
    UTC,
    after_days,
    before_days,
    from_datetime,
    now,
    parse_iso8601,
    to_datetime,
    to_iso8601,
)

__all__ = [
    "DEFAULT_PROVIDER",
    "TIME_ZONE",
    "UTC",
    "Clock",
    "ClockLockError",
    "ClockProvider",
    "FixedClock",
    "Iso8601ParseError",
    "SystemClock",
    "TimeError",
    "after_days",
    "before_days",
    "from_datetime",
    "now",
    "parse_iso8601",
    "to_datetime",
    "to_iso8601",
]
