"""Time facade — stateless helpers built on :class:`~now_time.provider.ClockProvider`.

Every function reads the clock through *provider* (the process-wide
:data:`~now_time.provider.DEFAULT_PROVIDER` when omitted), so freezing the
provider in a test freezes every result derived here.
"""

from __future__ import annotations

import re
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING

from now_time.exceptions import Iso8601ParseError
from now_time.provider import DEFAULT_PROVIDER

if TYPE_CHECKING:
    from now_time.provider import ClockProvider

TIME_ZONE = UTC

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
_ONE_MS = timedelta(milliseconds=1)

# YYYY-MM-DDTHH:MM:SS[.fraction]Z, upper-case T and Z only
_ISO8601_Z = re.compile(
    r"(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})(?:\.(\d{1,9}))?Z",
    re.ASCII,
)


def _provider(provider: ClockProvider | None) -> ClockProvider:
    return provider if provider is not None else DEFAULT_PROVIDER


def now(provider: ClockProvider | None = None) -> int:
    """Return the current instant in epoch milliseconds."""
    return _provider(provider).now()


# ── conversions ──────────────────────────────────────────


def to_datetime(instant: int) -> datetime:
    """Return *instant* as an aware UTC ``datetime``."""
    try:
        return _EPOCH + timedelta(milliseconds=instant)
    except OverflowError as e:
        raise ValueError(f"Instant {instant} is outside the representable range") from e


def from_datetime(value: datetime) -> int:
    """Return the epoch milliseconds of an aware ``datetime``."""
    if value.tzinfo is None or value.utcoffset() is None:
        raise ValueError("Naive datetime has no fixed instant; attach a tzinfo")
    return (value - _EPOCH) // _ONE_MS


def to_iso8601(instant: int) -> str:
    """Format *instant* as ``YYYY-MM-DDTHH:MM:SSZ`` in UTC.

    Milliseconds are rendered as a three-digit fraction only when they are
    non-zero, e.g. ``1970-01-01T00:00:01.500Z``.
    """
    dt = to_datetime(instant)
    # %Y is not zero-padded below year 1000 on every platform
    text = f"{dt.year:04d}-{dt:%m-%dT%H:%M:%S}"
    millis = dt.microsecond // 1000
    if millis:
        text += f".{millis:03d}"
    return text + "Z"


def parse_iso8601(text: str) -> int:
    """Parse a strict ISO-8601 UTC timestamp into epoch milliseconds.

    Raises:
        Iso8601ParseError: If *text* is not ``YYYY-MM-DDTHH:MM:SS[.f]Z``
            or names an impossible date or time.
    """
    if not isinstance(text, str):
        raise Iso8601ParseError(text, "expected a string")

    match = _ISO8601_Z.fullmatch(text)
    if match is None:
        raise Iso8601ParseError(text)

    year, month, day, hour, minute, second = (int(g) for g in match.groups()[:6])
    fraction = match.group(7) or ""
    try:
        dt = datetime(year, month, day, hour, minute, second, tzinfo=UTC)
    except ValueError as e:
        raise Iso8601ParseError(text, str(e)) from e

    # Anything finer than a millisecond is truncated
    millis = int(fraction[:3].ljust(3, "0")) if fraction else 0
    return from_datetime(dt) + millis


# ── relative days ────────────────────────────────────────


def _shift_days(days: int, sign: int, provider: ClockProvider | None) -> int:
    if isinstance(days, bool) or not isinstance(days, int):
        raise TypeError(f"days must be int, got {type(days).__name__}")
    current = now(provider)
    if days == 0:
        return current
    return from_datetime(to_datetime(current) + timedelta(days=sign * days))


def before_days(days: int, provider: ClockProvider | None = None) -> int:
    """Return ``now()`` moved back by *days* calendar days (UTC)."""
    return _shift_days(days, -1, provider)


def after_days(days: int, provider: ClockProvider | None = None) -> int:
    """Return ``now()`` moved forward by *days* calendar days (UTC)."""
    return _shift_days(days, 1, provider)
