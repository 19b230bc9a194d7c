"""ClockProvider — the one indirection point production code reads ``now()`` through."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from now_time.clock import SystemClock

if TYPE_CHECKING:
    from now_time.clock import Clock

logger = logging.getLogger(__name__)


class ClockProvider:
    """Holds the active :class:`~now_time.clock.Clock`.

    Exactly one source is active at a time.  Production code only calls
    :meth:`now`; :meth:`substitute` and :meth:`restore_system_clock` are
    test hooks.  Not thread-safe: it assumes tests run one at a time.

    Parameters:
        source: Initial clock.  Defaults to :class:`SystemClock`.

    Attributes:
        locked: Set while a freeze is active.  Owned by
                :class:`~now_time.testing.rule.FreezeRule`.
    """

    def __init__(self, source: Clock | None = None) -> None:
        self._source: Clock = source or SystemClock()
        self.locked = False

    def now(self) -> int:
        return self._source.now()

    @property
    def source(self) -> Clock:
        return self._source

    def substitute(self, source: Clock) -> None:
        """Make *source* the active clock."""
        logger.debug("Substituting clock source %r", source)
        self._source = source

    def restore_system_clock(self) -> None:
        """Go back to the wall clock."""
        logger.debug("Restoring system clock")
        self._source = SystemClock()


# Process-wide instance used whenever no provider is passed explicitly.
DEFAULT_PROVIDER = ClockProvider()
