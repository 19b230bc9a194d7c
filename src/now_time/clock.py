"""Clock sources — the single-method capability behind ``now()``."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Protocol


class Clock(Protocol):
    """Protocol for getting the current instant in epoch milliseconds."""

    def now(self) -> int: ...


class SystemClock:
    """Default clock backed by the real system time."""

    def now(self) -> int:
        return time.time_ns() // 1_000_000

    def __repr__(self) -> str:
        return "SystemClock()"


@dataclass(frozen=True)
class FixedClock:
    """Clock that returns the same instant however often it is asked."""

    instant: int

    def __post_init__(self) -> None:
        if isinstance(self.instant, bool) or not isinstance(self.instant, int):
            raise TypeError(f"FixedClock instant must be int, got {type(self.instant).__name__}")

    def now(self) -> int:
        return self.instant
