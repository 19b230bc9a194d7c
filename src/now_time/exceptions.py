"""Custom exceptions for the now_time package."""

from __future__ import annotations


class TimeError(Exception):
    """Base exception for all now_time errors."""


class Iso8601ParseError(TimeError, ValueError):
    """Raised when a timestamp does not match the ISO-8601 UTC profile."""

    def __init__(self, text: object, detail: str = "") -> None:
        self.text = text
        msg = f"Not an ISO-8601 UTC timestamp: {text!r}"
        if detail:
            msg += f" ({detail})"
        super().__init__(msg)


class ClockLockError(TimeError, RuntimeError):
    """Raised on a double lock or double unlock of the clock.

    This is a usage bug in the test harness, never a condition to recover from.
    """

    def __init__(self, operation: str) -> None:
        self.operation = operation
        state = "locked" if operation == "lock" else "unlocked"
        super().__init__(f"Clock is already {state}; cannot {operation} it again")
