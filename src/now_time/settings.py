"""Harness configuration, validated with pydantic."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, field_validator

from now_time.testing.rule import FreezeRule
from now_time.times import parse_iso8601

if TYPE_CHECKING:
    from now_time.provider import ClockProvider


class FreezeSettings(BaseModel):
    """Default freeze behaviour for tests that carry no directive.

    Attributes:
        default: ISO-8601 UTC literal every undirected test is frozen at,
                 or ``None`` to leave those tests on the system clock.
    """

    default: str | None = None

    @field_validator("default", mode="before")
    @classmethod
    def _blank_means_unset(cls, value: object) -> object:
        if isinstance(value, str):
            value = value.strip()
            return value or None
        return value

    @field_validator("default")
    @classmethod
    def _must_parse(cls, value: str | None) -> str | None:
        if value is not None:
            parse_iso8601(value)
        return value

    @classmethod
    def from_ini(cls, value: str | None) -> FreezeSettings:
        """Build settings from the raw ``now_time_default`` ini value."""
        return cls(default=value or None)

    def build_rule(self, provider: ClockProvider | None = None) -> FreezeRule:
        return FreezeRule(self.default, provider=provider)
