# Copyright (c) 2026 now-time contributors
# SPDX-License-Identifier: Apache-2.0
"""Print the current time.

Usage:
    python -m now_time [--at ISO8601] [--after-days N | --before-days N]

Writes a JSON report to stdout.  ``--at`` freezes the clock first, which
is handy for checking day arithmetic from a shell.

Exit codes:
    0: Success
    1: Failure (error details in JSON output)
"""

from __future__ import annotations

import argparse
import sys

from pydantic import BaseModel

from now_time.clock import FixedClock
from now_time.provider import ClockProvider
from now_time.times import after_days, before_days, now, parse_iso8601, to_iso8601


class NowReport(BaseModel):
    """Output of a successful run.

    Attributes:
        instant: Epoch milliseconds
        iso8601: The same instant as an ISO-8601 UTC string
    """

    instant: int
    iso8601: str


class ErrorReport(BaseModel):
    error: str
    error_type: str


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="now_time", description="Print the current UTC time.")
    parser.add_argument("--at", help="freeze the clock at this ISO-8601 UTC instant")
    shift = parser.add_mutually_exclusive_group()
    shift.add_argument("--after-days", type=int, metavar="N", help="report now() + N days")
    shift.add_argument("--before-days", type=int, metavar="N", help="report now() - N days")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    args = _parser().parse_args(argv)
    try:
        provider = ClockProvider()
        if args.at is not None:
            provider.substitute(FixedClock(parse_iso8601(args.at)))

        if args.after_days is not None:
            instant = after_days(args.after_days, provider)
        elif args.before_days is not None:
            instant = before_days(args.before_days, provider)
        else:
            instant = now(provider)

        print(NowReport(instant=instant, iso8601=to_iso8601(instant)).model_dump_json())
        return 0

    except (ValueError, OverflowError) as e:
        print(ErrorReport(error=str(e), error_type=type(e).__name__).model_dump_json())
        return 1


if __name__ == "__main__":
    sys.exit(main())
