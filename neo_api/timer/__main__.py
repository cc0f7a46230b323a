"""Terminal rest timer.

    python -m neo_api.timer countdown --seconds 90
    python -m neo_api.timer stopwatch --limit 300
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from typing import List, Optional, TextIO

from ..settings import get_settings
from .chime import TerminalBell
from .interval import IntervalTimer, TimerMode, TimerState, format_time
from .ticks import AsyncioTickSource


def non_negative_seconds(value: str) -> int:
    try:
        seconds = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}") from None
    if seconds < 0:
        raise argparse.ArgumentTypeError(f"must be 0 or more, got {seconds}")
    return seconds


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m neo_api.timer",
        description="Rest countdown or stopwatch between sets",
    )
    sub = parser.add_subparsers(dest="mode", required=True)
    countdown = sub.add_parser("countdown", help="Count down a rest period")
    countdown.add_argument(
        "--seconds", type=non_negative_seconds, default=None,
        help="Rest length in seconds (default: REST_TIMER_DEFAULT_SECONDS or 120)",
    )
    stopwatch = sub.add_parser("stopwatch", help="Count up from zero")
    stopwatch.add_argument(
        "--limit", type=non_negative_seconds, default=None,
        help="Stop after this many seconds (default: run until interrupted)",
    )
    return parser


def _default_countdown() -> int:
    try:
        return get_settings().rest_timer_default_seconds
    except ValueError:
        # No API credentials configured.
        return 120


async def run(
    mode: str,
    *,
    seconds: Optional[int] = None,
    limit: Optional[int] = None,
    default_countdown: int = 120,
    out: TextIO = sys.stdout,
    interval: float = 1.0,
) -> TimerState:
    done = asyncio.Event()

    def render(state: TimerState) -> None:
        out.write(f"\r{format_time(state.time)}")
        out.flush()
        if not state.is_running and state.mode is TimerMode.COUNTDOWN:
            done.set()
        elif limit is not None and state.time >= limit:
            done.set()

    timer = IntervalTimer(
        AsyncioTickSource(),
        default_countdown=default_countdown,
        chime=TerminalBell(out),
        interval=interval,
        on_change=render,
    )
    if mode == TimerMode.COUNTDOWN.value:
        timer.start_countdown(seconds)
    else:
        timer.start_stopwatch()
    try:
        await done.wait()
    finally:
        timer.close()
        out.write("\n")
    return timer.state


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        asyncio.run(
            run(
                args.mode,
                seconds=getattr(args, "seconds", None),
                limit=getattr(args, "limit", None),
                default_countdown=_default_countdown(),
            )
        )
    except KeyboardInterrupt:
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
