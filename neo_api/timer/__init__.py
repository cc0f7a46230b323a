"""Rest timer used between sets."""

from .chime import Chime, TerminalBell, silent
from .interval import IDLE, IntervalTimer, TimerMode, TimerState, format_time
from .ticks import AsyncioTickSource, TickHandle, TickSource

__all__ = [
    "AsyncioTickSource",
    "Chime",
    "IDLE",
    "IntervalTimer",
    "TerminalBell",
    "TickHandle",
    "TickSource",
    "TimerMode",
    "TimerState",
    "format_time",
    "silent",
]
