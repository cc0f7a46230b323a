"""Rest countdown and stopwatch state machine."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, Optional

from .chime import Chime, silent
from .ticks import TickHandle, TickSource


class TimerMode(str, Enum):
    STOPWATCH = "stopwatch"
    COUNTDOWN = "countdown"


@dataclass(frozen=True)
class TimerState:
    """Snapshot of the timer shown to the user."""

    time: int = 0
    is_running: bool = False
    mode: TimerMode = TimerMode.STOPWATCH


IDLE = TimerState()

StateListener = Callable[[TimerState], None]


def format_time(seconds: int) -> str:
    """Render seconds as ``MM:SS``. Minutes are not rolled into hours."""
    minutes, secs = divmod(seconds, 60)
    return f"{minutes:02d}:{secs:02d}"


class IntervalTimer:
    """Single clock that counts up from zero or down from a rest target.

    The timer owns at most one live tick handle. Every transition that starts
    ticking cancels the previous handle before installing a new one, so two
    sources never advance the same clock.
    """

    def __init__(
        self,
        ticks: TickSource,
        *,
        default_countdown: int = 120,
        chime: Chime = silent,
        interval: float = 1.0,
        on_change: Optional[StateListener] = None,
    ) -> None:
        if default_countdown < 0:
            raise ValueError("default_countdown must be non-negative")
        self._ticks = ticks
        self._countdown_target = default_countdown
        self._chime = chime
        self._interval = interval
        self._on_change = on_change
        self._handle: Optional[TickHandle] = None
        self._state = IDLE

    @property
    def state(self) -> TimerState:
        return self._state

    @property
    def time(self) -> int:
        return self._state.time

    @property
    def is_running(self) -> bool:
        return self._state.is_running

    @property
    def mode(self) -> TimerMode:
        return self._state.mode

    @property
    def formatted_time(self) -> str:
        return format_time(self._state.time)

    @property
    def countdown_target(self) -> int:
        return self._countdown_target

    def start_stopwatch(self) -> None:
        self._clear()
        self._set(TimerState(time=0, is_running=True, mode=TimerMode.STOPWATCH))
        self._install()

    def start_countdown(self, seconds: Optional[int] = None) -> None:
        target = self._countdown_target if seconds is None else seconds
        if target < 0:
            raise ValueError("countdown seconds must be non-negative")
        self._clear()
        self._countdown_target = target
        self._set(TimerState(time=target, is_running=True, mode=TimerMode.COUNTDOWN))
        self._install()

    def pause(self) -> None:
        if not self._state.is_running:
            return
        self._clear()
        self._set(replace(self._state, is_running=False))

    def resume(self) -> None:
        if self._state.time == 0 or self._state.is_running:
            return
        self._clear()
        self._set(replace(self._state, is_running=True))
        self._install()

    def reset(self) -> None:
        self._clear()
        self._set(IDLE)

    def close(self) -> None:
        """Release the tick source without touching the displayed state."""
        self._clear()

    def tick(self) -> None:
        """Advance the clock by one step in the current direction."""
        state = self._state
        if not state.is_running:
            return
        if state.mode is TimerMode.STOPWATCH:
            self._set(replace(state, time=state.time + 1))
            return
        if state.time <= 1:
            self._clear()
            self._set(replace(state, time=0, is_running=False))
            self._play_chime()
            return
        self._set(replace(state, time=state.time - 1))

    def _install(self) -> None:
        self._handle = self._ticks.start(self._interval, self.tick)

    def _clear(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _set(self, state: TimerState) -> None:
        self._state = state
        if self._on_change is not None:
            self._on_change(state)

    def _play_chime(self) -> None:
        try:
            self._chime()
        except Exception:  # noqa: BLE001
            pass


__all__ = [
    "IDLE",
    "IntervalTimer",
    "StateListener",
    "TimerMode",
    "TimerState",
    "format_time",
]
