"""Periodic tick sources driving the interval timer."""

from __future__ import annotations

import asyncio
from typing import Callable, Optional, Protocol, runtime_checkable

TickCallback = Callable[[], None]


@runtime_checkable
class TickHandle(Protocol):
    """Handle to a running tick source."""

    @property
    def active(self) -> bool:
        """Whether the source will fire again."""

    def cancel(self) -> None:
        """Stop firing. Cancelling twice is allowed."""


@runtime_checkable
class TickSource(Protocol):
    """Factory for periodic callbacks."""

    def start(self, interval: float, callback: TickCallback) -> TickHandle:
        """Fire ``callback`` every ``interval`` seconds until cancelled."""


class LoopTickHandle:
    """Repeating ``call_at`` chain on an asyncio loop."""

    def __init__(
        self,
        loop: asyncio.AbstractEventLoop,
        interval: float,
        callback: TickCallback,
    ) -> None:
        self._loop = loop
        self._interval = interval
        self._callback = callback
        self._active = True
        # Deadlines advance from the previous deadline so ticks do not drift.
        self._deadline = loop.time() + interval
        self._timer: asyncio.TimerHandle = loop.call_at(self._deadline, self._fire)

    @property
    def active(self) -> bool:
        return self._active

    def cancel(self) -> None:
        self._active = False
        self._timer.cancel()

    def _fire(self) -> None:
        if not self._active:
            return
        self._deadline += self._interval
        self._timer = self._loop.call_at(self._deadline, self._fire)
        # The callback may cancel this handle, which also drops the timer above.
        self._callback()


class AsyncioTickSource(TickSource):
    """Tick source backed by the running asyncio event loop."""

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None) -> None:
        self._loop = loop

    def start(self, interval: float, callback: TickCallback) -> TickHandle:
        loop = self._loop or asyncio.get_running_loop()
        return LoopTickHandle(loop, interval, callback)


__all__ = [
    "AsyncioTickSource",
    "LoopTickHandle",
    "TickCallback",
    "TickHandle",
    "TickSource",
]
