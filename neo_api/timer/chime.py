"""Completion cues played when a countdown finishes."""

from __future__ import annotations

import sys
from typing import Callable, Optional, TextIO

Chime = Callable[[], None]


def silent() -> None:
    """Cue that does nothing."""


class TerminalBell:
    """Ring the terminal bell on the given stream."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream

    def __call__(self) -> None:
        stream = self._stream or sys.stdout
        stream.write("\a")
        stream.flush()


__all__ = ["Chime", "TerminalBell", "silent"]
