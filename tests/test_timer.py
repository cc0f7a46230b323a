"""Rest timer state machine behaviour."""

from __future__ import annotations

from typing import List

import pytest

from neo_api.timer import IDLE, IntervalTimer, TimerMode, TimerState, format_time

from tests.fakes import ManualTickSource


class ChimeSpy:
    def __init__(self, raises: Exception | None = None) -> None:
        self.calls = 0
        self._raises = raises

    def __call__(self) -> None:
        self.calls += 1
        if self._raises is not None:
            raise self._raises


def make_timer(ticks: ManualTickSource, **kwargs) -> IntervalTimer:
    return IntervalTimer(ticks, **kwargs)


def test_new_timer_is_idle(ticks: ManualTickSource) -> None:
    timer = make_timer(ticks)

    assert timer.state == TimerState(time=0, is_running=False, mode=TimerMode.STOPWATCH)
    assert timer.formatted_time == "00:00"
    assert ticks.handles == []


def test_stopwatch_pause_and_resume_accumulates(ticks: ManualTickSource) -> None:
    timer = make_timer(ticks)

    timer.start_stopwatch()
    ticks.advance(3)
    timer.pause()
    timer.resume()
    ticks.advance(2)

    assert timer.time == 5
    assert timer.mode is TimerMode.STOPWATCH
    assert timer.is_running


def test_countdown_stops_at_zero_and_chimes_once(ticks: ManualTickSource) -> None:
    chime = ChimeSpy()
    timer = make_timer(ticks, chime=chime)

    timer.start_countdown(3)
    ticks.advance(3)

    assert timer.time == 0
    assert not timer.is_running
    assert timer.mode is TimerMode.COUNTDOWN
    assert chime.calls == 1
    assert ticks.active_handles == []

    timer.tick()
    ticks.advance()
    assert timer.time == 0
    assert chime.calls == 1


@pytest.mark.parametrize("seconds", [1, 2, 7, 60])
def test_countdown_reaches_zero_after_exactly_n_ticks(
    ticks: ManualTickSource, seconds: int
) -> None:
    timer = make_timer(ticks)

    timer.start_countdown(seconds)
    ticks.advance(seconds - 1)
    assert timer.time == 1
    assert timer.is_running

    ticks.advance()
    assert timer.state == TimerState(time=0, is_running=False, mode=TimerMode.COUNTDOWN)


@pytest.mark.parametrize("first, second", [(60, 90), (120, 30), (5, 5)])
def test_restarting_countdown_keeps_a_single_tick_source(
    ticks: ManualTickSource, first: int, second: int
) -> None:
    timer = make_timer(ticks)

    timer.start_countdown(first)
    timer.start_countdown(second)

    assert len(ticks.active_handles) == 1
    assert timer.time == second
    ticks.advance()
    assert timer.time == second - 1


def test_switching_from_countdown_to_stopwatch_cancels_countdown(
    ticks: ManualTickSource,
) -> None:
    timer = make_timer(ticks)

    timer.start_countdown(90)
    timer.start_stopwatch()
    ticks.advance(2)

    assert len(ticks.active_handles) == 1
    assert timer.state == TimerState(time=2, is_running=True, mode=TimerMode.STOPWATCH)


def test_countdown_without_seconds_uses_last_target(ticks: ManualTickSource) -> None:
    timer = make_timer(ticks)

    timer.start_countdown()
    assert timer.time == 120

    timer.start_countdown(45)
    timer.reset()
    timer.start_countdown()
    assert timer.time == 45
    assert timer.countdown_target == 45


def test_default_countdown_is_configurable(ticks: ManualTickSource) -> None:
    timer = make_timer(ticks, default_countdown=90)

    timer.start_countdown()

    assert timer.time == 90


def test_pause_and_resume_countdown_preserves_time_and_direction(
    ticks: ManualTickSource,
) -> None:
    timer = make_timer(ticks)
    timer.start_countdown(10)
    ticks.advance(3)

    timer.pause()
    ticks.advance(5)
    assert timer.state == TimerState(time=7, is_running=False, mode=TimerMode.COUNTDOWN)
    assert ticks.active_handles == []

    timer.resume()
    ticks.advance(2)
    assert timer.state == TimerState(time=5, is_running=True, mode=TimerMode.COUNTDOWN)


def test_resumed_countdown_finishes_and_chimes(ticks: ManualTickSource) -> None:
    chime = ChimeSpy()
    timer = make_timer(ticks, chime=chime)
    timer.start_countdown(3)
    ticks.advance()
    timer.pause()

    timer.resume()
    ticks.advance(5)

    assert timer.time == 0
    assert not timer.is_running
    assert chime.calls == 1


def test_resume_at_zero_is_a_no_op(ticks: ManualTickSource) -> None:
    timer = make_timer(ticks)

    timer.resume()

    assert timer.state == IDLE
    assert ticks.handles == []


def test_resume_while_running_keeps_single_source(ticks: ManualTickSource) -> None:
    timer = make_timer(ticks)
    timer.start_stopwatch()

    timer.resume()
    ticks.advance()

    assert len(ticks.handles) == 1
    assert timer.time == 1


def test_pause_when_paused_does_not_notify(ticks: ManualTickSource) -> None:
    seen: List[TimerState] = []
    timer = make_timer(ticks, on_change=seen.append)
    timer.start_stopwatch()
    timer.pause()
    count = len(seen)

    timer.pause()

    assert len(seen) == count


@pytest.mark.parametrize(
    "prepare",
    [
        pytest.param(lambda timer, ticks: None, id="idle"),
        pytest.param(lambda timer, ticks: timer.start_stopwatch(), id="stopwatch"),
        pytest.param(
            lambda timer, ticks: (timer.start_countdown(30), ticks.advance(4)),
            id="countdown",
        ),
        pytest.param(
            lambda timer, ticks: (timer.start_countdown(30), timer.pause()),
            id="paused",
        ),
        pytest.param(
            lambda timer, ticks: (timer.start_countdown(2), ticks.advance(2)),
            id="finished",
        ),
    ],
)
def test_reset_always_returns_to_idle(ticks: ManualTickSource, prepare) -> None:
    timer = make_timer(ticks)
    prepare(timer, ticks)

    timer.reset()
    ticks.advance(3)

    assert timer.state == TimerState(time=0, is_running=False, mode=TimerMode.STOPWATCH)
    assert ticks.active_handles == []


def test_failing_chime_is_ignored(ticks: ManualTickSource) -> None:
    chime = ChimeSpy(raises=OSError("no audio device"))
    timer = make_timer(ticks, chime=chime)

    timer.start_countdown(1)
    ticks.advance()

    assert chime.calls == 1
    assert timer.state == TimerState(time=0, is_running=False, mode=TimerMode.COUNTDOWN)


def test_listener_receives_every_transition(ticks: ManualTickSource) -> None:
    seen: List[TimerState] = []
    timer = make_timer(ticks, on_change=seen.append)

    timer.start_countdown(2)
    ticks.advance(2)

    assert [state.time for state in seen] == [2, 1, 0]
    assert seen[-1].is_running is False


def test_close_releases_tick_source_and_keeps_state(ticks: ManualTickSource) -> None:
    timer = make_timer(ticks)
    timer.start_stopwatch()
    ticks.advance(4)

    timer.close()
    ticks.advance(2)

    assert ticks.active_handles == []
    assert timer.time == 4


def test_ticks_at_configured_interval(ticks: ManualTickSource) -> None:
    timer = make_timer(ticks, interval=0.5)

    timer.start_stopwatch()

    assert ticks.handles[0].interval == 0.5


def test_negative_countdown_is_rejected(ticks: ManualTickSource) -> None:
    timer = make_timer(ticks)

    with pytest.raises(ValueError):
        timer.start_countdown(-1)
    assert timer.state == IDLE


@pytest.mark.parametrize(
    "seconds, expected",
    [
        (0, "00:00"),
        (9, "00:09"),
        (59, "00:59"),
        (61, "01:01"),
        (120, "02:00"),
        (3600, "60:00"),
        (4500, "75:00"),
    ],
)
def test_format_time(seconds: int, expected: str) -> None:
    assert format_time(seconds) == expected
