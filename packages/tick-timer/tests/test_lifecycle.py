"""Tests for the lifecycle shared by every timer: start/stop/force_end/pause/resume."""
from __future__ import annotations

import math

import pytest

from tick_timer import CountdownTimer, StopwatchTimer, Timer


def _record(timer: Timer) -> list[str]:
    events: list[str] = []
    timer.on_start.subscribe(lambda: events.append("start"))
    timer.on_stop.subscribe(lambda: events.append("stop"))
    timer.on_force_end.subscribe(lambda: events.append("force_end"))
    return events


@pytest.fixture(params=["countdown", "stopwatch"])
def timer(request) -> Timer:
    if request.param == "countdown":
        return CountdownTimer(10.0)
    return StopwatchTimer()


def test_timer_is_abstract():
    with pytest.raises(TypeError):
        Timer(1.0)  # type: ignore[abstract]


def test_new_timer_is_stopped(timer):
    assert timer.is_running is False
    assert timer.elapsed == 0.0


class TestStart:

    def test_start_fires_on_start(self, timer):
        events = _record(timer)
        timer.start()
        assert timer.is_running is True
        assert events == ["start"]

    def test_start_loads_initial_duration(self, timer):
        timer.start()
        assert timer.elapsed == timer.initial_duration

    def test_start_twice_fires_once(self, timer):
        """Second start while running fires nothing."""
        events = _record(timer)
        timer.start()
        timer.start()
        assert events == ["start"]

    def test_start_twice_resets_elapsed_both_times(self):
        timer = CountdownTimer(10.0)
        timer.start()
        timer.tick(3.0)
        assert timer.elapsed == 7.0

        timer.start()
        assert timer.elapsed == 10.0
        assert timer.is_running is True

    def test_start_after_stop_fires_again(self, timer):
        events = _record(timer)
        timer.start()
        timer.stop()
        timer.start()
        assert events == ["start", "stop", "start"]


class TestStop:

    def test_stop_fires_on_stop(self, timer):
        events = _record(timer)
        timer.start()
        timer.stop()
        assert timer.is_running is False
        assert events == ["start", "stop"]

    def test_stop_when_stopped_is_noop(self, timer):
        events = _record(timer)
        timer.stop()
        assert events == []

    def test_stop_twice_fires_once(self, timer):
        events = _record(timer)
        timer.start()
        timer.stop()
        timer.stop()
        assert events.count("stop") == 1

    def test_stop_keeps_elapsed(self):
        timer = CountdownTimer(10.0)
        timer.start()
        timer.tick(2.5)
        timer.stop()
        assert timer.elapsed == 7.5


class TestForceEnd:

    def test_force_end_running(self, timer):
        """Force-end clears running, skips on_stop, fires on_force_end once."""
        events = _record(timer)
        timer.start()
        timer.force_end()
        assert timer.is_running is False
        assert events == ["start", "force_end"]

    def test_force_end_when_stopped_still_fires(self, timer):
        events = _record(timer)
        timer.force_end()
        timer.force_end()
        assert events == ["force_end", "force_end"]

    def test_force_end_after_force_end(self, timer):
        events = _record(timer)
        timer.start()
        timer.force_end()
        timer.force_end()
        assert events == ["start", "force_end", "force_end"]
        assert timer.is_running is False

    def test_force_end_keeps_elapsed(self):
        timer = CountdownTimer(5.0)
        timer.start()
        timer.tick(1.0)
        timer.force_end()
        assert timer.elapsed == 4.0
        assert timer.is_finished is False


class TestPauseResume:

    def test_pause_fires_nothing(self, timer):
        events = _record(timer)
        timer.start()
        timer.pause()
        assert timer.is_running is False
        assert events == ["start"]

    def test_resume_fires_nothing(self, timer):
        events = _record(timer)
        timer.start()
        timer.pause()
        timer.resume()
        assert timer.is_running is True
        assert events == ["start"]

    def test_paused_ticks_do_not_change_elapsed(self, timer):
        timer.start()
        timer.tick(1.0)
        before = timer.elapsed
        timer.pause()
        for _ in range(5):
            timer.tick(3.0)
        assert timer.elapsed == before

    def test_resume_keeps_elapsed(self):
        timer = CountdownTimer(10.0)
        timer.start()
        timer.tick(4.0)
        timer.pause()
        timer.resume()
        assert timer.elapsed == 6.0

    def test_resume_without_start(self):
        """Resume on a fresh stopwatch runs from zero without on_start."""
        timer = StopwatchTimer()
        events = _record(timer)
        timer.resume()
        timer.tick(2.0)
        assert timer.get_time() == 2.0
        assert events == []

    def test_pause_then_stop_fires_nothing(self, timer):
        """stop() after pause() is a no-op, the timer is already stopped."""
        events = _record(timer)
        timer.start()
        timer.pause()
        timer.stop()
        assert events == ["start"]


class TestProgress:

    def test_countdown_progress(self):
        timer = CountdownTimer(8.0)
        timer.start()
        assert timer.progress == 1.0
        timer.tick(2.0)
        assert timer.progress == 0.75
        timer.tick(6.0)
        assert timer.progress == 0.0

    def test_stopwatch_progress_is_undefined(self):
        """Zero initial duration gives float division results, not an exception."""
        timer = StopwatchTimer()
        assert math.isnan(timer.progress)

        timer.start()
        timer.tick(1.0)
        assert timer.progress == math.inf

        timer.tick(-3.0)
        assert timer.progress == -math.inf

    def test_zero_duration_countdown_progress(self):
        timer = CountdownTimer(0.0)
        timer.start()
        assert math.isnan(timer.progress)


class TestListenerReentry:

    def test_listener_sees_state_already_applied(self):
        timer = CountdownTimer(3.0)
        seen = []
        timer.on_start.subscribe(lambda: seen.append(timer.is_running))
        timer.on_stop.subscribe(lambda: seen.append(timer.is_running))

        timer.start()
        timer.stop()

        assert seen == [True, False]

    def test_listener_restarting_timer_from_on_stop(self):
        """A listener may restart the timer it listens to; a loop results."""
        timer = CountdownTimer(2.0)
        stops = []

        def again() -> None:
            stops.append(timer.elapsed)
            if len(stops) < 3:
                timer.start()

        timer.on_stop.subscribe(again)
        timer.start()
        for _ in range(6):
            timer.tick(1.0)

        assert stops == [0.0, 0.0, 0.0]
        assert timer.is_running is False


def test_repr():
    timer = CountdownTimer(5.0)
    assert repr(timer) == "CountdownTimer(initial_duration=5.0, elapsed=0.0, running=False)"
