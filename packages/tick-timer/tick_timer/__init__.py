"""tick-timer - Countdown and stopwatch timers advanced by per-cycle deltas."""
from __future__ import annotations

from tick_timer.clock import Clock
from tick_timer.delay import Delayer
from tick_timer.driver import TimerDriver
from tick_timer.hooks import Hook
from tick_timer.timers import CountdownTimer, StopwatchTimer, Timer
from tick_timer.timeutils import (
    TimeSnapshot,
    duration_between,
    format_countdown,
    minutes_between,
    parse_unix_string,
    unix_now,
)
from tick_timer.types import TickContext, Tickable

__all__ = [
    "Timer",
    "CountdownTimer",
    "StopwatchTimer",
    "Hook",
    "Delayer",
    "TimerDriver",
    "Clock",
    "TickContext",
    "Tickable",
    "TimeSnapshot",
    "unix_now",
    "minutes_between",
    "format_countdown",
    "duration_between",
    "parse_unix_string",
]
