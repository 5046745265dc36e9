"""Timer primitives advanced by an external per-cycle delta.

Timers never read the wall clock. A driver calls ``tick(dt)`` once per
cycle and the timer moves its internal value by ``dt`` while running.

``start``/``stop`` are lifecycle transitions and fire ``on_start`` /
``on_stop``. ``pause``/``resume`` only flip the running flag and fire
nothing, so listeners can tell a suspended timer from a finished phase.
``force_end`` is the abort path: it always fires ``on_force_end`` and
never ``on_stop``.

Timers are not thread-safe. Listeners run synchronously inside the
mutating call; a listener that calls back into the same timer sees the
state change already applied.
"""
from __future__ import annotations

import abc
import logging
import math

from tick_timer.hooks import Hook

_logger = logging.getLogger(__name__)


class Timer(abc.ABC):
    """Shared lifecycle for countdown and stopwatch timers."""

    def __init__(self, initial_duration: float) -> None:
        self._initial_duration = initial_duration
        self._elapsed = 0.0
        self._running = False
        self.on_start = Hook("on_start")
        self.on_stop = Hook("on_stop")
        self.on_force_end = Hook("on_force_end")

    @property
    def initial_duration(self) -> float:
        return self._initial_duration

    @property
    def elapsed(self) -> float:
        """Time remaining for a countdown, time accumulated for a stopwatch."""
        return self._elapsed

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def progress(self) -> float:
        """``elapsed / initial_duration``.

        Undefined for a zero ``initial_duration`` (every stopwatch): the
        result follows IEEE float division, ``nan`` for ``0/0`` and a signed
        ``inf`` otherwise. Do not read it on a stopwatch.
        """
        if self._initial_duration == 0:
            if self._elapsed == 0:
                return math.nan
            return math.copysign(math.inf, self._elapsed)
        return self._elapsed / self._initial_duration

    def start(self) -> None:
        """Load ``initial_duration`` and start; fires ``on_start`` only from stopped."""
        self._elapsed = self._initial_duration
        if not self._running:
            self._running = True
            self.on_start.fire()

    def stop(self) -> None:
        if self._running:
            self._running = False
            self.on_stop.fire()

    def force_end(self) -> None:
        """Abort without ``on_stop``. ``on_force_end`` fires even when already stopped."""
        if self._running:
            self._running = False
        _logger.debug("%r force-ended at elapsed=%s", self, self._elapsed)
        self.on_force_end.fire()

    def resume(self) -> None:
        self._running = True

    def pause(self) -> None:
        self._running = False

    @abc.abstractmethod
    def reset(self) -> None:
        """Reload ``elapsed`` without touching the running flag or firing hooks."""

    @abc.abstractmethod
    def tick(self, dt: float) -> None:
        """Advance by ``dt``. Must do nothing while stopped or paused."""

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(initial_duration={self._initial_duration!r}, "
            f"elapsed={self._elapsed!r}, running={self._running})"
        )


class CountdownTimer(Timer):
    """Counts ``elapsed`` down to zero, then stops itself.

    A fresh countdown reads ``elapsed == 0`` and therefore ``is_finished``
    until ``start`` or ``reset`` loads the duration.
    """

    def __init__(self, duration: float) -> None:
        super().__init__(duration)

    def tick(self, dt: float) -> None:
        if self._running and self._elapsed > 0:
            self._elapsed -= dt

        if self._running and self._elapsed <= 0:
            _logger.debug("%r reached zero", self)
            self.stop()

    @property
    def is_finished(self) -> bool:
        return self._elapsed <= 0

    def reset(self, new_duration: float | None = None) -> None:
        """Reload the duration, optionally replacing it first."""
        if new_duration is not None:
            self._initial_duration = new_duration
        self._elapsed = self._initial_duration


class StopwatchTimer(Timer):
    """Accumulates ``elapsed`` without bound. Never stops itself."""

    def __init__(self) -> None:
        super().__init__(0.0)

    def tick(self, dt: float) -> None:
        if self._running:
            self._elapsed += dt

    def reset(self) -> None:
        self._elapsed = 0.0

    def get_time(self) -> float:
        return self._elapsed
