"""Delayer - wait, fire a callback, then keep waiting before reporting done.

Both waits are CountdownTimers chained through their ``on_stop`` hooks, so
a Delayer is advanced like any other timer: register it with a driver or
call ``tick(dt)`` from a frame loop.
"""
from __future__ import annotations

import logging
from typing import Callable

from tick_timer.hooks import Hook
from tick_timer.timers import CountdownTimer

_logger = logging.getLogger(__name__)

IDLE = "idle"
DELAY = "delay"
CONTINUANCE = "continuance"
DONE = "done"


class Delayer:
    """Two-phase countdown: ``delay`` -> callback -> ``continuance`` -> done.

    Only the active phase is ticked, so the tick that ends the delay does
    not also advance the continuance. Overshoot from that tick is dropped.
    """

    def __init__(
        self,
        delay: float,
        continuance: float = 0.0,
        callback: Callable[[], None] | None = None,
    ) -> None:
        if delay < 0:
            raise ValueError(f"delay must be non-negative, got {delay!r}")
        if continuance < 0:
            raise ValueError(f"continuance must be non-negative, got {continuance!r}")
        self._delay = CountdownTimer(delay)
        self._continuance = CountdownTimer(continuance)
        self._callback = callback
        self._phase = IDLE
        self.on_done = Hook("on_done")

        self._delay.on_stop.subscribe(self._delay_elapsed)
        self._continuance.on_stop.subscribe(self._continuance_elapsed)

    @property
    def phase(self) -> str:
        return self._phase

    @property
    def done(self) -> bool:
        return self._phase == DONE

    @property
    def delay_timer(self) -> CountdownTimer:
        return self._delay

    @property
    def continuance_timer(self) -> CountdownTimer:
        return self._continuance

    @property
    def remaining(self) -> float:
        """Time left in the active phase; 0 when idle or done."""
        if self._phase == DELAY:
            return max(self._delay.elapsed, 0.0)
        if self._phase == CONTINUANCE:
            return max(self._continuance.elapsed, 0.0)
        return 0.0

    def start(self) -> None:
        """Start, or restart, from the beginning of the delay phase."""
        self._continuance.pause()
        self._phase = DELAY
        self._delay.start()

    def cancel(self) -> None:
        """Force-end the active phase and go idle without running the callback."""
        if self._phase == DELAY:
            self._delay.force_end()
        elif self._phase == CONTINUANCE:
            self._continuance.force_end()
        self._phase = IDLE

    def tick(self, dt: float) -> None:
        if self._phase == DELAY:
            self._delay.tick(dt)
        elif self._phase == CONTINUANCE:
            self._continuance.tick(dt)

    def _delay_elapsed(self) -> None:
        self._phase = CONTINUANCE
        _logger.debug("Delay of %s elapsed", self._delay.initial_duration)
        self._continuance.start()
        if self._callback is not None:
            self._callback()

    def _continuance_elapsed(self) -> None:
        self._phase = DONE
        _logger.debug("Continuance of %s elapsed", self._continuance.initial_duration)
        self.on_done.fire()
