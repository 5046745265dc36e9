"""TimerDriver - advances timers once per cycle, plus run-level hooks and pacing."""
from __future__ import annotations

import logging
import time
from typing import Callable, TypeVar

from tick_timer.clock import Clock
from tick_timer.types import System, TickContext, Tickable

_logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Tickable)

RunHook = Callable[["TimerDriver", TickContext], None]


class TimerDriver:
    """Owns a Clock and ticks every registered timer on each step.

    Each step ticks the tickables in registration order, then runs the
    systems in registration order. Tickables are snapshotted at the start
    of the step, so a listener that adds or removes a timer mid-step takes
    effect on the next one.
    """

    def __init__(self, tps: int = 20) -> None:
        self._clock = Clock(tps)
        self._tickables: list[Tickable] = []
        self._systems: list[System] = []
        self._start_hooks: list[RunHook] = []
        self._stop_hooks: list[RunHook] = []
        self._stop_requested: bool = False

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def timers(self) -> tuple[Tickable, ...]:
        return tuple(self._tickables)

    def add(self, tickable: T) -> T:
        self._tickables.append(tickable)
        return tickable

    def remove(self, tickable: Tickable) -> None:
        try:
            self._tickables.remove(tickable)
        except ValueError:
            pass

    def add_system(self, system: System) -> None:
        self._systems.append(system)

    def on_start(self, hook: RunHook) -> None:
        self._start_hooks.append(hook)

    def on_stop(self, hook: RunHook) -> None:
        self._stop_hooks.append(hook)

    def _request_stop(self) -> None:
        self._stop_requested = True

    def _tick(self, dt: float | None = None) -> None:
        self._clock.advance(dt)
        ctx = self._clock.context(self._request_stop)
        for tickable in list(self._tickables):
            tickable.tick(ctx.dt)
        for system in self._systems:
            system(self, ctx)
            if self._stop_requested:
                break

    def step(self, dt: float | None = None) -> None:
        """Advance one cycle by the clock's fixed ``dt`` or an explicit one."""
        self._stop_requested = False
        self._tick(dt)

    def run(self, n: int) -> None:
        self._stop_requested = False
        ctx = self._clock.context(self._request_stop)
        for hook in self._start_hooks:
            hook(self, ctx)

        for _ in range(n):
            self._tick()
            if self._stop_requested:
                _logger.debug("Stop requested at tick %d", self._clock.tick_number)
                break

        ctx = self._clock.context(self._request_stop)
        for hook in self._stop_hooks:
            hook(self, ctx)

    def run_forever(self) -> None:
        """Tick at the clock rate in real time until a system requests a stop."""
        self._stop_requested = False
        ctx = self._clock.context(self._request_stop)
        for hook in self._start_hooks:
            hook(self, ctx)
        _logger.debug("Running at %d tps", self._clock.tps)

        dt = self._clock.dt
        while not self._stop_requested:
            start = time.monotonic()
            self._tick()
            if self._stop_requested:
                break
            elapsed = time.monotonic() - start
            sleep_time = dt - elapsed
            if sleep_time > 0:
                time.sleep(sleep_time)

        _logger.debug("Stopped at tick %d", self._clock.tick_number)
        ctx = self._clock.context(self._request_stop)
        for hook in self._stop_hooks:
            hook(self, ctx)
