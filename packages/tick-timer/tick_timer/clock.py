"""Clock - the per-cycle delta-time source for a driver.

The clock runs at a fixed rate by default. A caller with a real frame loop
can pass the measured frame delta to ``advance`` instead; ``elapsed`` then
sums the deltas actually handed out rather than ``tick_number * dt``.
"""

from typing import Callable

from tick_timer.types import TickContext


class Clock:
    def __init__(self, tps: int) -> None:
        if tps <= 0:
            raise ValueError("tps must be positive")
        self._tps = tps
        self._dt = 1.0 / tps
        self._tick_number = 0
        self._elapsed = 0.0
        self._last_dt = self._dt

    @property
    def tps(self) -> int:
        return self._tps

    @property
    def dt(self) -> float:
        return self._dt

    @property
    def tick_number(self) -> int:
        return self._tick_number

    @property
    def elapsed(self) -> float:
        return self._elapsed

    @property
    def last_dt(self) -> float:
        """Delta handed out by the most recent ``advance``."""
        return self._last_dt

    def advance(self, dt: float | None = None) -> int:
        step = self._dt if dt is None else dt
        self._tick_number += 1
        self._elapsed += step
        self._last_dt = step
        return self._tick_number

    def context(self, stop_fn: Callable[[], None]) -> TickContext:
        return TickContext(
            tick_number=self._tick_number,
            dt=self._last_dt,
            elapsed=self._elapsed,
            request_stop=stop_fn,
        )

    def reset(self, tick_number: int = 0) -> None:
        self._tick_number = tick_number
        self._elapsed = tick_number * self._dt
        self._last_dt = self._dt
