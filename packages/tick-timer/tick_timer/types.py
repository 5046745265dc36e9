"""Shared type aliases and protocols for tick-timer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Protocol

Listener = Callable[[], None]


@dataclass(frozen=True, slots=True)
class TickContext:
    tick_number: int
    dt: float
    elapsed: float
    request_stop: Callable[[], None]


class Tickable(Protocol):
    """Anything a driver can advance once per cycle."""

    def tick(self, dt: float) -> None: ...


if TYPE_CHECKING:
    from tick_timer.driver import TimerDriver

System = Callable[["TimerDriver", TickContext], None]
