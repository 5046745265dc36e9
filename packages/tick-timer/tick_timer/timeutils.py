"""Wall-clock helpers: Unix timestamps, countdown strings, snapshots.

These are the only functions in the package that read real time, and the
timers never call them.
"""
from __future__ import annotations

import re
import time
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_UNIX_STRING = re.compile(r"\s*[+-]?[0-9]+\s*")


def unix_now() -> int:
    """Current UTC time as whole seconds since the epoch."""
    return int(time.time())


def minutes_between(start_unix: int, end_unix: int) -> int:
    """Whole minutes from ``start_unix`` to ``end_unix``, truncated toward zero."""
    seconds = end_unix - start_unix
    if seconds < 0:
        return -(-seconds // 60)
    return seconds // 60


def format_countdown(
    start_unix: int,
    interval_seconds: int,
    include_hours: bool = False,
    now: int | None = None,
) -> str:
    """Time left until ``interval_seconds`` have passed since ``start_unix``.

    Returns ``"MM:SS"``, or ``"HH:MM:SS"`` with ``include_hours``. Once the
    interval has passed the result is all zeros. Without hours the minutes
    field is the minutes *component*, so 3700 seconds left renders
    ``"01:40"``.
    """
    if now is None:
        now = unix_now()
    remaining = max(0, interval_seconds - (now - start_unix))
    hours, rest = divmod(remaining, 3600)
    minutes, seconds = divmod(rest, 60)
    if include_hours:
        return f"{hours:02d}:{minutes:02d}:{seconds:02d}"
    return f"{minutes:02d}:{seconds:02d}"


def duration_between(start_unix: int, end_unix: int) -> timedelta:
    return timedelta(seconds=end_unix - start_unix)


def parse_unix_string(s: str | None) -> int:
    """Parse a Unix timestamp, returning 0 for anything unparseable."""
    if s is None or not _UNIX_STRING.fullmatch(s):
        return 0
    value = int(s)
    if not _INT64_MIN <= value <= _INT64_MAX:
        return 0
    return value


@dataclass(frozen=True, slots=True)
class TimeSnapshot:
    """A UTC datetime and the matching Unix timestamp, taken together."""

    current_time: datetime
    current_unix_time: int

    @classmethod
    def capture(cls) -> TimeSnapshot:
        now = datetime.now(timezone.utc)
        return cls(current_time=now, current_unix_time=int(now.timestamp()))

    def __str__(self) -> str:
        return (
            f"[Local UTC TIME: {self.current_time:%Y-%m-%d %H:%M:%S}, "
            f"Unix: {self.current_unix_time} ]"
        )
