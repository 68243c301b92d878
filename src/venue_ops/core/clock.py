"""Clock abstraction for time-dependent business rules.

WallClock: real wall-clock time (the app at runtime)
FixedClock: pinned, manually advanced time (tests, replays)

Validators and derived properties never call datetime.now() directly;
they take a clock.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Protocol

from .ids import as_utc


class IClock(Protocol):
    """Clock interface used by all time-dependent code."""

    def now(self) -> datetime:
        """Current time as timezone-aware UTC datetime."""
        ...


class WallClock:
    """Real wall-clock time."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedClock:
    """Clock pinned to a given instant.

    Time changes only when explicitly set or advanced.
    """

    def __init__(self, start: datetime | None = None) -> None:
        self._time = as_utc(start) if start else datetime(2024, 1, 1, tzinfo=timezone.utc)

    def now(self) -> datetime:
        return self._time

    def set_time(self, t: datetime) -> None:
        """Move the clock. Must be monotonically increasing."""
        t = as_utc(t)
        if t < self._time:
            raise ValueError(
                f"FixedClock cannot go backwards: {t} < {self._time}"
            )
        self._time = t

    def advance(self, *, days: int = 0, seconds: float = 0) -> None:
        """Advance time by a number of days and/or seconds."""
        self.set_time(self._time + timedelta(days=days, seconds=seconds))


DEFAULT_CLOCK: IClock = WallClock()
