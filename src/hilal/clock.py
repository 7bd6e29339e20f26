"""Injectable clocks, so "today" is an argument rather than hidden wall-clock state."""

import datetime
from typing import Protocol

from hilal.models import CalendarDate


class Clock(Protocol):
    def now(self) -> datetime.datetime: ...


class SystemClock:
    """Wall clock in UTC."""

    def now(self) -> datetime.datetime:
        return datetime.datetime.now(datetime.timezone.utc)


class FixedClock:
    """Always returns the same instant. Used in tests and reproducible runs."""

    def __init__(self, instant: datetime.datetime) -> None:
        self._instant = instant

    def now(self) -> datetime.datetime:
        return self._instant


def today(clock: Clock) -> CalendarDate:
    """Current calendar date according to the clock (UTC for SystemClock)."""
    return CalendarDate.from_date(clock.now().date())
