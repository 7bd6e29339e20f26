"""Next-prayer lookup and iqamah derivation over a computed PrayerTimeSet."""

import datetime
from dataclasses import dataclass

from hilal.models import PRAYERS, NextPrayer, PrayerTimeSet
from hilal.numeric import hhmm_to_minutes, minutes_to_hhmm

_DAY_SECONDS = 24 * 60 * 60

# Southern-hemisphere summer (Oct-Mar)
_SUMMER_MONTHS = frozenset({10, 11, 12, 1, 2, 3})


@dataclass(frozen=True)
class SeasonalIqamah:
    """Iqamah clock times that change with the season."""

    summer: str  # "HH:MM", used October to March
    winter: str  # "HH:MM", used April to September


IqamahRule = str | SeasonalIqamah | None


def next_prayer(times: PrayerTimeSet, now: datetime.datetime | datetime.time) -> NextPrayer:
    """First event of the day still ahead of `now`, or Fajr tomorrow.

    Events are whole minutes on the 24h clock; an event counts as passed
    once `now` reaches it, and the minutes remaining are the floor of the
    real difference. Tomorrow's Fajr is approximated by today's.

    Args:
        times: The day's times, in the same local time as `now`.
        now: Local wall-clock time.

    Returns:
        NextPrayer with the minutes remaining.
    """
    now_seconds = now.hour * 3600 + now.minute * 60 + now.second
    clock = times.clock_24h()
    for name in PRAYERS:
        event_seconds = hhmm_to_minutes(clock[name]) * 60
        if event_seconds > now_seconds:
            return NextPrayer(
                name=name,
                time=clock[name],
                minutes_until=(event_seconds - now_seconds) // 60,
            )

    fajr = clock["fajr"]
    return NextPrayer(
        name="fajr",
        time=fajr,
        minutes_until=(_DAY_SECONDS - now_seconds + hhmm_to_minutes(fajr) * 60) // 60,
        tomorrow=True,
    )


def iqamah_time(adhan: str, rule: IqamahRule, month: int) -> str | None:
    """Iqamah clock time for an adhan time under a mosque's rule.

    Args:
        adhan: Adhan time "HH:MM" (24h).
        rule: None (no iqamah), a fixed "HH:MM", "+N" minutes after the adhan,
            or a SeasonalIqamah.
        month: Gregorian month used to pick the seasonal time.

    Returns:
        "HH:MM" or None when the rule yields no time.
    """
    if not rule:
        return None
    if isinstance(rule, SeasonalIqamah):
        return rule.summer if month in _SUMMER_MONTHS else rule.winter
    if rule.startswith("+"):
        return minutes_to_hhmm(hhmm_to_minutes(adhan) + int(rule[1:]))
    return rule
