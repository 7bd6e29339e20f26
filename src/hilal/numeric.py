"""Degree trigonometry and clock formatting shared by the calendar and prayer layers."""

import calendar
import math


def deg_to_rad(degrees: float) -> float:
    return degrees * math.pi / 180.0


def rad_to_deg(radians: float) -> float:
    return radians * 180.0 / math.pi


def dsin(degrees: float) -> float:
    return math.sin(deg_to_rad(degrees))


def dcos(degrees: float) -> float:
    return math.cos(deg_to_rad(degrees))


def dtan(degrees: float) -> float:
    return math.tan(deg_to_rad(degrees))


def darcsin(x: float) -> float:
    return rad_to_deg(math.asin(x))


def darccos(x: float) -> float:
    return rad_to_deg(math.acos(x))


def darctan(x: float) -> float:
    return rad_to_deg(math.atan(x))


def darctan2(y: float, x: float) -> float:
    return rad_to_deg(math.atan2(y, x))


def floor_div(a: float, b: float) -> int:
    """Floor of a / b, rounding toward negative infinity for negative operands."""
    return math.floor(a / b)


def fix_mod(a: float, b: float) -> float:
    """Remainder of a / b that is never negative for a positive b."""
    return a - b * math.floor(a / b)


def fix_angle(degrees: float) -> float:
    return fix_mod(degrees, 360.0)


def fix_hour(hours: float) -> float:
    return fix_mod(hours, 24.0)


def gregorian_to_julian_day(year: int, month: int, day: int) -> float:
    """Julian Day Number at midnight of a proleptic Gregorian date.

    January and February count as months 13 and 14 of the previous year.
    No validation: pre-reform dates silently follow the Gregorian rule.

    Args:
        year: Gregorian year.
        month: Gregorian month (1-12).
        day: Day of month.

    Returns:
        JDN ending in .5 (midnight convention).
    """
    if month <= 2:
        year -= 1
        month += 12
    a = floor_div(year, 100)
    b = 2 - a + floor_div(a, 4)
    return (
        math.floor(365.25 * (year + 4716))
        + math.floor(30.6001 * (month + 1))
        + day
        + b
        - 1524.5
    )


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def split_hours(hours: float) -> tuple[int, int]:
    """Split decimal hours into (hour, minute) on a 24h clock.

    Hours are wrapped into [0, 24) first; a minute that rounds up to 60
    carries into the hour, and an hour that reaches 24 wraps to 0.
    """
    hours = fix_hour(hours)
    h = math.floor(hours)
    m = math.floor((hours - h) * 60 + 0.5)
    if m >= 60:
        m -= 60
        h += 1
    return h % 24, m


def format_24h(hours: float) -> str:
    """Decimal hours → "HH:MM"."""
    h, m = split_hours(hours)
    return f"{h:02d}:{m:02d}"


def format_12h(hours: float) -> str:
    """Decimal hours → "H:MM AM" / "H:MM PM"."""
    h, m = split_hours(hours)
    return _twelve_hour(h, m)


def _twelve_hour(h: int, m: int) -> str:
    period = "PM" if h >= 12 else "AM"
    h = h % 12 or 12
    return f"{h}:{m:02d} {period}"


def hhmm_to_minutes(hhmm: str) -> int:
    h, m = map(int, hhmm.split(":"))
    return h * 60 + m


def minutes_to_hhmm(minutes: int) -> str:
    minutes %= 24 * 60
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def hhmm_to_hours(hhmm: str) -> float:
    return hhmm_to_minutes(hhmm) / 60.0


def convert_24h_to_12h(hhmm: str) -> str:
    """Convert "17:05" to "5:05 PM"."""
    h, m = map(int, hhmm.split(":"))
    return _twelve_hour(h % 24, m)
