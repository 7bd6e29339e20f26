"""Stateless call surfaces for presentation layers over the calendar and prayer core."""

from dataclasses import replace
from enum import Enum

from hilal import hijri, prayer
from hilal.methods import AsrConvention, CalculationMethod
from hilal.models import CalendarDate, GeoLocation, HijriDate, PrayerTimeSet
from hilal.policy import Strictness


class Direction(Enum):
    G2H = "g2h"  # Gregorian → Hijri
    H2G = "h2g"  # Hijri → Gregorian


def convert_date(
    direction: Direction | str, date: CalendarDate | HijriDate
) -> CalendarDate | HijriDate:
    """Convert a date between the Gregorian and tabular Hijri calendars.

    Args:
        direction: Direction.G2H / Direction.H2G, or "g2h" / "h2g".
        date: CalendarDate for g2h, HijriDate for h2g.

    Returns:
        HijriDate for g2h, CalendarDate for h2g.

    Raises:
        ValueError: Unknown direction string.
        TypeError: Date type does not match the direction.
    """
    direction = Direction(direction)
    if direction is Direction.G2H:
        if not isinstance(date, CalendarDate):
            raise TypeError(f"g2h expects a CalendarDate, got {type(date).__name__}")
        return hijri.gregorian_to_hijri(date)
    if not isinstance(date, HijriDate):
        raise TypeError(f"h2g expects a HijriDate, got {type(date).__name__}")
    return hijri.hijri_to_gregorian(date)


def get_prayer_times(
    location: GeoLocation,
    date: CalendarDate,
    method: CalculationMethod | str = CalculationMethod.MWL,
    asr_convention: AsrConvention | str = AsrConvention.STANDARD,
    timezone_offset_hours: float | None = None,
    strictness: Strictness = Strictness.LENIENT,
) -> PrayerTimeSet:
    """Daily times for one location and date.

    Args:
        location: Observer position.
        date: Gregorian date.
        method: Enum member or id string ("mwl", "isna", ...).
        asr_convention: Enum member or "standard" / "hanafi".
        timezone_offset_hours: Fixed offset overriding the location's zone.
        strictness: LENIENT (clamp, default method) or STRICT (raise).
    """
    if timezone_offset_hours is not None:
        location = replace(
            location, timezone_offset_hours=timezone_offset_hours, timezone=None
        )
    return prayer.calculate(
        location,
        date,
        _method(method, strictness),
        _asr(asr_convention),
        strictness,
    )


def get_monthly_timetable(
    location: GeoLocation,
    year: int,
    month: int,
    method: CalculationMethod | str = CalculationMethod.MWL,
    asr_convention: AsrConvention | str = AsrConvention.STANDARD,
    strictness: Strictness = Strictness.LENIENT,
) -> list[PrayerTimeSet]:
    """Daily times for every day of a Gregorian month."""
    return prayer.monthly_timetable(
        location,
        year,
        month,
        _method(method, strictness),
        _asr(asr_convention),
        strictness,
    )


def method_catalogue() -> dict[str, str]:
    """Method id → display name, in table order."""
    return {m.value: m.params.name for m in CalculationMethod}


def _method(method: CalculationMethod | str, strictness: Strictness) -> CalculationMethod:
    if isinstance(method, CalculationMethod):
        return method
    return CalculationMethod.lookup(method, strictness)


def _asr(convention: AsrConvention | str) -> AsrConvention:
    if isinstance(convention, AsrConvention):
        return convention
    return AsrConvention.lookup(convention)
