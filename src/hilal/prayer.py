"""Prayer time computation layer — hour angles over a low-precision solar position.

Angles passed to compute_time are depressions below the horizon: 0.833 is
sunset, 180 - 0.833 sunrise, 180 - 18 an 18° morning twilight. A negative
angle (Asr) is an altitude above the horizon.
"""

from dataclasses import dataclass

from hilal.methods import AsrConvention, CalculationMethod
from hilal.models import CalendarDate, GeoLocation, PrayerTimeSet
from hilal.numeric import (
    darccos,
    darcsin,
    darctan,
    darctan2,
    days_in_month,
    dcos,
    dsin,
    dtan,
    fix_angle,
    fix_hour,
    gregorian_to_julian_day,
)
from hilal.places import offset_for
from hilal.policy import PerpetualDarkness, PerpetualDaylight, Strictness

# Refraction plus solar semi-diameter at rise/set
RISE_SET_ANGLE = 0.833


@dataclass(frozen=True)
class SunPosition:
    declination: float  # Degrees
    equation: float  # Equation of time (hours), wrapped to (-12, 12]


def sun_position(jd: float) -> SunPosition:
    """Low-precision solar coordinates for a Julian Day.

    Args:
        jd: Julian Day Number.

    Returns:
        SunPosition with declination and equation of time.
    """
    d = jd - 2451545.0
    g = fix_angle(357.529 + 0.98560028 * d)  # Mean anomaly
    q = fix_angle(280.459 + 0.98564736 * d)  # Mean longitude
    lon = fix_angle(q + 1.915 * dsin(g) + 0.020 * dsin(2 * g))  # Ecliptic longitude
    e = 23.439 - 0.00000036 * d  # Obliquity of the ecliptic

    declination = darcsin(dsin(e) * dsin(lon))
    ra = darctan2(dcos(e) * dsin(lon), dcos(lon)) / 15
    equation = q / 15 - ra
    if equation > 12:
        equation -= 24
    return SunPosition(declination=declination, equation=equation)


def solar_transit(sun: SunPosition) -> float:
    """Apparent noon at the prime meridian, in hours."""
    return 12 - sun.equation


def compute_time(
    latitude: float,
    declination: float,
    transit: float,
    angle: float,
    morning: bool,
    strictness: Strictness = Strictness.LENIENT,
    event: str = "",
) -> float:
    """Time at which the sun crosses an angle, before or after transit.

    Args:
        latitude: Observer latitude (degrees).
        declination: Solar declination (degrees).
        transit: Solar transit time (hours).
        angle: Depression below the horizon (degrees); negative for altitudes.
        morning: True for the crossing before transit.
        strictness: LENIENT clamps an unreachable angle to the nearest
            reachable one; STRICT raises.
        event: Event name reported in the raised error.

    Returns:
        Time in hours at the prime meridian.

    Raises:
        PerpetualDaylight: Under STRICT, when the sun never sinks to the angle.
        PerpetualDarkness: Under STRICT, when the sun never rises to the angle.
    """
    cos_hour = (-dsin(angle) - dsin(latitude) * dsin(declination)) / (
        dcos(latitude) * dcos(declination)
    )
    if not -1 <= cos_hour <= 1:
        if strictness is Strictness.STRICT:
            error = PerpetualDaylight if cos_hour < -1 else PerpetualDarkness
            raise error(event, cos_hour)
        cos_hour = max(-1.0, min(1.0, cos_hour))

    hour_angle = darccos(cos_hour) / 15
    return transit - hour_angle if morning else transit + hour_angle


def asr_angle(latitude: float, declination: float, convention: AsrConvention) -> float:
    """Sun angle at which a shadow reaches `factor` object lengths plus the noon shadow."""
    noon_shadow = dtan(abs(latitude - declination))
    return -darctan(1 / (convention.factor + noon_shadow))


def calculate(
    location: GeoLocation,
    date: CalendarDate,
    method: CalculationMethod = CalculationMethod.MWL,
    asr_convention: AsrConvention = AsrConvention.STANDARD,
    strictness: Strictness = Strictness.LENIENT,
) -> PrayerTimeSet:
    """Compute the six daily times for a location and date.

    Args:
        location: Observer position and timezone.
        date: Gregorian date.
        method: Twilight angle convention for Fajr and Isha.
        asr_convention: Shadow factor for Asr.
        strictness: Behaviour when an angle is unreachable (polar days/nights).

    Returns:
        PrayerTimeSet in local civil time.
    """
    lat = location.latitude
    params = method.params
    sun = sun_position(gregorian_to_julian_day(date.year, date.month, date.day))
    dec = sun.declination
    transit = solar_transit(sun)

    def at(angle: float, morning: bool, event: str) -> float:
        return compute_time(lat, dec, transit, angle, morning, strictness, event)

    raw = {
        "fajr": at(180 - params.fajr_angle, True, "fajr"),
        "sunrise": at(180 - RISE_SET_ANGLE, True, "sunrise"),
        "dhuhr": transit,
        "asr": at(asr_angle(lat, dec, asr_convention), False, "asr"),
        "maghrib": at(RISE_SET_ANGLE, False, "maghrib"),
    }
    if method.isha_is_interval:
        raw["isha"] = raw["maghrib"] + params.isha_angle / 60
    else:
        raw["isha"] = at(params.isha_angle, False, "isha")

    adjust = offset_for(location, date) - location.longitude / 15
    local = {name: fix_hour(hours + adjust) for name, hours in raw.items()}

    return PrayerTimeSet(
        date=date,
        location=location,
        method=method,
        asr_convention=asr_convention,
        **local,
    )


def monthly_timetable(
    location: GeoLocation,
    year: int,
    month: int,
    method: CalculationMethod = CalculationMethod.MWL,
    asr_convention: AsrConvention = AsrConvention.STANDARD,
    strictness: Strictness = Strictness.LENIENT,
) -> list[PrayerTimeSet]:
    """Daily times for every day of a Gregorian month (28-31 entries)."""
    return [
        calculate(location, CalendarDate(year, month, day), method, asr_convention, strictness)
        for day in range(1, days_in_month(year, month) + 1)
    ]
