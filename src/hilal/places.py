"""Named cities and timezone resolution. IANA zones become UTC offsets only here."""

import datetime
from types import MappingProxyType

from pytz import UnknownTimeZoneError, timezone
from timezonefinder import TimezoneFinder

from hilal.models import CalendarDate, City, GeoLocation
from hilal.policy import HilalError

_tf = TimezoneFinder()

_NZ = "Pacific/Auckland"

NZ_CITIES = MappingProxyType(
    {
        c.slug: c
        for c in (
            City("auckland", "Auckland", "أوكلاند", -36.8485, 174.7633, _NZ),
            City("wellington", "Wellington", "ولينغتون", -41.2865, 174.7762, _NZ),
            City("christchurch", "Christchurch", "كرايستشيرش", -43.5321, 172.6362, _NZ),
            City("hamilton", "Hamilton", "هاملتون", -37.7870, 175.2793, _NZ),
            City("tauranga", "Tauranga", "تاورانغا", -37.6878, 176.1651, _NZ),
            City("dunedin", "Dunedin", "دنيدن", -45.8788, 170.5028, _NZ),
            City("palmerston", "Palmerston North", "بالمرستون نورث", -40.3523, 175.6082, _NZ),
            City("napier", "Napier", "نابير", -39.4928, 176.9120, _NZ),
            City("nelson", "Nelson", "نيلسون", -41.2706, 173.2840, _NZ),
            City("rotorua", "Rotorua", "روتوروا", -38.1368, 176.2497, _NZ),
        )
    }
)


class UnknownCityError(HilalError, KeyError):
    """City slug not in the named-city table."""


class TimezoneNotFound(HilalError, LookupError):
    """No IANA zone for a coordinate, or an unknown zone name."""


def get_city(slug: str) -> City:
    """Look up a named city, case-insensitively.

    Raises:
        UnknownCityError: When the slug is not in NZ_CITIES.
    """
    try:
        return NZ_CITIES[slug.strip().lower()]
    except KeyError:
        raise UnknownCityError(slug) from None


def timezone_offset_hours(tz_name: str, on: CalendarDate) -> float:
    """UTC offset of an IANA zone at local noon of a date, in hours (DST aware).

    Raises:
        TimezoneNotFound: When tz_name is not a known zone.
    """
    try:
        tz = timezone(tz_name)
    except UnknownTimeZoneError:
        raise TimezoneNotFound(f"Unknown timezone: {tz_name}") from None
    noon = datetime.datetime(on.year, on.month, on.day, 12, 0)
    offset = tz.localize(noon).utcoffset()
    assert offset is not None
    return offset.total_seconds() / 3600


def offset_for(location: GeoLocation, on: CalendarDate) -> float:
    """Offset that applies to a location on a date.

    Locations carrying an IANA name get that zone's offset for the date;
    others keep their fixed timezone_offset_hours.
    """
    if location.timezone is None:
        return location.timezone_offset_hours
    return timezone_offset_hours(location.timezone, on)


def resolve_timezone(latitude: float, longitude: float) -> str:
    """IANA zone name containing a coordinate.

    Raises:
        TimezoneNotFound: When the point is outside every zone polygon.
    """
    tz_str = _tf.timezone_at(lat=latitude, lng=longitude)
    if tz_str is None:
        raise TimezoneNotFound(f"Timezone not found: lat={latitude}, lng={longitude}")
    return tz_str


def locate(latitude: float, longitude: float, on: CalendarDate) -> GeoLocation:
    """Build a GeoLocation whose timezone is resolved from the coordinate."""
    tz_name = resolve_timezone(latitude, longitude)
    return GeoLocation(
        latitude=latitude,
        longitude=longitude,
        timezone_offset_hours=timezone_offset_hours(tz_name, on),
        timezone=tz_name,
    )


def city_location(city: City, on: CalendarDate) -> GeoLocation:
    return GeoLocation(
        latitude=city.latitude,
        longitude=city.longitude,
        timezone_offset_hours=timezone_offset_hours(city.timezone, on),
        timezone=city.timezone,
    )
