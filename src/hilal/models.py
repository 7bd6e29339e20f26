"""Data model definitions — immutable values passed between the computation core and its boundary layers."""

import datetime
from dataclasses import dataclass

from hilal.methods import AsrConvention, CalculationMethod
from hilal.numeric import format_12h, format_24h, hhmm_to_hours

PRAYERS: tuple[str, ...] = ("fajr", "sunrise", "dhuhr", "asr", "maghrib", "isha")


@dataclass(frozen=True)
class CalendarDate:
    """A Gregorian calendar date. Not validated."""

    year: int
    month: int  # 1-12
    day: int  # 1-31

    @classmethod
    def from_date(cls, d: datetime.date) -> "CalendarDate":
        return cls(year=d.year, month=d.month, day=d.day)

    @classmethod
    def fromisoformat(cls, value: str) -> "CalendarDate":
        """Parse "YYYY-MM-DD"."""
        return cls.from_date(datetime.date.fromisoformat(value))

    def to_date(self) -> datetime.date:
        return datetime.date(self.year, self.month, self.day)

    def isoformat(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"


@dataclass(frozen=True)
class HijriDate:
    """A tabular (calculated, never sighted) Hijri date."""

    year: int
    month: int  # 1-12
    day: int  # 1-30


@dataclass(frozen=True)
class MonthName:
    en: str
    ar: str


@dataclass(frozen=True)
class HijriMonth:
    """One month of an estimated Hijri year calendar."""

    year: int  # Hijri year
    month: int  # 1-12
    name_en: str
    name_ar: str
    gregorian_start: CalendarDate  # Estimated 1st of the month
    days: int  # Tabular length, 29 or 30


@dataclass(frozen=True)
class GeoLocation:
    """Observer position. Range checks are the caller's job."""

    latitude: float  # Decimal degrees, north positive
    longitude: float  # Decimal degrees, east positive
    timezone_offset_hours: float = 0.0  # Fixed UTC offset used when timezone is None
    timezone: str | None = None  # IANA name ("Pacific/Auckland"); offset resolved per date


@dataclass(frozen=True)
class City:
    """Convenience entry of the named-city table."""

    slug: str  # Lookup key ("auckland")
    name: str  # English display name
    name_ar: str  # Arabic display name
    latitude: float
    longitude: float
    timezone: str  # IANA name


@dataclass(frozen=True)
class PrayerTimeSet:
    """The six daily times for one (location, date, method, convention).

    Times are decimal hours of local civil time, wrapped into [0, 24).
    """

    date: CalendarDate
    location: GeoLocation
    method: CalculationMethod
    asr_convention: AsrConvention
    fajr: float
    sunrise: float
    dhuhr: float
    asr: float
    maghrib: float
    isha: float
    source: str = "calculation"  # "calculation" or "aladhan"

    def as_dict(self) -> dict[str, float]:
        return {name: getattr(self, name) for name in PRAYERS}

    def clock_24h(self) -> dict[str, str]:
        return {name: format_24h(hours) for name, hours in self.as_dict().items()}

    def clock_12h(self) -> dict[str, str]:
        return {name: format_12h(hours) for name, hours in self.as_dict().items()}

    @classmethod
    def from_clock(
        cls,
        times_24h: dict[str, str],
        *,
        date: CalendarDate,
        location: GeoLocation,
        method: CalculationMethod,
        asr_convention: AsrConvention = AsrConvention.STANDARD,
        source: str,
    ) -> "PrayerTimeSet":
        """Build from "HH:MM" strings keyed by prayer name (remote sources)."""
        hours = {name: hhmm_to_hours(times_24h[name]) for name in PRAYERS}
        return cls(
            date=date,
            location=location,
            method=method,
            asr_convention=asr_convention,
            source=source,
            **hours,
        )


@dataclass(frozen=True)
class NextPrayer:
    name: str  # One of PRAYERS
    time: str  # "HH:MM"
    minutes_until: int
    tomorrow: bool = False  # True when rolled over to tomorrow's Fajr


@dataclass(frozen=True)
class CardinalDirection:
    direction: str  # "Northeast"
    direction_ar: str  # "شمال شرق"
    abbr: str  # "NE"


@dataclass(frozen=True)
class QiblaDirection:
    """Direction and distance from an observer to the Kaaba."""

    latitude: float
    longitude: float
    bearing: float  # Degrees clockwise from true north, [0, 360)
    distance_km: float  # Great-circle distance
    cardinal: CardinalDirection

    @property
    def bearing_rounded(self) -> int:
        return round(self.bearing)

    @property
    def distance_miles(self) -> float:
        return self.distance_km * 0.621371

    def description(self, lang: str = "en") -> str:
        if lang == "ar":
            return f"{self.bearing:.1f}° من الشمال ({self.cardinal.direction_ar})"
        return f"{self.bearing:.1f}° from North ({self.cardinal.direction})"

