"""Tabular Hijri calendar — Gregorian⇄Hijri conversion through Julian Day Numbers.

Every date produced here is an arithmetic estimate of where the lunar
calendar should be. Months confirmed by moon sighting can differ by a day
and are not represented in this module.
"""

import math
from types import MappingProxyType

from hilal import numeric
from hilal.clock import Clock, today
from hilal.i18n import t
from hilal.models import CalendarDate, HijriDate, HijriMonth, MonthName
from hilal.policy import Strictness, UnknownMonthError

HIJRI_MONTHS = MappingProxyType(
    {
        1: MonthName(en="Muharram", ar="محرم"),
        2: MonthName(en="Safar", ar="صفر"),
        3: MonthName(en="Rabi' al-Awwal", ar="ربيع الأول"),
        4: MonthName(en="Rabi' al-Thani", ar="ربيع الثاني"),
        5: MonthName(en="Jumada al-Awwal", ar="جمادى الأولى"),
        6: MonthName(en="Jumada al-Thani", ar="جمادى الآخرة"),
        7: MonthName(en="Rajab", ar="رجب"),
        8: MonthName(en="Sha'ban", ar="شعبان"),
        9: MonthName(en="Ramadan", ar="رمضان"),
        10: MonthName(en="Shawwal", ar="شوال"),
        11: MonthName(en="Dhul Qi'dah", ar="ذو القعدة"),
        12: MonthName(en="Dhul Hijjah", ar="ذو الحجة"),
    }
)

RAMADAN = 9
DHUL_HIJJAH = 12
_SIGNIFICANT_MONTHS = (RAMADAN, DHUL_HIJJAH)

_ARABIC_DIGITS = str.maketrans("0123456789", "٠١٢٣٤٥٦٧٨٩")

# Julian/Gregorian switch: JDN of 1582-10-15
_GREGORIAN_REFORM_JD = 2299161


def gregorian_to_julian_day(date: CalendarDate) -> float:
    return numeric.gregorian_to_julian_day(date.year, date.month, date.day)


def julian_day_to_hijri(jd: float) -> HijriDate:
    """Kuwaiti algorithm: 30-year cycles of 10631 days with 11 leap years.

    The floor sequence is a closed-form identity; operation order matters.
    """
    fl = math.floor
    jd = fl(jd) + 0.5
    r = jd - 1948439.5 + 10632
    n = fl((r - 1) / 10631)
    r = r - 10631 * n + 354
    j = fl((10985 - r) / 5316) * fl((50 * r) / 17719) + fl(r / 5670) * fl(
        (43 * r) / 15238
    )
    r = (
        r
        - fl((30 - j) / 15) * fl((17719 * j) / 50)
        - fl(j / 16) * fl((15238 * j) / 43)
        + 29
    )
    month = fl((24 * r) / 709)
    day = r - fl((709 * month) / 24)
    year = 30 * n + j - 30
    return HijriDate(year=int(year), month=int(month), day=int(day))


def hijri_to_julian_day(h: HijriDate) -> float:
    """Inverse closed form, on the same midnight (.5) convention as the Gregorian JDN."""
    return (
        math.floor((11 * h.year + 3) / 30)
        + 354 * h.year
        + 30 * h.month
        - math.floor((h.month - 1) / 2)
        + h.day
        + 1948440
        - 385
        - 0.5
    )


def julian_day_to_gregorian(jd: float) -> CalendarDate:
    """Meeus inverse. Day numbers before 2299161 resolve to the Julian calendar."""
    z = math.floor(jd + 0.5)
    f = (jd + 0.5) - z
    if z < _GREGORIAN_REFORM_JD:
        a = z
    else:
        alpha = math.floor((z - 1867216.25) / 36524.25)
        a = z + 1 + alpha - math.floor(alpha / 4)
    b = a + 1524
    c = math.floor((b - 122.1) / 365.25)
    d = math.floor(365.25 * c)
    e = math.floor((b - d) / 30.6001)
    day = b - d - math.floor(30.6001 * e) + f
    month = e - 1 if e < 14 else e - 13
    year = c - 4716 if month > 2 else c - 4715
    return CalendarDate(year=int(year), month=int(month), day=int(math.floor(day)))


def gregorian_to_hijri(date: CalendarDate) -> HijriDate:
    return julian_day_to_hijri(gregorian_to_julian_day(date))


def hijri_to_gregorian(h: HijriDate) -> CalendarDate:
    return julian_day_to_gregorian(hijri_to_julian_day(h))


def today_hijri(clock: Clock) -> HijriDate:
    """Estimated Hijri date of the clock's current (UTC) day."""
    return gregorian_to_hijri(today(clock))


def is_leap_year(year: int) -> bool:
    """True for the 11 years of each 30-year cycle that have 355 days."""
    return month_length(year, 12) == 30


def month_length(year: int, month: int) -> int:
    """Tabular length of a Hijri month: 30 for odd months, 29 for even, 30 for a leap Dhul Hijjah."""
    start = hijri_to_julian_day(HijriDate(year, month, 1))
    if month == 12:
        following = HijriDate(year + 1, 1, 1)
    else:
        following = HijriDate(year, month + 1, 1)
    return int(hijri_to_julian_day(following) - start)


def month_name(
    month: int, lang: str = "en", strictness: Strictness = Strictness.LENIENT
) -> str:
    """Hijri month name in English or Arabic.

    Args:
        month: Month number (1-12).
        lang: 'ar' for Arabic, anything else for English.
        strictness: LENIENT returns "" for an unknown month; STRICT raises.

    Raises:
        UnknownMonthError: Month outside 1-12 under Strictness.STRICT.
    """
    entry = HIJRI_MONTHS.get(int(month))
    if entry is None:
        if strictness is Strictness.STRICT:
            raise UnknownMonthError(month)
        return ""
    return entry.ar if lang == "ar" else entry.en


def to_arabic_numerals(value: int | str) -> str:
    """Replace ASCII digits with Arabic-Indic digits; everything else passes through."""
    return str(value).translate(_ARABIC_DIGITS)


def format_date(day: int, month: int, year: int, lang: str = "en") -> str:
    """Format a Hijri date for display.

    English: "12 Ramadan 1447 AH". Arabic: "١٢ رمضان ١٤٤٧ هـ".
    """
    name = month_name(month, lang)
    if lang == "ar":
        return (
            f"{to_arabic_numerals(day)} {name} {to_arabic_numerals(year)} "
            f"{t('era_suffix', 'ar')}"
        )
    return f"{int(day)} {name} {int(year)} {t('era_suffix', 'en')}"


def year_calendar(year: int) -> tuple[HijriMonth, ...]:
    """The twelve months of a Hijri year with estimated Gregorian start dates.

    Args:
        year: Hijri year.

    Returns:
        Tuple of HijriMonth, Muharram first.
    """
    return tuple(
        HijriMonth(
            year=year,
            month=m,
            name_en=HIJRI_MONTHS[m].en,
            name_ar=HIJRI_MONTHS[m].ar,
            gregorian_start=hijri_to_gregorian(HijriDate(year, m, 1)),
            days=month_length(year, m),
        )
        for m in HIJRI_MONTHS
    )


def next_significant_month(current: HijriDate) -> tuple[int, int]:
    """Next Ramadan or Dhul Hijjah strictly after the current month.

    Returns:
        (hijri_year, month); next year's Ramadan once Dhul Hijjah has begun.
    """
    for month in _SIGNIFICANT_MONTHS:
        if month > current.month:
            return current.year, month
    return current.year + 1, RAMADAN
