import datetime

import pytest

from hilal.clock import FixedClock
from hilal.hijri import (
    format_date,
    gregorian_to_hijri,
    hijri_to_gregorian,
    hijri_to_julian_day,
    is_leap_year,
    julian_day_to_gregorian,
    julian_day_to_hijri,
    month_length,
    month_name,
    next_significant_month,
    to_arabic_numerals,
    today_hijri,
    year_calendar,
)
from hilal.models import CalendarDate, HijriDate
from hilal.policy import Strictness, UnknownMonthError


@pytest.mark.parametrize(
    "gregorian, hijri",
    [
        (CalendarDate(2025, 6, 27), HijriDate(1447, 1, 1)),
        (CalendarDate(2026, 2, 12), HijriDate(1447, 8, 24)),
        (CalendarDate(2026, 2, 18), HijriDate(1447, 9, 1)),
        (CalendarDate(2025, 3, 1), HijriDate(1446, 9, 1)),
        (CalendarDate(2024, 3, 11), HijriDate(1445, 9, 1)),
        (CalendarDate(2024, 1, 1), HijriDate(1445, 6, 19)),
        (CalendarDate(2000, 1, 1), HijriDate(1420, 9, 24)),
    ],
)
def test_known_dates(gregorian, hijri):
    assert gregorian_to_hijri(gregorian) == hijri
    assert hijri_to_gregorian(hijri) == gregorian


def test_hijri_julian_day_uses_midnight_convention():
    assert hijri_to_julian_day(HijriDate(1447, 1, 1)) == 2460853.5
    assert julian_day_to_hijri(2460853.5) == HijriDate(1447, 1, 1)


def test_julian_day_to_gregorian_switches_calendar_at_reform():
    assert julian_day_to_gregorian(2299160.5) == CalendarDate(1582, 10, 15)
    assert julian_day_to_gregorian(2299159.5) == CalendarDate(1582, 10, 4)


def test_gregorian_round_trip_1900_to_2100():
    day = datetime.date(1900, 1, 1)
    end = datetime.date(2100, 12, 31)
    while day <= end:
        d = CalendarDate.from_date(day)
        assert hijri_to_gregorian(gregorian_to_hijri(d)) == d
        day += datetime.timedelta(days=3)


def test_hijri_round_trip_1300_to_1500():
    for year in range(1300, 1501):
        for month in range(1, 13):
            for day in range(1, month_length(year, month) + 1):
                h = HijriDate(year, month, day)
                assert gregorian_to_hijri(hijri_to_gregorian(h)) == h


def test_consecutive_days_advance_by_one_hijri_day():
    day = datetime.date(2020, 1, 1)
    prev = gregorian_to_hijri(CalendarDate.from_date(day))
    for _ in range(3 * 365):
        day += datetime.timedelta(days=1)
        cur = gregorian_to_hijri(CalendarDate.from_date(day))
        if cur.day == 1:
            assert prev.day in (29, 30)
            assert (cur.year, cur.month) == (
                (prev.year + 1, 1) if prev.month == 12 else (prev.year, prev.month + 1)
            )
        else:
            assert (cur.year, cur.month, cur.day) == (prev.year, prev.month, prev.day + 1)
        prev = cur


@pytest.mark.parametrize(
    "year, leap",
    [
        (1440, False),
        (1441, False),
        (1442, True),
        (1443, False),
        (1444, False),
        (1445, True),
        (1446, False),
        (1447, True),
        (1448, False),
        (1449, False),
        (1450, True),
    ],
)
def test_leap_years_and_year_length(year, leap):
    assert is_leap_year(year) is leap
    assert sum(month_length(year, m) for m in range(1, 13)) == (355 if leap else 354)


def test_month_lengths_alternate():
    assert [month_length(1446, m) for m in range(1, 13)] == [30, 29] * 6
    assert month_length(1447, 12) == 30


def test_month_name():
    assert month_name(9) == "Ramadan"
    assert month_name(9, "ar") == "رمضان"
    assert month_name(13) == ""


def test_month_name_strict_rejects_unknown_month():
    with pytest.raises(UnknownMonthError):
        month_name(0, strictness=Strictness.STRICT)


def test_to_arabic_numerals():
    assert to_arabic_numerals(1447) == "١٤٤٧"
    assert to_arabic_numerals("12/9") == "١٢/٩"


def test_format_date():
    assert format_date(12, 9, 1447) == "12 Ramadan 1447 AH"
    assert format_date(12, 9, 1447, "ar") == "١٢ رمضان ١٤٤٧ هـ"


def test_year_calendar():
    months = year_calendar(1447)
    assert len(months) == 12
    assert months[0].name_en == "Muharram"
    assert months[0].gregorian_start == CalendarDate(2025, 6, 27)
    assert months[8].name_ar == "رمضان"
    assert months[8].gregorian_start == CalendarDate(2026, 2, 18)
    assert sum(m.days for m in months) == 355


@pytest.mark.parametrize(
    "current, expected",
    [
        (HijriDate(1447, 8, 24), (1447, 9)),
        (HijriDate(1447, 9, 5), (1447, 12)),
        (HijriDate(1447, 11, 29), (1447, 12)),
        (HijriDate(1447, 12, 1), (1448, 9)),
    ],
)
def test_next_significant_month(current, expected):
    assert next_significant_month(current) == expected


def test_today_hijri_uses_injected_clock():
    clock = FixedClock(datetime.datetime(2026, 2, 12, 10, 0, tzinfo=datetime.timezone.utc))
    assert today_hijri(clock) == HijriDate(1447, 8, 24)
