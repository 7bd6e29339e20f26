import datetime

import pytest

from hilal.methods import CalculationMethod
from hilal.models import CalendarDate, GeoLocation, PrayerTimeSet
from hilal.schedule import SeasonalIqamah, iqamah_time, next_prayer


@pytest.fixture
def times():
    return PrayerTimeSet.from_clock(
        {
            "fajr": "05:13",
            "sunrise": "06:48",
            "dhuhr": "13:35",
            "asr": "17:20",
            "maghrib": "20:22",
            "isha": "21:51",
        },
        date=CalendarDate(2026, 2, 12),
        location=GeoLocation(-36.8485, 174.7633, timezone_offset_hours=13),
        method=CalculationMethod.MWL,
        source="calculation",
    )


def test_next_prayer_later_today(times):
    nxt = next_prayer(times, datetime.time(12, 0))
    assert nxt.name == "dhuhr"
    assert nxt.time == "13:35"
    assert nxt.minutes_until == 95
    assert not nxt.tomorrow


def test_minutes_until_counts_seconds(times):
    assert next_prayer(times, datetime.time(12, 0, 40)).minutes_until == 94
    assert next_prayer(times, datetime.time(13, 34, 30)).minutes_until == 0
    assert next_prayer(times, datetime.time(22, 0, 30)).minutes_until == 432


def test_event_at_the_current_minute_has_passed(times):
    nxt = next_prayer(times, datetime.datetime(2026, 2, 12, 13, 35, 40))
    assert nxt.name == "asr"


def test_next_prayer_rolls_over_to_fajr(times):
    nxt = next_prayer(times, datetime.time(22, 0))
    assert nxt.name == "fajr"
    assert nxt.tomorrow
    assert nxt.minutes_until == 24 * 60 - 22 * 60 + 5 * 60 + 13


def test_before_fajr_is_still_today(times):
    nxt = next_prayer(times, datetime.time(0, 30))
    assert nxt.name == "fajr"
    assert not nxt.tomorrow
    assert nxt.minutes_until == 283


@pytest.mark.parametrize(
    "adhan, rule, month, expected",
    [
        ("13:35", None, 2, None),
        ("13:35", "", 2, None),
        ("13:35", "13:45", 2, "13:45"),
        ("21:50", "+15", 2, "22:05"),
        ("23:50", "+20", 2, "00:10"),
        ("13:35", SeasonalIqamah(summer="13:45", winter="12:45"), 2, "13:45"),
        ("12:20", SeasonalIqamah(summer="13:45", winter="12:45"), 7, "12:45"),
    ],
)
def test_iqamah_time(adhan, rule, month, expected):
    assert iqamah_time(adhan, rule, month) == expected
