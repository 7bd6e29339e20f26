import pytest

from hilal.methods import AsrConvention, CalculationMethod
from hilal.models import PRAYERS, CalendarDate, GeoLocation
from hilal.policy import DomainError, PerpetualDarkness, PerpetualDaylight, Strictness
from hilal.prayer import calculate, monthly_timetable, solar_transit, sun_position

AUCKLAND = GeoLocation(-36.8485, 174.7633, timezone_offset_hours=13)
AUCKLAND_TZ = GeoLocation(-36.8485, 174.7633, timezone="Pacific/Auckland")
WELLINGTON = GeoLocation(-41.2865, 174.7762, timezone_offset_hours=12)
MAKKAH = GeoLocation(21.4225, 39.8262, timezone_offset_hours=3)
SVALBARD = GeoLocation(78.2232, 15.6267, timezone_offset_hours=1)

ONE_MINUTE = 1 / 60


def test_auckland_summer_day():
    times = calculate(AUCKLAND, CalendarDate(2026, 2, 12))
    expected = {
        "fajr": "05:13",
        "sunrise": "06:48",
        "dhuhr": "13:35",
        "asr": "17:20",
        "maghrib": "20:22",
        "isha": "21:51",
    }
    for name, hhmm in expected.items():
        h, m = map(int, hhmm.split(":"))
        assert getattr(times, name) == pytest.approx(h + m / 60, abs=2 * ONE_MINUTE)
    assert times.source == "calculation"
    assert times.method is CalculationMethod.MWL


def test_wellington_winter_day():
    times = calculate(WELLINGTON, CalendarDate(2026, 7, 1))
    assert times.fajr == pytest.approx(6 + 8 / 60, abs=2 * ONE_MINUTE)
    assert times.isha == pytest.approx(18 + 36 / 60, abs=2 * ONE_MINUTE)


def test_hanafi_asr_is_later():
    date = CalendarDate(2026, 2, 12)
    standard = calculate(AUCKLAND, date)
    hanafi = calculate(AUCKLAND, date, asr_convention=AsrConvention.HANAFI)
    assert hanafi.asr > standard.asr
    assert hanafi.asr == pytest.approx(18 + 24 / 60, abs=2 * ONE_MINUTE)
    assert hanafi.dhuhr == standard.dhuhr


@pytest.mark.parametrize("location", [AUCKLAND_TZ, MAKKAH, WELLINGTON])
@pytest.mark.parametrize("month", range(1, 13))
def test_events_are_ordered_through_the_year(location, month):
    times = calculate(location, CalendarDate(2026, month, 15))
    values = [getattr(times, name) for name in PRAYERS]
    assert values == sorted(values)
    assert all(0 <= v < 24 for v in values)


@pytest.mark.parametrize("month", [1, 4, 7, 10])
def test_dhuhr_is_near_clock_noon_of_the_meridian(month):
    times = calculate(AUCKLAND, CalendarDate(2026, month, 1))
    mean_noon = 12 + 13 - AUCKLAND.longitude / 15
    assert abs(times.dhuhr - mean_noon) < 20 * ONE_MINUTE


def test_solar_transit_subtracts_equation_of_time():
    sun = sun_position(2461083.5)  # 2026-02-12
    assert sun.equation < 0
    assert solar_transit(sun) > 12


def test_makkah_isha_is_ninety_minutes_after_maghrib():
    times = calculate(MAKKAH, CalendarDate(2026, 2, 12), CalculationMethod.MAKKAH)
    assert times.isha - times.maghrib == pytest.approx(1.5)


def test_shallower_twilight_angles_shorten_the_night():
    date = CalendarDate(2026, 2, 12)
    mwl = calculate(AUCKLAND, date, CalculationMethod.MWL)
    isna = calculate(AUCKLAND, date, CalculationMethod.ISNA)
    assert isna.fajr > mwl.fajr
    assert isna.isha < mwl.isha


def test_iana_timezone_offset_follows_daylight_saving():
    summer = calculate(AUCKLAND_TZ, CalendarDate(2026, 2, 12))
    assert summer.dhuhr == calculate(AUCKLAND, CalendarDate(2026, 2, 12)).dhuhr

    winter_fixed = GeoLocation(-36.8485, 174.7633, timezone_offset_hours=12)
    winter = calculate(AUCKLAND_TZ, CalendarDate(2026, 7, 1))
    assert winter.dhuhr == calculate(winter_fixed, CalendarDate(2026, 7, 1)).dhuhr


def test_polar_summer_is_clamped_by_default():
    times = calculate(SVALBARD, CalendarDate(2026, 6, 21))
    assert all(0 <= v < 24 for v in times.as_dict().values())


def test_polar_summer_raises_when_strict():
    with pytest.raises(PerpetualDaylight) as excinfo:
        calculate(SVALBARD, CalendarDate(2026, 6, 21), strictness=Strictness.STRICT)
    assert excinfo.value.event == "fajr"
    assert excinfo.value.cos_hour < -1


def test_polar_night_raises_when_strict():
    with pytest.raises(PerpetualDarkness) as excinfo:
        calculate(SVALBARD, CalendarDate(2026, 12, 21), strictness=Strictness.STRICT)
    assert excinfo.value.event == "sunrise"
    assert isinstance(excinfo.value, DomainError)


def test_high_latitude_isha_clamps_to_midnight_side():
    london = GeoLocation(51.5074, -0.1278, timezone_offset_hours=1)
    times = calculate(london, CalendarDate(2026, 6, 21))
    assert times.isha == pytest.approx(times.fajr)


@pytest.mark.parametrize("year, month, days", [(2024, 2, 29), (2026, 2, 28), (2026, 7, 31)])
def test_monthly_timetable_covers_every_day(year, month, days):
    table = monthly_timetable(AUCKLAND_TZ, year, month)
    assert len(table) == days
    assert [t.date.day for t in table] == list(range(1, days + 1))
    assert all(t.date.month == month for t in table)
