"""CLI entry point for a city's daily prayer times.

Edit the where/when variables at the top, then run:
    uv run python src/hilal/timetable.py
"""

from dotenv import load_dotenv

load_dotenv()

from hilal.hijri import format_date, gregorian_to_hijri  # noqa: E402
from hilal.i18n import t  # noqa: E402
from hilal.models import PRAYERS, CalendarDate  # noqa: E402
from hilal.places import city_location, get_city  # noqa: E402
from hilal.prayer import monthly_timetable  # noqa: E402
from hilal.qibla import qibla_direction  # noqa: E402
from hilal.remote import AlAdhanClient, prayer_times_with_fallback  # noqa: E402
from hilal.renderers.static import save_timetable_chart  # noqa: E402

where = "auckland"
when = "2026-02-12"

city = get_city(where)
date = CalendarDate.fromisoformat(when)
location = city_location(city, date)

h = gregorian_to_hijri(date)
print(f"{city.name} / {city.name_ar}, {date.isoformat()}")
print(f"{t('label_hijri', 'en')}: {format_date(h.day, h.month, h.year, 'en')}")
print(f"{t('label_hijri', 'ar')}: {format_date(h.day, h.month, h.year, 'ar')}")

with AlAdhanClient() as client:
    times = prayer_times_with_fallback(client, location, date)
clock = times.clock_12h()
for name in PRAYERS:
    print(f"  {t(name, 'en'):<8} {t(name, 'ar'):<7} {clock[name]}")
print(f"  (source: {times.source})")

qibla = qibla_direction(city.latitude, city.longitude)
print(f"{t('label_qibla', 'en')}: {qibla.description('en')}, {qibla.distance_km:.1f} km")

path = save_timetable_chart(monthly_timetable(location, date.year, date.month))
print(f"Saved: {path}")
