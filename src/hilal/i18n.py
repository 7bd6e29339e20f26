"""Simple two-language (en/ar) translation helper."""

_STRINGS: dict[str, dict[str, str]] = {
    "fajr": {
        "en": "Fajr",
        "ar": "الفجر",
    },
    "sunrise": {
        "en": "Sunrise",
        "ar": "الشروق",
    },
    "dhuhr": {
        "en": "Dhuhr",
        "ar": "الظهر",
    },
    "asr": {
        "en": "Asr",
        "ar": "العصر",
    },
    "maghrib": {
        "en": "Maghrib",
        "ar": "المغرب",
    },
    "isha": {
        "en": "Isha",
        "ar": "العشاء",
    },
    "era_suffix": {
        "en": "AH",
        "ar": "هـ",
    },
    "chart_title": {
        "en": "Prayer times — {month}",
        "ar": "مواقيت الصلاة — {month}",
    },
    "chart_xlabel": {
        "en": "Day of month",
        "ar": "اليوم",
    },
    "chart_ylabel": {
        "en": "Local time (hours)",
        "ar": "التوقيت المحلي (ساعات)",
    },
    "label_hijri": {
        "en": "Hijri date (estimated)",
        "ar": "التاريخ الهجري (تقديري)",
    },
    "label_qibla": {
        "en": "Qibla",
        "ar": "القبلة",
    },
}


def t(key: str, lang: str) -> str:
    """Return the translated string for key in lang.

    Falls back to 'en', then to the key itself if not found.
    """
    entry = _STRINGS.get(key)
    if entry is None:
        return key
    return entry.get(lang) or entry.get("en") or key
