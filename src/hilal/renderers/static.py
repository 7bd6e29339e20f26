"""Matplotlib static PNG renderer for a monthly timetable."""

import calendar
import math
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.figure import Figure

from hilal.i18n import t
from hilal.models import PRAYERS, PrayerTimeSet

_ROOT = Path(__file__).parent.parent.parent.parent

_BG = "#0d1b35"
_GRID_COLOR = "#334466"
_AFTERNOON = ("asr", "maghrib", "isha")
_LINE_COLORS = {
    "fajr": "#7ec8e3",
    "sunrise": "#f0e0b0",
    "dhuhr": "#ffffff",
    "asr": "#c9a96e",
    "maghrib": "#ff9966",
    "isha": "#9999ff",
}


def _month_label(year: int, month: int, lang: str) -> str:
    if lang == "ar":
        return f"{year}-{month:02d}"
    return f"{calendar.month_name[month]} {year}"


def render_timetable_chart(
    timetable: list[PrayerTimeSet], lang: str = "en", chart_size: int = 10
) -> Figure:
    """Render a monthly timetable as one line per event across the month.

    Args:
        timetable: Daily sets of a single month, in day order.
        lang: Label language ('en' or 'ar').
        chart_size: Output image width in inches.

    Returns:
        matplotlib Figure object.
    """
    fig, ax = plt.subplots(figsize=(chart_size, chart_size * 0.6))
    fig.patch.set_facecolor(_BG)
    ax.set_facecolor(_BG)

    days = np.array([times.date.day for times in timetable])
    dhuhr = np.array([times.dhuhr for times in timetable])
    top = 24.0
    for name in PRAYERS:
        hours = np.array([getattr(times, name) for times in timetable])
        if name in _AFTERNOON:
            # Past midnight: plot as 24+ so the line stays continuous
            hours = np.where(hours < dhuhr, hours + 24, hours)
        top = max(top, float(hours.max()))
        ax.plot(days, hours, color=_LINE_COLORS[name], linewidth=1.5, label=t(name, lang))

    first = timetable[0].date
    ax.set_title(
        t("chart_title", lang).format(month=_month_label(first.year, first.month, lang)),
        color="white",
    )
    ax.set_xlabel(t("chart_xlabel", lang), color="#aaaaaa")
    ax.set_ylabel(t("chart_ylabel", lang), color="#aaaaaa")
    top = math.ceil(top)
    ax.set_ylim(0, top)
    ax.set_yticks(range(0, top + 1, 2))
    ax.tick_params(colors="#aaaaaa")
    ax.grid(color=_GRID_COLOR, linewidth=0.5, alpha=0.6)
    for spine in ax.spines.values():
        spine.set_color(_GRID_COLOR)
    ax.legend(loc="upper right", facecolor=_BG, labelcolor="white", fontsize="small")

    return fig


def save_timetable_chart(
    timetable: list[PrayerTimeSet], output_path: Path | None = None, lang: str = "en"
) -> Path:
    """Save a monthly timetable chart as a PNG file.

    Args:
        timetable: Daily sets of a single month.
        output_path: Destination path. Auto-generated under results/ if None.
        lang: Label language.

    Returns:
        Path to the saved file.
    """
    if output_path is None:
        first = timetable[0]
        loc = first.location
        filename = (
            f"timetable__{loc.latitude:.4f}_{loc.longitude:.4f}"
            f"__{first.date.year:04d}_{first.date.month:02d}__{first.method.value}.png"
        )
        output_path = _ROOT / "results" / filename

    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig = render_timetable_chart(timetable, lang=lang)
    fig.savefig(output_path, facecolor=_BG)
    plt.close(fig)
    return output_path
