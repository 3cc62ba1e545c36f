from __future__ import annotations

from datetime import datetime

from weather_widget.models.weather import HourlyEntry, HourlySeries

HOURS_PER_DAY = 24
TODAY_WINDOW_HOURS = 12


def hourly_window(hourly: HourlySeries, day_index: int, current_hour: int) -> list[HourlyEntry]:
    """Select the hourly entries shown for a forecast day.

    For today the window starts at the first hour strictly after ``current_hour``
    (or at midnight when no such hour exists) and spans up to twelve entries.
    Every other day shows its full 24 hours.
    """
    day = hourly.entries(day_index * HOURS_PER_DAY, (day_index + 1) * HOURS_PER_DAY)

    if day_index != 0:
        return day[:HOURS_PER_DAY]

    start = 0
    for i, entry in enumerate(day):
        if datetime.fromisoformat(entry.time).hour > current_hour:
            start = i
            break
    return day[start : start + TODAY_WINDOW_HOURS]
