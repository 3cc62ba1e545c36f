"""Display-ready records built from forecast data and the selected units."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime

from weather_widget.models.weather import CurrentConditions, DailySeries, HourlyEntry, Location
from weather_widget.services.dates import DateFormatter
from weather_widget.services.icons import icon_for, icon_path
from weather_widget.services.units import (
    PrecipitationUnit,
    UnitsState,
    WindSpeedUnit,
    to_precipitation,
    to_temperature,
    to_wind_speed,
)

UNIT_OPTIONS: list[tuple[str, str]] = [
    ("celsius", "Celsius (°C)"),
    ("fahrenheit", "Fahrenheit (°F)"),
    ("kmh", "km/h"),
    ("mph", "mph"),
    ("mm", "Millimeters (mm)"),
    ("inches", "Inches (in)"),
]


@dataclass(frozen=True)
class CurrentDisplay:
    city: str
    region: str | None
    date_label: str
    temperature: str
    icon: str
    icon_alt: str


@dataclass(frozen=True)
class DetailsDisplay:
    feels_like: str
    humidity: str
    wind: str
    precipitation: str


@dataclass(frozen=True)
class DailyItemDisplay:
    day: str
    icon: str
    icon_alt: str
    temperature_max: str
    temperature_min: str


@dataclass(frozen=True)
class DayOption:
    index: int
    label: str
    selected: bool


@dataclass(frozen=True)
class HourlyItemDisplay:
    time: str
    icon: str
    temperature: str


@dataclass(frozen=True)
class UnitOption:
    value: str
    label: str
    selected: bool


@dataclass(frozen=True)
class UnitsDisplay:
    system: str
    options: list[UnitOption]
    wind_symbol: str
    precipitation_symbol: str


MISSING = "--"


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def format_number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def wind_symbol(units: UnitsState) -> str:
    return "mph" if units.wind_speed is WindSpeedUnit.MPH else "km/h"


def precipitation_symbol(units: UnitsState) -> str:
    return "in" if units.precipitation is PrecipitationUnit.INCHES else "mm"


def _degrees(celsius: float | None, units: UnitsState) -> str:
    if celsius is None:
        return f"{MISSING}°"
    return f"{round_half_up(to_temperature(celsius, units.temperature))}°"


def current_display(
    location: Location,
    current: CurrentConditions,
    units: UnitsState,
    dates: DateFormatter,
    now: datetime,
) -> CurrentDisplay:
    return CurrentDisplay(
        city=location.name,
        region=location.admin_region,
        date_label=dates.current_date_label(now),
        temperature=_degrees(current.temperature, units),
        icon=icon_path(icon_for(current.weather_code)),
        icon_alt=f"Weather {current.weather_code}",
    )


def details_display(current: CurrentConditions, units: UnitsState) -> DetailsDisplay:
    wind = MISSING
    if current.wind_speed is not None:
        wind = str(round_half_up(to_wind_speed(current.wind_speed, units.wind_speed)))
    precipitation = MISSING
    if current.precipitation is not None:
        precipitation = format_number(
            to_precipitation(current.precipitation, units.precipitation)
        )
    humidity = MISSING if current.humidity is None else format_number(current.humidity)
    return DetailsDisplay(
        feels_like=_degrees(current.apparent_temperature, units),
        humidity=f"{humidity}%",
        wind=f"{wind} {wind_symbol(units)}",
        precipitation=f"{precipitation} {precipitation_symbol(units)}",
    )


def daily_display(
    daily: DailySeries, units: UnitsState, dates: DateFormatter
) -> list[DailyItemDisplay]:
    return [
        DailyItemDisplay(
            day=dates.short_day_label(daily.time[i]),
            icon=icon_path(icon_for(daily.weather_code[i])),
            icon_alt=f"Weather {daily.weather_code[i]}",
            temperature_max=_degrees(daily.temperature_max[i], units),
            temperature_min=_degrees(daily.temperature_min[i], units),
        )
        for i in range(len(daily))
    ]


def day_options(daily: DailySeries, selected_index: int, dates: DateFormatter) -> list[DayOption]:
    return [
        DayOption(index=i, label=dates.full_day_label(date), selected=i == selected_index)
        for i, date in enumerate(daily.time)
    ]


def hourly_display(
    entries: list[HourlyEntry], units: UnitsState, dates: DateFormatter
) -> list[HourlyItemDisplay]:
    return [
        HourlyItemDisplay(
            time=dates.hour_label(e.time),
            icon=icon_path(icon_for(e.weather_code)),
            temperature=_degrees(e.temperature, units),
        )
        for e in entries
    ]


def units_display(units: UnitsState) -> UnitsDisplay:
    selected = units.selected()
    return UnitsDisplay(
        system=units.system.value,
        options=[
            UnitOption(value=value, label=label, selected=value in selected)
            for value, label in UNIT_OPTIONS
        ],
        wind_symbol=wind_symbol(units),
        precipitation_symbol=precipitation_symbol(units),
    )
