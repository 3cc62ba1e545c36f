"""Measurement units: selections, the derived system label and conversions.

Provider values always arrive in metric base units (degrees Celsius, km/h and
millimetres); conversion happens only when displaying them.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TemperatureUnit(str, Enum):
    CELSIUS = "celsius"
    FAHRENHEIT = "fahrenheit"


class WindSpeedUnit(str, Enum):
    KMH = "kmh"
    MPH = "mph"


class PrecipitationUnit(str, Enum):
    MM = "mm"
    INCHES = "inches"


class UnitSystem(str, Enum):
    METRIC = "metric"
    IMPERIAL = "imperial"


class UnitCategory(str, Enum):
    TEMPERATURE = "temperature"
    WIND_SPEED = "wind_speed"
    PRECIPITATION = "precipitation"


UNIT_TYPES: dict[UnitCategory, type[Enum]] = {
    UnitCategory.TEMPERATURE: TemperatureUnit,
    UnitCategory.WIND_SPEED: WindSpeedUnit,
    UnitCategory.PRECIPITATION: PrecipitationUnit,
}

IMPERIAL_UNITS = frozenset(
    {TemperatureUnit.FAHRENHEIT, WindSpeedUnit.MPH, PrecipitationUnit.INCHES}
)

MPH_PER_KMH = 0.621371
INCHES_PER_MM = 0.0393701


def to_temperature(celsius: float, target: TemperatureUnit) -> float:
    if target is TemperatureUnit.FAHRENHEIT:
        return celsius * 9 / 5 + 32
    return celsius


def to_wind_speed(kmh: float, target: WindSpeedUnit) -> float:
    if target is WindSpeedUnit.MPH:
        return kmh * MPH_PER_KMH
    return kmh


def to_precipitation(mm: float, target: PrecipitationUnit) -> float:
    if target is PrecipitationUnit.INCHES:
        return mm * INCHES_PER_MM
    return mm


def category_for(value: str) -> UnitCategory:
    """Return the category a unit value belongs to, e.g. ``"mph"`` -> wind speed."""
    for category, unit_type in UNIT_TYPES.items():
        if value in {u.value for u in unit_type}:
            return category
    raise ValueError(f"Unknown unit {value!r}")


@dataclass
class UnitsState:
    temperature: TemperatureUnit = TemperatureUnit.CELSIUS
    wind_speed: WindSpeedUnit = WindSpeedUnit.KMH
    precipitation: PrecipitationUnit = PrecipitationUnit.MM
    system: UnitSystem = UnitSystem.METRIC

    def __post_init__(self) -> None:
        self._recompute_system()

    def set_unit(self, category: UnitCategory | str, value: str) -> None:
        category = UnitCategory(category)
        try:
            unit = UNIT_TYPES[category](value)
        except ValueError as e:
            raise ValueError(f"{value!r} is not a {category.value} unit") from e
        setattr(self, category.value, unit)
        self._recompute_system()

    def switch_to_imperial(self) -> None:
        self.temperature = TemperatureUnit.FAHRENHEIT
        self.wind_speed = WindSpeedUnit.MPH
        self.precipitation = PrecipitationUnit.INCHES
        self.system = UnitSystem.IMPERIAL

    def selected(self) -> set[str]:
        return {self.temperature.value, self.wind_speed.value, self.precipitation.value}

    def _recompute_system(self) -> None:
        units = (self.temperature, self.wind_speed, self.precipitation)
        if any(u in IMPERIAL_UNITS for u in units):
            self.system = UnitSystem.IMPERIAL
        else:
            self.system = UnitSystem.METRIC
