from __future__ import annotations

import pytest

from weather_widget.services.units import (
    PrecipitationUnit,
    TemperatureUnit,
    UnitCategory,
    UnitSystem,
    UnitsState,
    WindSpeedUnit,
    category_for,
    to_precipitation,
    to_temperature,
    to_wind_speed,
)


def test_temperature_conversion() -> None:
    assert to_temperature(0, TemperatureUnit.FAHRENHEIT) == 32
    assert to_temperature(100, TemperatureUnit.FAHRENHEIT) == 212
    assert to_temperature(-40, TemperatureUnit.FAHRENHEIT) == -40
    for value in (-12.5, 0.0, 21.3):
        assert to_temperature(value, TemperatureUnit.CELSIUS) == value


def test_wind_and_precipitation_conversion() -> None:
    assert to_wind_speed(10, WindSpeedUnit.MPH) == pytest.approx(6.21371)
    assert to_wind_speed(13.7, WindSpeedUnit.KMH) == 13.7
    assert to_precipitation(25.4, PrecipitationUnit.INCHES) == pytest.approx(1.0, rel=1e-4)
    assert to_precipitation(3.2, PrecipitationUnit.MM) == 3.2


def test_defaults_are_metric() -> None:
    units = UnitsState()
    assert units.temperature is TemperatureUnit.CELSIUS
    assert units.wind_speed is WindSpeedUnit.KMH
    assert units.precipitation is PrecipitationUnit.MM
    assert units.system is UnitSystem.METRIC


def test_single_imperial_unit_makes_system_imperial() -> None:
    units = UnitsState()
    units.set_unit(UnitCategory.WIND_SPEED, "mph")
    assert units.wind_speed is WindSpeedUnit.MPH
    assert units.temperature is TemperatureUnit.CELSIUS
    assert units.system is UnitSystem.IMPERIAL

    units.set_unit("wind_speed", "kmh")
    assert units.system is UnitSystem.METRIC


def test_switch_to_imperial_sets_everything() -> None:
    units = UnitsState()
    units.switch_to_imperial()
    assert units.temperature is TemperatureUnit.FAHRENHEIT
    assert units.wind_speed is WindSpeedUnit.MPH
    assert units.precipitation is PrecipitationUnit.INCHES
    assert units.system is UnitSystem.IMPERIAL
    assert units.selected() == {"fahrenheit", "mph", "inches"}


def test_unit_must_match_category() -> None:
    units = UnitsState()
    with pytest.raises(ValueError):
        units.set_unit(UnitCategory.TEMPERATURE, "mph")
    with pytest.raises(ValueError):
        units.set_unit("humidity", "percent")
    assert units.system is UnitSystem.METRIC


def test_category_for() -> None:
    assert category_for("fahrenheit") is UnitCategory.TEMPERATURE
    assert category_for("kmh") is UnitCategory.WIND_SPEED
    assert category_for("inches") is UnitCategory.PRECIPITATION
    with pytest.raises(ValueError):
        category_for("imperial")
