from __future__ import annotations

from pydantic import BaseModel, Field

from weather_widget.services.icons import IconId
from weather_widget.services.units import (
    PrecipitationUnit,
    TemperatureUnit,
    UnitSystem,
    WindSpeedUnit,
)


class LocationRead(BaseModel):
    name: str = Field(min_length=1)
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)
    admin_region: str | None = None
    country: str | None = None
    timezone: str | None = None


class LocationSearchResponse(BaseModel):
    query: str
    location: LocationRead | None = None


class UnitsRead(BaseModel):
    temperature: TemperatureUnit
    wind_speed: WindSpeedUnit
    precipitation: PrecipitationUnit
    system: UnitSystem


class CurrentRead(BaseModel):
    time: str
    temperature: float | None = None
    apparent_temperature: float | None = None
    humidity: float | None = Field(default=None, ge=0, le=100)
    precipitation: float | None = None
    wind_speed: float | None = None
    weather_code: int | None = None
    icon: IconId


class DailyRead(BaseModel):
    date: str
    weekday: str
    weather_code: int | None = None
    icon: IconId
    temperature_max: float | None = None
    temperature_min: float | None = None


class HourlyRead(BaseModel):
    time: str
    temperature: float | None = None
    weather_code: int | None = None
    icon: IconId


class ForecastResponse(BaseModel):
    latitude: float
    longitude: float
    timezone: str
    units: UnitsRead
    day: int = Field(ge=0, le=6)
    current: CurrentRead
    daily: list[DailyRead] = Field(default_factory=list)
    hourly: list[HourlyRead] = Field(default_factory=list)
