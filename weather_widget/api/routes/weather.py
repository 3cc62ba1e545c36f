from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from collections.abc import Callable
from typing import Annotated, TypeVar

from fastapi import APIRouter, Depends, HTTPException, Query, status

from weather_widget.api.deps import get_forecast_client, get_geocoding_client
from weather_widget.clients.errors import TransportError
from weather_widget.clients.open_meteo import ForecastClient, GeocodingClient
from weather_widget.schemas.weather import (
    CurrentRead,
    DailyRead,
    ForecastResponse,
    HourlyRead,
    LocationRead,
    LocationSearchResponse,
    UnitsRead,
)
from weather_widget.services.dates import DateFormatter
from weather_widget.services.forecast import hourly_window
from weather_widget.services.icons import icon_for
from weather_widget.services.presenter import MAX_DAY_INDEX
from weather_widget.services.units import (
    PrecipitationUnit,
    TemperatureUnit,
    UnitsState,
    WindSpeedUnit,
    to_precipitation,
    to_temperature,
    to_wind_speed,
)

logger = logging.getLogger(__name__)

U = TypeVar("U")

router = APIRouter()


def _convert(fn: Callable[[float, U], float], value: float | None, unit: U) -> float | None:
    return None if value is None else fn(value, unit)


@router.get("/locations/search", response_model=LocationSearchResponse)
def search_location(
    geocoder: Annotated[GeocodingClient, Depends(get_geocoding_client)],
    name: Annotated[str, Query(min_length=1, max_length=200)],
) -> LocationSearchResponse:
    query = name.strip()
    if not query:
        return LocationSearchResponse(query=query, location=None)
    try:
        location = geocoder.resolve(query)
    except TransportError as e:
        logger.warning("Geocoding %r failed: %s", query, e)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Geocoding provider unavailable",
        ) from e
    return LocationSearchResponse(
        query=query,
        location=LocationRead.model_validate(location.__dict__) if location else None,
    )


@router.get("/forecast", response_model=ForecastResponse)
def forecast(
    forecaster: Annotated[ForecastClient, Depends(get_forecast_client)],
    latitude: Annotated[float, Query(ge=-90, le=90)],
    longitude: Annotated[float, Query(ge=-180, le=180)],
    temperature: TemperatureUnit = TemperatureUnit.CELSIUS,
    wind_speed: WindSpeedUnit = WindSpeedUnit.KMH,
    precipitation: PrecipitationUnit = PrecipitationUnit.MM,
    day: Annotated[int, Query(ge=0, le=MAX_DAY_INDEX)] = 0,
) -> ForecastResponse:
    try:
        data = forecaster.fetch(latitude, longitude)
    except TransportError as e:
        logger.warning("Forecast for (%s, %s) failed: %s", latitude, longitude, e)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Forecast provider unavailable",
        ) from e

    units = UnitsState(temperature=temperature, wind_speed=wind_speed, precipitation=precipitation)
    dates = DateFormatter()
    local_now = datetime.now(tz=timezone.utc).astimezone(
        timezone(timedelta(seconds=data.utc_offset_seconds))
    )
    current = data.current

    return ForecastResponse(
        latitude=latitude,
        longitude=longitude,
        timezone=data.timezone,
        units=UnitsRead(
            temperature=units.temperature,
            wind_speed=units.wind_speed,
            precipitation=units.precipitation,
            system=units.system,
        ),
        day=day,
        current=CurrentRead(
            time=current.time,
            temperature=_convert(to_temperature, current.temperature, units.temperature),
            apparent_temperature=_convert(
                to_temperature, current.apparent_temperature, units.temperature
            ),
            humidity=current.humidity,
            precipitation=_convert(to_precipitation, current.precipitation, units.precipitation),
            wind_speed=_convert(to_wind_speed, current.wind_speed, units.wind_speed),
            weather_code=current.weather_code,
            icon=icon_for(current.weather_code),
        ),
        daily=[
            DailyRead(
                date=date,
                weekday=dates.full_day_label(date),
                weather_code=code,
                icon=icon_for(code),
                temperature_max=_convert(to_temperature, t_max, units.temperature),
                temperature_min=_convert(to_temperature, t_min, units.temperature),
            )
            for date, code, t_max, t_min in zip(
                data.daily.time,
                data.daily.weather_code,
                data.daily.temperature_max,
                data.daily.temperature_min,
            )
        ],
        hourly=[
            HourlyRead(
                time=entry.time,
                temperature=_convert(to_temperature, entry.temperature, units.temperature),
                weather_code=entry.weather_code,
                icon=icon_for(entry.weather_code),
            )
            for entry in hourly_window(data.hourly, day, local_now.hour)
        ],
    )
