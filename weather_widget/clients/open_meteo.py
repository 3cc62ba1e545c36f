from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, TypeVar

import httpx

from weather_widget.clients.errors import TransportError
from weather_widget.core.config import (
    FORECAST_DAYS,
    OPEN_METEO_FORECAST_URL,
    OPEN_METEO_GEOCODING_URL,
)
from weather_widget.models.weather import (
    CurrentConditions,
    DailySeries,
    ForecastData,
    HourlySeries,
    Location,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

DAILY_FIELDS = "weather_code,temperature_2m_max,temperature_2m_min"
HOURLY_FIELDS = "temperature_2m,weather_code"
CURRENT_FIELDS = (
    "temperature_2m,relative_humidity_2m,apparent_temperature,"
    "precipitation,wind_speed_10m,weather_code,rain"
)


class _OpenMeteoClient:
    def __init__(
        self,
        *,
        base_url: str,
        user_agent: str,
        timeout_seconds: float,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._base_url = base_url
        self._client = httpx.Client(
            timeout=timeout_seconds,
            headers={
                "User-Agent": user_agent,
                "Accept": "application/json",
            },
            transport=transport,
        )

    def close(self) -> None:
        self._client.close()

    def _get_json(self, params: dict[str, Any]) -> Any:
        try:
            resp = self._client.get(self._base_url, params=params)
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.warning("Open-Meteo returned HTTP %s for %s", status, self._base_url)
            raise TransportError(f"HTTP error {status}", status_code=status) from e
        except httpx.HTTPError as e:
            logger.warning("Open-Meteo request to %s failed: %s", self._base_url, e)
            raise TransportError(f"Request failed: {e}") from e
        try:
            return resp.json()
        except ValueError as e:
            raise TransportError("Response body is not valid JSON") from e


class GeocodingClient(_OpenMeteoClient):
    def __init__(
        self,
        *,
        user_agent: str,
        timeout_seconds: float,
        base_url: str = OPEN_METEO_GEOCODING_URL,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        super().__init__(
            base_url=base_url,
            user_agent=user_agent,
            timeout_seconds=timeout_seconds,
            transport=transport,
        )

    def resolve(self, query: str) -> Location | None:
        if not query or not query.strip():
            raise ValueError("query must be non-empty")

        payload = self._get_json({"name": query, "language": "en", "format": "json"})
        results = payload.get("results") if isinstance(payload, dict) else None
        if not isinstance(results, list) or not results:
            logger.info("No geocoding match for %r", query)
            return None

        first = results[0]
        try:
            return Location(
                name=str(first["name"]),
                latitude=float(first["latitude"]),
                longitude=float(first["longitude"]),
                admin_region=_str_or_none(first.get("admin1")),
                country=_str_or_none(first.get("country")),
                timezone=_str_or_none(first.get("timezone")),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise TransportError("Unexpected geocoding result shape") from e


class ForecastClient(_OpenMeteoClient):
    def __init__(
        self,
        *,
        user_agent: str,
        timeout_seconds: float,
        base_url: str = OPEN_METEO_FORECAST_URL,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        super().__init__(
            base_url=base_url,
            user_agent=user_agent,
            timeout_seconds=timeout_seconds,
            transport=transport,
        )

    def fetch(self, latitude: float, longitude: float) -> ForecastData:
        payload = self._get_json(
            {
                "latitude": latitude,
                "longitude": longitude,
                "daily": DAILY_FIELDS,
                "hourly": HOURLY_FIELDS,
                "current": CURRENT_FIELDS,
                "timezone": "auto",
                "forecast_days": FORECAST_DAYS,
            }
        )
        try:
            return self._parse_forecast(payload)
        except (KeyError, TypeError, ValueError) as e:
            raise TransportError("Unexpected forecast response shape") from e

    @staticmethod
    def _parse_forecast(payload: dict[str, Any]) -> ForecastData:
        current = payload["current"]
        daily = payload["daily"]
        hourly = payload["hourly"]

        return ForecastData(
            current=CurrentConditions(
                time=_time(current["time"]),
                temperature=_float_or_none(current["temperature_2m"]),
                apparent_temperature=_float_or_none(current["apparent_temperature"]),
                humidity=_float_or_none(current["relative_humidity_2m"]),
                precipitation=_float_or_none(current["precipitation"]),
                wind_speed=_float_or_none(current["wind_speed_10m"]),
                weather_code=_int_or_none(current["weather_code"]),
                rain=_float_or_none(current.get("rain")),
            ),
            daily=DailySeries(
                time=_sequence(daily, "time", _time),
                weather_code=_sequence(daily, "weather_code", _int_or_none),
                temperature_max=_sequence(daily, "temperature_2m_max", _float_or_none),
                temperature_min=_sequence(daily, "temperature_2m_min", _float_or_none),
            ),
            hourly=HourlySeries(
                time=_sequence(hourly, "time", _time),
                temperature=_sequence(hourly, "temperature_2m", _float_or_none),
                weather_code=_sequence(hourly, "weather_code", _int_or_none),
            ),
            timezone=str(payload.get("timezone") or "GMT"),
            utc_offset_seconds=int(payload.get("utc_offset_seconds") or 0),
        )


def _sequence(section: dict[str, Any], key: str, cast: Callable[[Any], T]) -> tuple[T, ...]:
    values = section[key]
    if not isinstance(values, list):
        raise ValueError(f"Expected a list for {key!r}")
    return tuple(cast(v) for v in values)


def _time(v: Any) -> str:
    if not isinstance(v, str) or not v:
        raise ValueError(f"Invalid timestamp {v!r}")
    return v


def _float_or_none(v: Any) -> float | None:
    try:
        if v is None:
            return None
        return float(v)
    except (TypeError, ValueError):
        return None


def _int_or_none(v: Any) -> int | None:
    value = _float_or_none(v)
    return None if value is None else int(value)


def _str_or_none(v: Any) -> str | None:
    if v is None:
        return None
    if isinstance(v, str):
        return v
    return str(v)
