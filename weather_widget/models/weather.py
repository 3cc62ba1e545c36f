from __future__ import annotations

from dataclasses import dataclass, fields


@dataclass(frozen=True)
class Location:
    name: str
    latitude: float
    longitude: float
    admin_region: str | None = None
    country: str | None = None
    timezone: str | None = None


@dataclass(frozen=True)
class CurrentConditions:
    time: str
    temperature: float | None
    apparent_temperature: float | None
    humidity: float | None
    precipitation: float | None
    wind_speed: float | None
    weather_code: int | None
    rain: float | None = None


def _check_aligned(series: object) -> None:
    lengths = {f.name: len(getattr(series, f.name)) for f in fields(series)}  # type: ignore[arg-type]
    if len(set(lengths.values())) > 1:
        raise ValueError(f"Parallel sequences differ in length: {lengths}")


@dataclass(frozen=True)
class DailySeries:
    time: tuple[str, ...]
    weather_code: tuple[int | None, ...]
    temperature_max: tuple[float | None, ...]
    temperature_min: tuple[float | None, ...]

    def __post_init__(self) -> None:
        _check_aligned(self)

    def __len__(self) -> int:
        return len(self.time)


@dataclass(frozen=True)
class HourlyEntry:
    time: str
    temperature: float | None
    weather_code: int | None


@dataclass(frozen=True)
class HourlySeries:
    time: tuple[str, ...]
    temperature: tuple[float | None, ...]
    weather_code: tuple[int | None, ...]

    def __post_init__(self) -> None:
        _check_aligned(self)

    def __len__(self) -> int:
        return len(self.time)

    def entries(self, start: int = 0, stop: int | None = None) -> list[HourlyEntry]:
        stop = len(self) if stop is None else min(stop, len(self))
        return [
            HourlyEntry(
                time=self.time[i],
                temperature=self.temperature[i],
                weather_code=self.weather_code[i],
            )
            for i in range(max(start, 0), stop)
        ]


@dataclass(frozen=True)
class ForecastData:
    current: CurrentConditions
    daily: DailySeries
    hourly: HourlySeries
    timezone: str = "GMT"
    utc_offset_seconds: int = 0
