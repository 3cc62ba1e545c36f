from __future__ import annotations

import secrets

from pydantic import AnyHttpUrl, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

OPEN_METEO_GEOCODING_URL = "https://geocoding-api.open-meteo.com/v1/search"
OPEN_METEO_FORECAST_URL = "https://api.open-meteo.com/v1/forecast"
FORECAST_DAYS = 7


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="APP_",
        case_sensitive=False,
    )

    env: str = Field(default="development")
    debug: bool = Field(default=False)
    docs_enabled: bool = Field(default=True)
    log_level: str = Field(default="INFO", pattern=r"^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")

    secret_key: str = Field(default_factory=lambda: secrets.token_urlsafe(32), min_length=32)

    cors_origins: list[str] = Field(default_factory=list)
    trusted_hosts: list[str] = Field(default_factory=lambda: ["localhost", "127.0.0.1"])

    session_cookie: str = Field(default="weather_widget_session", min_length=1, max_length=64)
    session_max_age_seconds: int = Field(default=60 * 60 * 8, ge=60, le=60 * 60 * 24 * 30)
    max_sessions: int = Field(default=1000, ge=1, le=100_000)

    geocoding_url: AnyHttpUrl = Field(default=OPEN_METEO_GEOCODING_URL)
    forecast_url: AnyHttpUrl = Field(default=OPEN_METEO_FORECAST_URL)
    user_agent: str = Field(
        default="weather-widget/0.1 (contact: you@example.com)",
        min_length=3,
        max_length=256,
    )
    timeout_seconds: float = Field(default=10.0, ge=1.0, le=60.0)

    search_loader_delay_seconds: float = Field(default=0.1, ge=0.0, le=5.0)
    search_workers: int = Field(default=8, ge=1, le=64)
    reset_day_on_search: bool = Field(default=False)

    @property
    def is_production(self) -> bool:
        return self.env.lower() == "production"


def load_settings() -> Settings:
    settings = Settings()
    if not settings.cors_origins:
        settings.cors_origins = ["http://localhost:3000", "http://localhost:8000"]
    return settings
