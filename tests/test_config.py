from __future__ import annotations

import pytest
from pydantic import ValidationError

from weather_widget.core.config import FORECAST_DAYS, Settings, load_settings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("APP_CORS_ORIGINS", raising=False)
    settings = Settings(_env_file=None)
    assert str(settings.geocoding_url) == "https://geocoding-api.open-meteo.com/v1/search"
    assert str(settings.forecast_url) == "https://api.open-meteo.com/v1/forecast"
    assert settings.search_loader_delay_seconds == pytest.approx(0.1)
    assert settings.reset_day_on_search is False
    assert len(settings.secret_key) >= 32
    assert not settings.is_production


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("APP_ENV", "production")
    monkeypatch.setenv("APP_RESET_DAY_ON_SEARCH", "true")
    monkeypatch.setenv("APP_TIMEOUT_SECONDS", "5")
    settings = Settings(_env_file=None)
    assert settings.is_production
    assert settings.reset_day_on_search is True
    assert settings.timeout_seconds == 5.0


def test_invalid_values(monkeypatch: pytest.MonkeyPatch) -> None:
    with pytest.raises(ValidationError):
        Settings(_env_file=None, log_level="LOUD")


def test_load_settings_fills_cors(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("APP_CORS_ORIGINS", raising=False)
    monkeypatch.chdir("/")
    assert load_settings().cors_origins == ["http://localhost:3000", "http://localhost:8000"]


def test_forecast_horizon_is_fixed() -> None:
    assert FORECAST_DAYS == 7
    assert "forecast_days" not in Settings.model_fields
