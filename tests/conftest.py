from __future__ import annotations

from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from weather_widget.api import deps
from weather_widget.core.config import Settings
from weather_widget.factory import create_app
from weather_widget.services.presenter import Presenter
from tests.fakes import (
    FakeForecastClient,
    FakeGeocodingClient,
    InlineExecutor,
    ManualScheduler,
    RecordingView,
)


@pytest.fixture()
def settings() -> Settings:
    return Settings(
        _env_file=None,
        env="test",
        debug=True,
        docs_enabled=False,
        secret_key="test_secret_key_must_be_32_chars_minimum",
        cors_origins=["http://localhost"],
        trusted_hosts=["testserver", "localhost"],
        user_agent="test-agent",
        timeout_seconds=1.0,
        search_loader_delay_seconds=0.0,
        max_sessions=10,
    )


@pytest.fixture()
def geocoder() -> FakeGeocodingClient:
    return FakeGeocodingClient()


@pytest.fixture()
def forecaster() -> FakeForecastClient:
    return FakeForecastClient()


@pytest.fixture()
def client(
    settings: Settings, geocoder: FakeGeocodingClient, forecaster: FakeForecastClient
) -> TestClient:
    app = create_app(settings)
    executor = InlineExecutor()
    app.dependency_overrides[deps.get_geocoding_client] = lambda: geocoder
    app.dependency_overrides[deps.get_forecast_client] = lambda: forecaster
    app.dependency_overrides[deps.get_search_executor] = lambda: executor
    with TestClient(app) as client:
        yield client


@pytest.fixture()
def now() -> datetime:
    return datetime(2026, 10, 17, 14, 30, tzinfo=timezone.utc)


@pytest.fixture()
def view() -> RecordingView:
    return RecordingView()


@pytest.fixture()
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture()
def presenter(
    view: RecordingView,
    geocoder: FakeGeocodingClient,
    forecaster: FakeForecastClient,
    scheduler: ManualScheduler,
    now: datetime,
) -> Presenter:
    presenter = Presenter(
        view=view,
        geocoder=geocoder,
        forecaster=forecaster,
        scheduler=scheduler,
        clock=lambda: now,
    )
    presenter.start()
    return presenter
