from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from tests.fakes import FakeForecastClient, FakeGeocodingClient


def test_health(client: TestClient) -> None:
    resp = client.get("/api/v1/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_location_search(client: TestClient) -> None:
    resp = client.get("/api/v1/locations/search", params={"name": "Berlin"})
    assert resp.status_code == 200, resp.text
    body = resp.json()
    assert body["query"] == "Berlin"
    assert body["location"]["name"] == "Berlin"
    assert body["location"]["admin_region"] == "State of Berlin"


def test_location_search_no_match(client: TestClient) -> None:
    resp = client.get("/api/v1/locations/search", params={"name": "Atlantis"})
    assert resp.status_code == 200
    assert resp.json()["location"] is None


def test_location_search_blank_skips_provider(
    client: TestClient, geocoder: FakeGeocodingClient
) -> None:
    resp = client.get("/api/v1/locations/search", params={"name": "   "})
    assert resp.status_code == 200
    assert resp.json()["location"] is None
    assert geocoder.calls == []


def test_location_search_provider_down(client: TestClient, geocoder: FakeGeocodingClient) -> None:
    geocoder.fail = True
    resp = client.get("/api/v1/locations/search", params={"name": "Berlin"})
    assert resp.status_code == 503


def test_forecast_metric(client: TestClient) -> None:
    resp = client.get("/api/v1/forecast", params={"latitude": 52.5, "longitude": 13.4, "day": 2})
    assert resp.status_code == 200, resp.text
    body = resp.json()
    assert body["units"] == {
        "temperature": "celsius",
        "wind_speed": "kmh",
        "precipitation": "mm",
        "system": "metric",
    }
    assert body["current"]["temperature"] == 20.0
    assert body["current"]["icon"] == "partly-cloudy"
    assert len(body["daily"]) == 7
    assert body["daily"][0]["weekday"] == "Saturday"
    assert len(body["hourly"]) == 24
    assert body["hourly"][0]["time"] == "2026-10-19T00:00"


def test_forecast_imperial(client: TestClient) -> None:
    resp = client.get(
        "/api/v1/forecast",
        params={
            "latitude": 52.5,
            "longitude": 13.4,
            "temperature": "fahrenheit",
            "wind_speed": "mph",
        },
    )
    assert resp.status_code == 200, resp.text
    body = resp.json()
    assert body["units"]["system"] == "imperial"
    assert body["current"]["temperature"] == pytest.approx(68.0)
    assert body["current"]["wind_speed"] == pytest.approx(6.21371)
    assert body["current"]["precipitation"] == pytest.approx(2.5)
    assert len(body["hourly"]) <= 12


@pytest.mark.parametrize(
    "params",
    [
        {"latitude": 100, "longitude": 0},
        {"latitude": 0, "longitude": 0, "day": 7},
        {"latitude": 0, "longitude": 0, "temperature": "kelvin"},
    ],
)
def test_forecast_validation(client: TestClient, params: dict) -> None:
    assert client.get("/api/v1/forecast", params=params).status_code == 422


def test_forecast_provider_down(client: TestClient, forecaster: FakeForecastClient) -> None:
    forecaster.fail = True
    resp = client.get("/api/v1/forecast", params={"latitude": 0, "longitude": 0})
    assert resp.status_code == 503
