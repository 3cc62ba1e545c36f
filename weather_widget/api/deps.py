from __future__ import annotations

from concurrent.futures import Executor

from fastapi import Request

from weather_widget.clients.open_meteo import ForecastClient, GeocodingClient
from weather_widget.core.config import Settings
from weather_widget.web.sessions import WidgetRegistry


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_geocoding_client(request: Request) -> GeocodingClient:
    return request.app.state.geocoding_client


def get_forecast_client(request: Request) -> ForecastClient:
    return request.app.state.forecast_client


def get_widget_registry(request: Request) -> WidgetRegistry:
    return request.app.state.widget_registry


def get_search_executor(request: Request) -> Executor:
    return request.app.state.search_executor
