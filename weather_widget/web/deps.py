from __future__ import annotations

import secrets
from typing import Annotated

from fastapi import Depends, Form, HTTPException, Request

from weather_widget.api.deps import (
    get_forecast_client,
    get_geocoding_client,
    get_settings,
    get_widget_registry,
)
from weather_widget.clients.open_meteo import ForecastClient, GeocodingClient
from weather_widget.core.config import Settings
from weather_widget.services.presenter import Presenter
from weather_widget.web.sessions import Widget, WidgetRegistry
from weather_widget.web.view import HtmlView

SESSION_WIDGET_KEY = "widget_id"
CSRF_TOKEN_KEY = "csrf_token"


def ensure_csrf_token(request: Request) -> str:
    token = request.session.get(CSRF_TOKEN_KEY)
    if not isinstance(token, str) or not token:
        token = secrets.token_urlsafe(32)
        request.session[CSRF_TOKEN_KEY] = token
    return token


def validate_csrf_token(request: Request, csrf_token: str) -> None:
    expected = request.session.get(CSRF_TOKEN_KEY)
    if not isinstance(expected, str) or not secrets.compare_digest(expected, csrf_token):
        raise HTTPException(status_code=400, detail="Invalid CSRF token")


def csrf_protect(
    request: Request,
    csrf_token: Annotated[str, Form()],
) -> None:
    validate_csrf_token(request, csrf_token)


def ensure_widget_id(request: Request) -> str:
    widget_id = request.session.get(SESSION_WIDGET_KEY)
    if not isinstance(widget_id, str) or not widget_id:
        widget_id = secrets.token_urlsafe(16)
        request.session[SESSION_WIDGET_KEY] = widget_id
    return widget_id


def get_widget(
    request: Request,
    registry: Annotated[WidgetRegistry, Depends(get_widget_registry)],
    geocoder: Annotated[GeocodingClient, Depends(get_geocoding_client)],
    forecaster: Annotated[ForecastClient, Depends(get_forecast_client)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> Widget:
    def _create() -> Widget:
        view = HtmlView()
        presenter = Presenter(
            view=view,
            geocoder=geocoder,
            forecaster=forecaster,
            loader_delay_seconds=settings.search_loader_delay_seconds,
            reset_day_on_search=settings.reset_day_on_search,
        )
        presenter.start()
        return Widget(presenter=presenter, view=view)

    return registry.get_or_create(ensure_widget_id(request), _create)
