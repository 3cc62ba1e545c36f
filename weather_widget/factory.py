from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import RedirectResponse
from fastapi.staticfiles import StaticFiles
from starlette.middleware.sessions import SessionMiddleware
from starlette.middleware.trustedhost import TrustedHostMiddleware

from weather_widget.api.router import api_router
from weather_widget.clients.open_meteo import ForecastClient, GeocodingClient
from weather_widget.core.config import Settings, load_settings
from weather_widget.core.logging import configure_logging
from weather_widget.web.router import ui_router
from weather_widget.web.sessions import WidgetRegistry

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or load_settings()
    configure_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.geocoding_client = GeocodingClient(
            base_url=str(settings.geocoding_url),
            user_agent=settings.user_agent,
            timeout_seconds=settings.timeout_seconds,
        )
        app.state.forecast_client = ForecastClient(
            base_url=str(settings.forecast_url),
            user_agent=settings.user_agent,
            timeout_seconds=settings.timeout_seconds,
        )
        app.state.search_executor = ThreadPoolExecutor(
            max_workers=settings.search_workers, thread_name_prefix="weather-search"
        )
        logger.info("Weather widget started (env=%s)", settings.env)
        yield
        app.state.search_executor.shutdown(wait=False, cancel_futures=True)
        app.state.geocoding_client.close()
        app.state.forecast_client.close()

    docs_enabled = settings.docs_enabled and not settings.is_production
    app = FastAPI(
        title="Weather Widget",
        version="0.1.0",
        debug=settings.debug,
        docs_url="/docs" if docs_enabled else None,
        redoc_url=None,
        openapi_url="/openapi.json" if docs_enabled else None,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.widget_registry = WidgetRegistry(max_sessions=settings.max_sessions)

    app.add_middleware(GZipMiddleware, minimum_size=1024)
    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.secret_key,
        session_cookie=settings.session_cookie,
        max_age=settings.session_max_age_seconds,
        same_site="lax",
        https_only=settings.is_production,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["Content-Type"],
    )
    if settings.trusted_hosts:
        app.add_middleware(TrustedHostMiddleware, allowed_hosts=settings.trusted_hosts)

    @app.middleware("http")
    async def security_headers(request, call_next):
        response = await call_next(request)
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault("Referrer-Policy", "no-referrer")
        response.headers.setdefault("Cross-Origin-Opener-Policy", "same-origin")
        response.headers.setdefault("Cross-Origin-Resource-Policy", "same-site")
        if settings.is_production:
            response.headers.setdefault(
                "Strict-Transport-Security", "max-age=31536000; includeSubDomains"
            )
        return response

    @app.get("/", include_in_schema=False)
    def root():
        return RedirectResponse("/ui/", status_code=303)

    app.include_router(api_router)
    app.include_router(ui_router)

    static_dir = Path(__file__).resolve().parent / "web" / "static"
    app.mount("/static", StaticFiles(directory=static_dir), name="static")
    return app
