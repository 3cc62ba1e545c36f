from fastapi import APIRouter

from weather_widget.api.routes import health, weather

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(health.router, tags=["meta"])
api_router.include_router(weather.router, tags=["weather"])
