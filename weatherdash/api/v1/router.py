"""API v1 router configuration."""

from fastapi import APIRouter

from weatherdash.api.v1.endpoints import air_quality, health, mock, weather

api_router = APIRouter()

# Include routers
api_router.include_router(health.router, tags=["Health"])
api_router.include_router(weather.router, prefix="/weather", tags=["Weather"])
api_router.include_router(air_quality.router, prefix="/air-quality", tags=["Air Quality"])
api_router.include_router(mock.router, prefix="/mock", tags=["Mock"])
