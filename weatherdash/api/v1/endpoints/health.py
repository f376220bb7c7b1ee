"""Health check endpoints."""

from fastapi import APIRouter, status
from pydantic import BaseModel

from weatherdash.config import settings

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    version: str
    environment: str


class DetailedHealthResponse(BaseModel):
    """Detailed health check response model."""

    status: str
    version: str
    environment: str
    openweathermap: str
    airvisual: str


@router.get(
    "/health",
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
    tags=["Health"],
    summary="Basic health check",
)
async def health_check() -> HealthResponse:
    """
    Basic health check endpoint.

    Returns:
        Basic health status
    """
    return HealthResponse(
        status="healthy",
        version=settings.app_version,
        environment=settings.environment,
    )


@router.get(
    "/health/detailed",
    response_model=DetailedHealthResponse,
    status_code=status.HTTP_200_OK,
    tags=["Health"],
    summary="Detailed health check",
)
async def detailed_health_check() -> DetailedHealthResponse:
    """
    Health check that also reports which keyed providers are usable.

    Open-Meteo needs no key and is always available; the dashboard falls
    back to the mock endpoints when a keyed provider is missing.

    Returns:
        Detailed health status including provider configuration
    """
    openweather_ok = settings.has_openweather_key
    airvisual_ok = settings.has_airvisual_key

    return DetailedHealthResponse(
        status="healthy" if openweather_ok and airvisual_ok else "degraded",
        version=settings.app_version,
        environment=settings.environment,
        openweathermap="configured" if openweather_ok else "missing_api_key",
        airvisual="configured" if airvisual_ok else "missing_api_key",
    )


@router.get(
    "/ping",
    status_code=status.HTTP_200_OK,
    tags=["Health"],
    summary="Simple ping",
)
async def ping() -> dict[str, str]:
    """
    Simple ping endpoint.

    Returns:
        Pong response
    """
    return {"message": "pong"}
