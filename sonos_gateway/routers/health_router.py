"""Health endpoints."""

from datetime import UTC, datetime

import httpx
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from sonos_gateway import __version__
from sonos_gateway.dependencies import get_http_client, get_sonos_service
from sonos_gateway.models import DetailedHealthResponse, HealthResponse
from sonos_gateway.services.sonos_service import SonosService

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Basic health check endpoint.

    For dependency status, use `/health/ready`.
    """
    return HealthResponse(status="ok", version=__version__)


@router.get("/health/ready", response_model=DetailedHealthResponse)
async def readiness_check(
    client: httpx.AsyncClient = Depends(get_http_client),
    sonos: SonosService = Depends(get_sonos_service),
):
    """Readiness probe - can the application serve traffic?

    Checks:
    - HTTP client initialization
    - Sonos control API reachability (GET /zones)

    **Returns:**
    - 200: Application is ready to serve requests
    - 503: Sonos control API is not reachable
    """
    checks = {"http_client": "ok" if client else "failed"}

    reachable = await sonos.is_reachable()
    checks["sonos_api"] = "ok" if reachable else f"unreachable: {sonos.config.api_url}"

    all_healthy = all(result == "ok" for result in checks.values())
    status_code = 200 if all_healthy else 503

    return JSONResponse(
        status_code=status_code,
        content=DetailedHealthResponse(
            status="healthy" if all_healthy else "unhealthy",
            version=__version__,
            timestamp=datetime.now(UTC),
            checks=checks,
        ).model_dump(mode="json"),
    )
