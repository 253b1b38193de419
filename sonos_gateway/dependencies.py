"""FastAPI dependencies for dependency injection."""

import httpx
from fastapi import Request

from sonos_gateway.exceptions import ConfigurationException, ErrorCode
from sonos_gateway.services.sonos_service import SonosService


async def get_http_client(request: Request) -> httpx.AsyncClient:
    """
    Get the shared HTTP client from app state.

    Args:
        request: The FastAPI request object.

    Returns:
        The shared AsyncClient instance.

    Raises:
        ConfigurationException: If HTTP client is not initialized.
    """
    client: httpx.AsyncClient | None = getattr(request.app.state, "http_client", None)

    if client is None:
        raise ConfigurationException(
            "HTTP client not initialized",
            code=ErrorCode.CONFIG_MISSING,
            status_code=503,
            details={"component": "http_client"},
        )

    return client


async def get_sonos_service(request: Request) -> SonosService:
    """
    Get the Sonos service from app state.

    Raises:
        ConfigurationException: If the Sonos service is not initialized.
    """
    service: SonosService | None = getattr(request.app.state, "sonos_service", None)

    if service is None:
        raise ConfigurationException(
            "Sonos service not initialized",
            code=ErrorCode.CONFIG_MISSING,
            status_code=503,
            details={"component": "sonos_service"},
        )

    return service
