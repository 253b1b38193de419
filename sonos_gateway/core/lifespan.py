"""Application lifespan management."""

import time
from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager
from typing import Any

import httpx
from fastapi import FastAPI

from sonos_gateway import __version__
from sonos_gateway.config import get_settings
from sonos_gateway.logging_config import get_logger, log_with_context
from sonos_gateway.services.sonos_service import SonosService

logger = get_logger(__name__)


async def log_request(request: httpx.Request) -> None:
    """Event hook to log outbound requests."""
    log_with_context(
        logger,
        "info",
        "HTTP Request",
        method=request.method,
        url=str(request.url),
        event_type="http_request",
    )


async def log_response(response: httpx.Response) -> None:
    """Event hook to log responses from the control API."""
    await response.aread()  # Ensure response is read
    log_with_context(
        logger,
        "info",
        "HTTP Response",
        status_code=response.status_code,
        url=str(response.request.url),
        event_type="http_response",
    )


def create_http_client() -> httpx.AsyncClient:
    """Create the shared HTTP client with pooling and granular timeouts."""
    event_hooks: dict[str, list[Callable[..., Any]]] = {
        "request": [log_request],
        "response": [log_response],
    }
    return httpx.AsyncClient(  # nosec B113
        timeout=httpx.Timeout(
            connect=5.0,  # Connection establishment timeout
            read=10.0,  # Read response timeout
            write=5.0,  # Write operation timeout
            pool=5.0,  # Pool checkout timeout
        ),
        limits=httpx.Limits(
            max_keepalive_connections=5,
            max_connections=10,
            keepalive_expiry=30.0,
        ),
        follow_redirects=True,
        event_hooks=event_hooks,
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan - startup and shutdown events.

    Exceptions after yield are re-raised so cleanup still runs.
    """
    app.state.startup_time = time.time()

    log_with_context(
        logger,
        "info",
        "Starting Sonos Gateway application",
        version=__version__,
        event_type="app_startup",
    )

    client = create_http_client()
    app.state.http_client = client
    log_with_context(
        logger,
        "info",
        "HTTP client initialized successfully",
        event_type="http_client_ready",
    )

    settings = get_settings()
    app.state.sonos_service = SonosService(client, settings.sonos_config)
    log_with_context(
        logger,
        "info",
        "Sonos service initialized",
        api_url=settings.sonos_config.api_url,
        event_type="sonos_service_ready",
    )

    try:
        yield
    except Exception as e:
        log_with_context(
            logger,
            "error",
            "Application error during lifespan",
            error=str(e),
            error_type=type(e).__name__,
            event_type="app_error",
        )
        raise
    finally:
        log_with_context(
            logger,
            "info",
            "Shutting down Sonos Gateway application",
            event_type="app_shutdown",
        )

        app.state.sonos_service = None
        await client.aclose()
        app.state.http_client = None
        log_with_context(
            logger,
            "info",
            "HTTP client closed",
            event_type="http_client_cleanup",
        )
