"""Application factory for creating and configuring the FastAPI app."""

from fastapi import FastAPI

from sonos_gateway import __version__
from sonos_gateway.config import get_settings
from sonos_gateway.core.lifespan import lifespan
from sonos_gateway.core.middleware import setup_middleware
from sonos_gateway.middleware.error_handlers import register_error_handlers
from sonos_gateway.routers import health_router, sonos_router


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    settings = get_settings()

    app = FastAPI(
        title="Sonos Gateway API",
        description="""
        🔊 **Sonos Gateway** - Simple control of Sonos speakers through node-sonos-http-api

        ## 🎵 Playback
        - `GET /api/sonos/speakers` - List speakers (zone coordinators)
        - `GET /api/sonos/{speaker_id}/state` - Current playback state
        - `POST /api/sonos/play` - Play a track on a speaker

        Sonos endpoints never fail because the control API is down: listing returns
        an empty array, state returns "not playing", and play reports `success: false`
        with the reason in `message`.

        ## 📊 Health & Monitoring
        - `/health` - Basic health check
        - `/health/ready` - Readiness probe (is the Sonos control API reachable?)

        ## ⚡ Rate Limits
        - Sonos endpoints: 60 requests/minute per IP
        """,
        version=__version__,
        lifespan=lifespan,
        license_info={
            "name": "MIT",
        },
    )

    setup_middleware(app, settings)

    register_error_handlers(app)

    # Health endpoints
    app.include_router(health_router.router, tags=["health"])

    # API routes
    app.include_router(sonos_router.router, prefix="/api/sonos", tags=["sonos"])

    return app
