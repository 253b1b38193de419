"""Main FastAPI application entry point."""

import os
from pathlib import Path

from dotenv import load_dotenv

from sonos_gateway.core.app_factory import create_app
from sonos_gateway.logging_config import setup_logging

# Load environment variables from .env file
load_dotenv(Path(__file__).parent.parent / ".env")

# Configure structured logging (JSON to file + console)
log_level = os.getenv("LOG_LEVEL", "INFO")
setup_logging(log_level)

# Create application
app = create_app()


@app.get("/")
async def root():
    """Root endpoint."""
    return {"message": "Sonos Gateway API", "docs": "/docs"}


def run() -> None:
    """Run the gateway with uvicorn using configured host and port."""
    import uvicorn

    from sonos_gateway.config import get_settings

    settings = get_settings()
    uvicorn.run(
        "sonos_gateway.main:app",
        host=settings.api_host,
        port=settings.api_port,
    )


if __name__ == "__main__":
    run()
