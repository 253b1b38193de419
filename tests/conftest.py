"""Pytest configuration and shared fixtures."""

from collections.abc import Callable
from typing import Any
from unittest.mock import AsyncMock

import httpx
import pytest
from fastapi.testclient import TestClient

from sonos_gateway.config import PlayMode, SonosConfig
from sonos_gateway.main import app as fastapi_app
from sonos_gateway.routers import sonos_router


@pytest.fixture(autouse=True)
def reset_rate_limits():
    """Start every test with an empty rate limit window."""
    sonos_router.limiter.reset()
    yield
    fastapi_app.dependency_overrides.clear()


@pytest.fixture
def test_client():
    """FastAPI test client with lifespan context."""
    with TestClient(fastapi_app) as client:
        yield client


@pytest.fixture
def mock_http_client():
    """Mock httpx.AsyncClient for control API calls."""
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    mock_client.get = AsyncMock()
    mock_client.post = AsyncMock()
    mock_client.aclose = AsyncMock()
    return mock_client


@pytest.fixture
def sonos_config():
    """Default Sonos configuration (CIFS play mode)."""
    return SonosConfig()


@pytest.fixture
def clip_config():
    """Sonos configuration using the clip endpoint."""
    return SonosConfig(play_mode=PlayMode.CLIP)


@pytest.fixture
def make_response() -> Callable[..., httpx.Response]:
    """Build real httpx responses for the mocked client to return."""

    def _make(status_code: int = 200, json: Any = None, text: str | None = None) -> httpx.Response:
        request = httpx.Request("GET", "http://192.168.0.5:5005/")
        if json is not None:
            return httpx.Response(status_code, json=json, request=request)
        return httpx.Response(status_code, text=text or "", request=request)

    return _make


@pytest.fixture
def mock_zones_response():
    """Mock node-sonos-http-api /zones response."""
    return [
        {
            "uuid": "RINCON_000E58000001",
            "coordinator": {
                "uuid": "RINCON_000E58000001",
                "roomName": "Living Room",
                "state": {"volume": 35, "mute": False, "playbackState": "PLAYING"},
            },
            "members": [],
        },
        {
            "uuid": "RINCON_000E58000002",
            "coordinator": {
                "uuid": "RINCON_000E58000002",
                "roomName": "Kitchen",
                "state": {"playbackState": "STOPPED"},
            },
            "members": [],
        },
        {"uuid": "RINCON_000E58000003", "members": []},
        {"uuid": "RINCON_000E58000004", "coordinator": {"uuid": "RINCON_000E58000004"}},
    ]


@pytest.fixture
def mock_state_response():
    """Mock node-sonos-http-api /{room}/state response."""
    return {
        "volume": 35,
        "mute": False,
        "playbackState": "PLAYING",
        "relTime": "0:02:00",
        "currentTrack": {
            "artist": "The Beatles",
            "title": "Yesterday",
            "album": "Help!",
            "duration": "0:04:05",
            "uri": "x-file-cifs://192.168.0.6/mp3/Beatles/Yesterday.mp3",
        },
        "trackNo": 1,
    }
