"""Sonos Gateway models"""

from sonos_gateway.models.base_models import DetailedHealthResponse, HealthResponse
from sonos_gateway.models.sonos import PlayTrackRequest, SonosResponse, SonosSpeaker, SonosState

__all__ = [
    "DetailedHealthResponse",
    "HealthResponse",
    "PlayTrackRequest",
    "SonosResponse",
    "SonosSpeaker",
    "SonosState",
]
