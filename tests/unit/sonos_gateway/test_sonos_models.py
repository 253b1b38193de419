"""Tests for Sonos Pydantic models."""

import pytest
from pydantic import ValidationError

from sonos_gateway.models import PlayTrackRequest, SonosResponse, SonosSpeaker, SonosState


def test_empty_state():
    state = SonosState.empty()

    assert state.model_dump() == {
        "is_playing": False,
        "artist": None,
        "title": None,
        "position": None,
        "duration": None,
    }


def test_speaker_volume_range():
    assert SonosSpeaker(id="Kitchen", name="Kitchen", volume=100).volume == 100

    with pytest.raises(ValidationError):
        SonosSpeaker(id="Kitchen", name="Kitchen", volume=101)


def test_speaker_available_by_default():
    assert SonosSpeaker(id="Kitchen", name="Kitchen").available is True


def test_play_track_request_requires_values():
    with pytest.raises(ValidationError):
        PlayTrackRequest(speaker_id="", track_url="http://host/audio/a.mp3")

    with pytest.raises(ValidationError):
        PlayTrackRequest(speaker_id="Kitchen")


def test_sonos_response_serialization():
    response = SonosResponse(success=False, message="Connection error: refused")

    assert response.model_dump(mode="json") == {"success": False, "message": "Connection error: refused"}
