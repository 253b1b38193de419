"""Pydantic models for Sonos speakers, playback state and operation results."""

from pydantic import BaseModel, Field


class SonosSpeaker(BaseModel):
    """A Sonos speaker (zone coordinator) reported by the control API."""

    id: str = Field(..., description="Unique identifier (the room name)", examples=["Living Room", "Kitchen"])
    name: str = Field(..., description="Display name of the speaker", examples=["Living Room", "Kitchen"])
    available: bool = Field(default=True, description="Whether the speaker is online and available")
    volume: int | None = Field(default=None, ge=0, le=100, description="Current volume (0-100)", examples=[50, 25])


class PlayTrackRequest(BaseModel):
    """Request to play a track on a Sonos speaker."""

    speaker_id: str = Field(..., min_length=1, description="Speaker to play on", examples=["Living Room"])
    track_url: str = Field(
        ...,
        min_length=1,
        description="Media URL of the track",
        examples=["http://192.168.0.5:5050/api/v8/audio/track.mp3"],
    )


class SonosResponse(BaseModel):
    """Result of a mutating Sonos operation."""

    success: bool = Field(..., examples=[True, False])
    message: str = Field(..., examples=["Track started playing on Sonos", "Connection error: ..."])


class SonosState(BaseModel):
    """Current playback state of a Sonos speaker."""

    is_playing: bool = Field(default=False, description="Whether the speaker is currently playing")
    artist: str | None = Field(default=None, description="Current track artist", examples=["The Beatles"])
    title: str | None = Field(default=None, description="Current track title", examples=["Yesterday"])
    position: int | None = Field(default=None, ge=0, description="Playback position in seconds", examples=[120])
    duration: int | None = Field(default=None, ge=0, description="Track duration in seconds", examples=[240])

    @classmethod
    def empty(cls) -> "SonosState":
        """State reported when the speaker cannot be queried."""
        return cls(is_playing=False)
