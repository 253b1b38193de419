"""Sonos API routes."""

from fastapi import APIRouter, Depends, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from sonos_gateway.dependencies import get_sonos_service
from sonos_gateway.models import PlayTrackRequest, SonosResponse, SonosSpeaker, SonosState
from sonos_gateway.services.sonos_service import SonosService

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


@router.get(
    "/speakers",
    response_model=list[SonosSpeaker],
    summary="List Sonos speakers",
    description="""
    Lists the zone coordinators reported by node-sonos-http-api.

    Returns an empty array when the control API is unreachable or misbehaves,
    so "no speakers" and "backend down" look the same.

    **Rate Limited:** 60 requests/minute
    """,
)
@limiter.limit("60/minute")
async def list_speakers(
    request: Request,
    sonos: SonosService = Depends(get_sonos_service),
):
    """Get all available Sonos speakers."""
    return await sonos.list_speakers()


@router.get(
    "/{speaker_id}/state",
    response_model=SonosState,
    summary="Get playback state",
    description="""
    Current playback state of one speaker. Unknown speakers and control API
    failures yield `is_playing: false` with every other field null.

    **Rate Limited:** 60 requests/minute
    """,
)
@limiter.limit("60/minute")
async def get_state(
    request: Request,
    speaker_id: str,
    sonos: SonosService = Depends(get_sonos_service),
):
    """Get the playback state of a Sonos speaker."""
    return await sonos.get_state(speaker_id)


@router.post(
    "/play",
    response_model=SonosResponse,
    summary="Play a track",
    description="""
    Plays a track on a speaker using the configured play mode (`cifs` or `clip`).

    Always answers 200; check `success` and `message` for the outcome.

    **Rate Limited:** 60 requests/minute
    """,
    responses={
        200: {
            "description": "Outcome of the play request",
            "content": {
                "application/json": {
                    "example": {"success": True, "message": "Track started playing on Sonos"},
                }
            },
        },
        422: {"description": "Missing speaker_id or track_url"},
    },
)
@limiter.limit("60/minute")
async def play_track(
    request: Request,
    body: PlayTrackRequest,
    sonos: SonosService = Depends(get_sonos_service),
):
    """Play a track on a Sonos speaker."""
    return await sonos.play_track(body.speaker_id, body.track_url)
