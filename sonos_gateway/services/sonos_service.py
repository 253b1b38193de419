"""Sonos control service backed by node-sonos-http-api.

Every operation is a single request against the configured control API.
Transport errors, non-2xx responses and malformed payloads are absorbed
here and turned into empty or negative results, so callers never see an
exception from this module.
"""

from typing import Any
from urllib.parse import quote, unquote

import httpx

from sonos_gateway.config import PlayMode, SonosConfig
from sonos_gateway.logging_config import get_logger, log_with_context
from sonos_gateway.models.sonos import SonosResponse, SonosSpeaker, SonosState

logger = get_logger(__name__)

AUDIO_PATH_MARKER = "/audio/"
CIFS_SCHEME = "x-file-cifs://"
PLAY_SUCCESS_MESSAGE = "Track started playing on Sonos"
DOT_SEGMENTS = (".", "..")

# httpx.InvalidURL is not an HTTPError subclass
REQUEST_ERRORS = (httpx.HTTPError, httpx.InvalidURL)


def parse_time_to_seconds(value: str) -> int | None:
    """Parse "MM:SS" or "H:MM:SS" into total seconds.

    Returns None for any other shape, including non-numeric fields.
    """
    parts = value.split(":")
    if len(parts) not in (2, 3):
        return None
    if not all(part.isascii() and part.isdigit() for part in parts):
        return None

    numbers = [int(part) for part in parts]
    if len(numbers) == 2:
        minutes, seconds = numbers
        return minutes * 60 + seconds

    hours, minutes, seconds = numbers
    return hours * 3600 + minutes * 60 + seconds


def extract_track_path(track_url: str) -> str:
    """Return the decoded file path that follows "/audio/" in a media URL.

    Example:
        http://localhost:5050/api/v8/audio/Test%2FKinderlieder%2FTest.mp3
        -> Test/Kinderlieder/Test.mp3

    URLs without the marker are returned unchanged.
    """
    _, marker, path = track_url.partition(AUDIO_PATH_MARKER)
    if not marker:
        return track_url
    return unquote(path)


def build_cifs_uri(track_url: str, file_server: str) -> str:
    """Build the x-file-cifs:// URI Sonos uses to stream from a file share."""
    return f"{CIFS_SCHEME}{file_server}/{extract_track_path(track_url)}"


def _speaker_from_zone(zone: Any) -> SonosSpeaker | None:
    """Map one /zones entry to a speaker, or None when it has no room name."""
    if not isinstance(zone, dict):
        return None
    coordinator = zone.get("coordinator")
    if not isinstance(coordinator, dict):
        return None
    room_name = coordinator.get("roomName")
    if not isinstance(room_name, str):
        return None

    state = coordinator.get("state")
    volume = state.get("volume") if isinstance(state, dict) else None
    if isinstance(volume, bool) or not isinstance(volume, int) or not 0 <= volume <= 100:
        volume = None

    return SonosSpeaker(id=room_name, name=room_name, available=True, volume=volume)


def _state_from_payload(data: dict[str, Any]) -> SonosState:
    track = data.get("currentTrack")
    if not isinstance(track, dict):
        track = {}

    artist = track.get("artist")
    title = track.get("title")
    rel_time = data.get("relTime")
    duration = track.get("duration")

    return SonosState(
        is_playing=data.get("playbackState") == "PLAYING",
        artist=artist if isinstance(artist, str) else None,
        title=title if isinstance(title, str) else None,
        position=parse_time_to_seconds(rel_time) if isinstance(rel_time, str) else None,
        duration=parse_time_to_seconds(duration) if isinstance(duration, str) else None,
    )


class SonosService:
    """Client for node-sonos-http-api.

    Holds only the immutable config and a shared HTTP client, so a single
    instance can serve concurrent requests.
    """

    def __init__(self, client: httpx.AsyncClient, config: SonosConfig):
        self._client = client
        self._config = config

    @property
    def config(self) -> SonosConfig:
        return self._config

    def _url(self, *segments: str) -> str:
        return "/".join([self._config.api_url, *segments])

    def _speaker_segment(self, speaker_id: str) -> str | None:
        """Encode a speaker id as one path segment.

        Returns None for "." and "..", which httpx would collapse into a
        different control API endpoint.
        """
        if speaker_id in DOT_SEGMENTS:
            return None
        return quote(speaker_id, safe="")

    async def list_speakers(self) -> list[SonosSpeaker]:
        """Get all zone coordinators known to the control API.

        Returns:
            One SonosSpeaker per zone, or an empty list if the control API
            is unreachable or answers with anything unexpected.
        """
        url = self._url("zones")

        try:
            response = await self._client.get(url)
        except REQUEST_ERRORS as e:
            log_with_context(
                logger,
                "warning",
                "Sonos API unreachable, returning no speakers",
                url=url,
                error=str(e),
                error_type=type(e).__name__,
                event_type="sonos_zones_unreachable",
            )
            return []

        if not response.is_success:
            log_with_context(
                logger,
                "warning",
                "Sonos API returned error for zones",
                url=url,
                status_code=response.status_code,
                event_type="sonos_zones_http_error",
            )
            return []

        try:
            zones = response.json()
        except ValueError as e:
            log_with_context(
                logger,
                "warning",
                "Invalid JSON in zones response",
                url=url,
                error=str(e),
                event_type="sonos_zones_invalid",
            )
            return []

        if not isinstance(zones, list):
            log_with_context(
                logger,
                "warning",
                "Zones response is not a JSON array",
                url=url,
                payload_type=type(zones).__name__,
                event_type="sonos_zones_invalid",
            )
            return []

        speakers = [speaker for speaker in map(_speaker_from_zone, zones) if speaker is not None]
        log_with_context(
            logger,
            "debug",
            "Sonos speakers listed",
            zone_count=len(zones),
            speaker_count=len(speakers),
            event_type="sonos_zones_listed",
        )
        return speakers

    async def get_state(self, speaker_id: str) -> SonosState:
        """Get the current playback state of a speaker.

        Args:
            speaker_id: Room name as known by the control API

        Returns:
            SonosState with whatever fields could be read; an empty
            (not playing) state when the request fails.
        """
        speaker = self._speaker_segment(speaker_id)
        if speaker is None:
            log_with_context(
                logger,
                "warning",
                "Invalid speaker id, returning empty state",
                speaker_id=speaker_id,
                event_type="sonos_state_invalid_speaker",
            )
            return SonosState.empty()

        url = self._url(speaker, "state")

        try:
            response = await self._client.get(url)
        except REQUEST_ERRORS as e:
            log_with_context(
                logger,
                "warning",
                "Sonos API unreachable, returning empty state",
                speaker_id=speaker_id,
                error=str(e),
                error_type=type(e).__name__,
                event_type="sonos_state_unreachable",
            )
            return SonosState.empty()

        if not response.is_success:
            log_with_context(
                logger,
                "warning",
                "Sonos API returned error for state",
                speaker_id=speaker_id,
                status_code=response.status_code,
                event_type="sonos_state_http_error",
            )
            return SonosState.empty()

        try:
            data = response.json()
        except ValueError as e:
            log_with_context(
                logger,
                "warning",
                "Invalid JSON in state response",
                speaker_id=speaker_id,
                error=str(e),
                event_type="sonos_state_invalid",
            )
            return SonosState.empty()

        if not isinstance(data, dict):
            log_with_context(
                logger,
                "warning",
                "State response is not a JSON object",
                speaker_id=speaker_id,
                payload_type=type(data).__name__,
                event_type="sonos_state_invalid",
            )
            return SonosState.empty()

        return _state_from_payload(data)

    async def play_track(self, speaker_id: str, track_url: str) -> SonosResponse:
        """Start playing a track on a speaker.

        In CIFS mode the track URL is rewritten to an x-file-cifs:// URI on
        the configured file server and sent through setavtransporturi. In
        clip mode the URL is passed to the clip endpoint untouched; being
        part of the request path, any "#fragment" in it is dropped by httpx
        and never reaches the control API.

        Args:
            speaker_id: Room name as known by the control API
            track_url: Media URL of the track

        Returns:
            SonosResponse; failures are reported through success=False and
            a message, never raised.
        """
        speaker = self._speaker_segment(speaker_id)
        if speaker is None:
            return SonosResponse(success=False, message=f"Invalid speaker id: {speaker_id!r}")

        if self._config.play_mode is PlayMode.CLIP:
            url = self._url(speaker, "clip", track_url)
        else:
            cifs_uri = build_cifs_uri(track_url, self._config.mp3_server)
            url = self._url(speaker, "setavtransporturi", quote(cifs_uri, safe=""))

        log_with_context(
            logger,
            "info",
            "Sonos play request",
            speaker_id=speaker_id,
            play_mode=self._config.play_mode.value,
            url=url,
            event_type="sonos_play_request",
        )

        try:
            response = await self._client.post(url)
        except REQUEST_ERRORS as e:
            log_with_context(
                logger,
                "warning",
                "Sonos play request failed to connect",
                speaker_id=speaker_id,
                error=str(e),
                error_type=type(e).__name__,
                event_type="sonos_play_unreachable",
            )
            return SonosResponse(success=False, message=f"Connection error: {e}")

        if response.is_success:
            return SonosResponse(success=True, message=PLAY_SUCCESS_MESSAGE)

        log_with_context(
            logger,
            "warning",
            "Sonos API rejected play request",
            speaker_id=speaker_id,
            status_code=response.status_code,
            event_type="sonos_play_http_error",
        )
        return SonosResponse(
            success=False,
            message=f"HTTP error {response.status_code} {response.reason_phrase}: {response.text}",
        )

    async def is_reachable(self) -> bool:
        """Check whether the control API answers the zones endpoint."""
        try:
            response = await self._client.get(self._url("zones"))
        except REQUEST_ERRORS as e:
            log_with_context(
                logger,
                "debug",
                "Sonos API reachability check failed",
                error=str(e),
                event_type="sonos_reachability_failed",
            )
            return False
        return response.is_success
