from enum import Enum
from functools import cached_property
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from sonos_gateway.logging_config import get_logger, log_with_context

logger = get_logger(__name__)

BASE_DIR = Path(__file__).resolve().parent.parent  # sonos-gateway/

DEFAULT_SONOS_API_URL = "http://192.168.0.5:5005"
DEFAULT_SONOS_MP3_SERVER = "192.168.0.6/mp3"


class PlayMode(str, Enum):
    """How a track is handed to the control API."""

    CIFS = "cifs"  # setavtransporturi with an x-file-cifs:// URI
    CLIP = "clip"  # clip endpoint with the track URL as-is


class SonosConfig(BaseModel):
    """Immutable configuration of the Sonos control API integration.

    Fields left unset (or blank) fall back to the module defaults, so
    ``SonosConfig()`` and ``SonosConfig(api_url=None)`` are equivalent.
    """

    model_config = ConfigDict(frozen=True)

    api_url: str = Field(default=DEFAULT_SONOS_API_URL, description="node-sonos-http-api base URL")
    mp3_server: str = Field(default=DEFAULT_SONOS_MP3_SERVER, description="File share host and path prefix")
    play_mode: PlayMode = Field(default=PlayMode.CIFS, description="Playback strategy")

    @field_validator("api_url", mode="before")
    @classmethod
    def default_api_url(cls, v: str | None) -> str:
        """Apply the default base URL when unset and drop trailing slashes."""
        if v is None or not str(v).strip():
            return DEFAULT_SONOS_API_URL
        return str(v).strip().rstrip("/")

    @field_validator("mp3_server", mode="before")
    @classmethod
    def default_mp3_server(cls, v: str | None) -> str:
        """Apply the default file server when unset."""
        if v is None or not str(v).strip():
            return DEFAULT_SONOS_MP3_SERVER
        return str(v).strip()

    @field_validator("play_mode", mode="before")
    @classmethod
    def default_play_mode(cls, v: PlayMode | str | None) -> PlayMode | str:
        if v is None or (isinstance(v, str) and not v.strip()):
            return PlayMode.CIFS
        if isinstance(v, str):
            return v.strip().lower()
        return v


class Settings(BaseSettings):
    """Application settings with validation.

    Every field has a default so the gateway starts without a .env file.
    Values are read from environment variables or .env (case-insensitive).
    """

    # API server settings
    api_host: str = Field(default="127.0.0.1", min_length=1, description="API server host (e.g., '0.0.0.0')")
    api_port: int = Field(ge=1, le=65535, default=8000, description="API server port")

    # Sonos control API
    sonos_api_url: str | None = Field(default=None, description="node-sonos-http-api base URL")
    sonos_mp3_server: str | None = Field(default=None, description="File share used for x-file-cifs URIs")
    sonos_play_mode: PlayMode | None = Field(default=None, description="'cifs' or 'clip'")

    # Security
    trusted_hosts: str = Field(default="*", description="Comma-separated trusted host patterns")
    cors_origins: str = Field(default="*", description="Comma-separated allowed CORS origins")

    model_config = SettingsConfigDict(
        env_file=Path(BASE_DIR / ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    @field_validator("api_host", mode="after")
    @classmethod
    def validate_api_host(cls, v: str) -> str:
        """Ensure api_host is not empty or whitespace."""
        v = v.strip()
        if not v:
            raise ValueError("api_host cannot be empty")
        return v

    @field_validator("sonos_play_mode", mode="before")
    @classmethod
    def normalize_play_mode(cls, v: str | None) -> str | None:
        if isinstance(v, str):
            return v.strip().lower() or None
        return v

    @cached_property
    def sonos_config(self) -> SonosConfig:
        """Build the Sonos integration config from the flat settings.

        Uses @cached_property so the same frozen instance is handed out for
        the lifetime of this Settings object.
        """
        config = SonosConfig(
            api_url=self.sonos_api_url,
            mp3_server=self.sonos_mp3_server,
            play_mode=self.sonos_play_mode,
        )
        log_with_context(
            logger,
            "info",
            "Sonos configuration loaded",
            api_url=config.api_url,
            mp3_server=config.mp3_server,
            play_mode=config.play_mode.value,
            event_type="config_sonos_loaded",
        )
        return config


# Singleton settings instance (cached for performance)
_settings_instance: Settings | None = None


def get_settings() -> Settings:
    """Get singleton Settings instance for dependency injection.

    This function creates a singleton to avoid re-reading .env file
    on every request. Use this with FastAPI's Depends() for
    dependency injection.

    Returns:
        Cached Settings instance
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
