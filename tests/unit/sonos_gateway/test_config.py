"""Unit tests for configuration."""

from unittest.mock import patch

import pytest
from pydantic import ValidationError

from sonos_gateway.config import (
    DEFAULT_SONOS_API_URL,
    DEFAULT_SONOS_MP3_SERVER,
    PlayMode,
    Settings,
    SonosConfig,
    get_settings,
)


class TestSonosConfig:
    """Tests for the Sonos integration config."""

    def test_defaults(self):
        config = SonosConfig()

        assert config.api_url == "http://192.168.0.5:5005"
        assert config.mp3_server == "192.168.0.6/mp3"
        assert config.play_mode is PlayMode.CIFS

    def test_unset_values_fall_back_to_defaults(self):
        config = SonosConfig(api_url=None, mp3_server="  ", play_mode=None)

        assert config.api_url == DEFAULT_SONOS_API_URL
        assert config.mp3_server == DEFAULT_SONOS_MP3_SERVER
        assert config.play_mode is PlayMode.CIFS

    def test_values_are_independent(self):
        config = SonosConfig(mp3_server="nas.local/music")

        assert config.api_url == DEFAULT_SONOS_API_URL
        assert config.mp3_server == "nas.local/music"

    def test_api_url_trailing_slash_stripped(self):
        config = SonosConfig(api_url="http://sonos.local:5005/")

        assert config.api_url == "http://sonos.local:5005"

    def test_play_mode_case_insensitive(self):
        assert SonosConfig(play_mode="CLIP").play_mode is PlayMode.CLIP

    def test_invalid_play_mode(self):
        with pytest.raises(ValidationError):
            SonosConfig(play_mode="stream")

    def test_config_is_frozen(self):
        config = SonosConfig()

        with pytest.raises(ValidationError):
            config.api_url = "http://elsewhere:5005"


class TestSettings:
    """Tests for application settings."""

    def test_settings_defaults(self):
        settings = Settings()

        assert settings.api_host == "127.0.0.1"
        assert settings.api_port == 8000
        assert settings.sonos_config == SonosConfig()

    def test_settings_build_sonos_config(self):
        settings = Settings(
            sonos_api_url="http://10.0.0.2:5005",
            sonos_mp3_server="10.0.0.3/share",
            sonos_play_mode="clip",
        )

        config = settings.sonos_config

        assert config.api_url == "http://10.0.0.2:5005"
        assert config.mp3_server == "10.0.0.3/share"
        assert config.play_mode is PlayMode.CLIP
        assert settings.sonos_config is config

    def test_settings_env_loading(self):
        with patch.dict(
            "os.environ",
            {
                "API_PORT": "9000",
                "SONOS_API_URL": "http://sonos-api:5005",
                "SONOS_PLAY_MODE": " Clip ",
            },
        ):
            settings = Settings()

            assert settings.api_port == 9000
            assert settings.sonos_config.api_url == "http://sonos-api:5005"
            assert settings.sonos_config.mp3_server == DEFAULT_SONOS_MP3_SERVER
            assert settings.sonos_config.play_mode is PlayMode.CLIP

    def test_settings_blank_play_mode_uses_default(self):
        settings = Settings(sonos_play_mode="")

        assert settings.sonos_config.play_mode is PlayMode.CIFS

    def test_settings_invalid_port(self):
        with pytest.raises(ValueError):
            Settings(api_port=70000)

    def test_settings_blank_host(self):
        with pytest.raises(ValueError):
            Settings(api_host="   ")

    def test_get_settings_singleton(self):
        settings1 = get_settings()
        settings2 = get_settings()

        assert settings1 is settings2
