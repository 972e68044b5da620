"""Tests for connection settings."""

import os
from unittest.mock import patch

from figaro_webdriver.config import Settings, get_version


class TestSettings:
    def test_defaults(self):
        """Test default settings values."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings()
        assert settings.server_url == "http://localhost:4444"
        assert settings.request_timeout == 120.0
        assert settings.user_agent is None

    def test_env_prefix(self):
        """Test settings load from WEBDRIVER_ prefixed env vars."""
        env = {
            "WEBDRIVER_SERVER_URL": "http://grid:4444/wd/hub",
            "WEBDRIVER_REQUEST_TIMEOUT": "15.5",
            "WEBDRIVER_USER_AGENT": "custom/1.0",
        }
        with patch.dict(os.environ, env, clear=True):
            settings = Settings()
        assert settings.server_url == "http://grid:4444/wd/hub"
        assert settings.request_timeout == 15.5
        assert settings.user_agent == "custom/1.0"

    def test_unprefixed_env_ignored(self):
        """Test that env vars without the prefix do not leak in."""
        with patch.dict(os.environ, {"SERVER_URL": "http://other:1"}, clear=True):
            settings = Settings()
        assert settings.server_url == "http://localhost:4444"


class TestGetVersion:
    def test_returns_string(self):
        assert isinstance(get_version(), str)
        assert get_version()

    def test_fallback_when_not_installed(self):
        with patch("importlib.metadata.version", side_effect=Exception("not installed")):
            assert get_version() == "0.1.0"
