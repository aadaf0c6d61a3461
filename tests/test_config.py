"""Tests for settings and fail-fast configuration checks."""

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from curabot.app import app
from curabot.config import Settings
from curabot.errors import ConfigurationError


def test_require_passes_when_present():
    settings = Settings(_env_file=None, discord_public_key="abc", gemini_api_key="key")
    settings.require("discord_public_key", "gemini_api_key")


def test_require_names_every_missing_env_var():
    settings = Settings(_env_file=None, discord_public_key="", gemini_api_key="")

    with pytest.raises(ConfigurationError) as exc_info:
        settings.require("discord_public_key", "gemini_api_key")

    message = str(exc_info.value)
    assert "DISCORD_PUBLIC_KEY" in message
    assert "GEMINI_API_KEY" in message


def test_defaults():
    settings = Settings(_env_file=None)
    assert settings.store_ttl_seconds == 86_400
    assert settings.fetch_timeout_seconds == 10.0


def test_startup_fails_fast_without_public_key():
    settings = Settings(_env_file=None, discord_public_key="", gemini_api_key="key")
    with patch("curabot.app.get_settings", return_value=settings):
        with pytest.raises(ConfigurationError):
            with TestClient(app):
                pass


def test_startup_requires_store_token_with_store_url():
    settings = Settings(
        _env_file=None,
        discord_public_key="abc",
        gemini_api_key="key",
        store_url="https://kv.example.com",
        store_token="",
    )
    with patch("curabot.app.get_settings", return_value=settings):
        with pytest.raises(ConfigurationError, match="STORE_TOKEN"):
            with TestClient(app):
                pass
