"""Tests for environment driven settings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from harmonia.config import Settings, get_settings, reset_settings_cache


@pytest.fixture()
def fresh_settings(monkeypatch):
    reset_settings_cache()
    yield monkeypatch
    reset_settings_cache()


def test_defaults_are_applied(fresh_settings):
    settings = get_settings()

    assert settings.websocket_path == "/ws"
    assert settings.session_cookie_name == "harmonia_session"
    assert settings.upload_url_ttl_minutes == 15


def test_settings_are_cached_until_reset(fresh_settings):
    first = get_settings()
    assert get_settings() is first

    fresh_settings.setenv("LOG_LEVEL", "DEBUG")
    assert get_settings().log_level == "INFO"

    reset_settings_cache()
    assert get_settings().log_level == "DEBUG"


def test_websocket_path_must_be_absolute(fresh_settings):
    fresh_settings.setenv("WEBSOCKET_PATH", "ws")

    with pytest.raises(ValidationError):
        Settings()
