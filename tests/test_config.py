"""
Tests for environment-driven settings.
"""
from __future__ import annotations

import pytest

from jokebook_api.app.core.config import Settings, get_settings
from jokebook_api.app.core.errors import StartupError


def test_defaults(monkeypatch):
    for name in ("DATABASE_URL", "PORT", "JOKE_COUNT", "JOKE_API_URL", "CORS_ORIGINS"):
        monkeypatch.delenv(name, raising=False)
    settings = get_settings()
    assert settings.port == 3000
    assert settings.joke_count == 10
    assert settings.joke_api_url == "https://v2.jokeapi.dev"
    assert settings.cors_origin_list == ["*"]
    assert settings.database_url is None


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite:///INDEX.db")
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("JOKE_COUNT", "3")
    monkeypatch.setenv("JOKE_API_TIMEOUT", "2.5")
    monkeypatch.setenv("CORS_ORIGINS", "http://localhost:5173, http://127.0.0.1:5173,")
    settings = get_settings()
    assert settings.require_database_url() == "sqlite:///INDEX.db"
    assert settings.port == 8080
    assert settings.joke_count == 3
    assert settings.joke_api_timeout == 2.5
    assert settings.cors_origin_list == ["http://localhost:5173", "http://127.0.0.1:5173"]


@pytest.mark.parametrize("value", [None, "", "   "])
def test_missing_database_url_is_fatal(value):
    with pytest.raises(StartupError, match="DATABASE_URL"):
        Settings(database_url=value).require_database_url()
