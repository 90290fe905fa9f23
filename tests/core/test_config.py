"""Unit tests for src/core/config.py"""

import pytest

from src.core.config import Settings, get_settings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ["CHECKERS_APP_TITLE", "CHECKERS_LOG_LEVEL", "CHECKERS_CORS_ORIGINS"]:
        monkeypatch.delenv(name, raising=False)
    assert Settings.from_env() == Settings()


def test_read_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CHECKERS_APP_TITLE", "Checkers Test")
    monkeypatch.setenv("CHECKERS_LOG_LEVEL", "debug")
    monkeypatch.setenv(
        "CHECKERS_CORS_ORIGINS", "http://localhost:3000, http://example.com,"
    )
    settings = Settings.from_env()
    assert settings.app_title == "Checkers Test"
    assert settings.log_level == "DEBUG"
    assert settings.cors_origins == ["http://localhost:3000", "http://example.com"]


def test_settings_are_cached() -> None:
    assert get_settings() is get_settings()
