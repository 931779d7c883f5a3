"""Tests for environment-driven settings."""

from __future__ import annotations

from pathlib import Path

from frostie.config import Settings, get_settings


def test_defaults():
    settings = get_settings()

    assert settings == Settings()
    assert settings.default_expiration_days == 30
    assert settings.ai_enabled is False
    assert settings.knowledge_path is None


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("FROSTIE_DEFAULT_EXPIRATION_DAYS", "21")
    monkeypatch.setenv("FROSTIE_AI_ENABLED", "on")
    monkeypatch.setenv("FROSTIE_AI_TEMPERATURE", "0.3")
    monkeypatch.setenv("FROSTIE_KNOWLEDGE_PATH", "/tmp/kb.json")
    get_settings.cache_clear()

    settings = get_settings()

    assert settings.default_expiration_days == 21
    assert settings.ai_enabled is True
    assert settings.ai_temperature == 0.3
    assert settings.knowledge_path == Path("/tmp/kb.json")


def test_invalid_numbers_keep_defaults(monkeypatch):
    monkeypatch.setenv("FROSTIE_DEFAULT_EXPIRATION_DAYS", "a month")
    monkeypatch.setenv("FROSTIE_AI_TIMEOUT", "soon")
    get_settings.cache_clear()

    settings = get_settings()

    assert settings.default_expiration_days == 30
    assert settings.ai_timeout == 10.0


def test_env_file_fallback(tmp_path):
    (tmp_path / ".env").write_text(
        "# local overrides\nFROSTIE_LOG_FORMAT=json\nFROSTIE_AI_MODEL=llama3\n",
        encoding="utf-8",
    )
    get_settings.cache_clear()

    settings = get_settings()

    assert settings.log_format == "json"
    assert settings.ai_model == "llama3"


def test_environment_wins_over_env_file(tmp_path, monkeypatch):
    (tmp_path / ".env").write_text("FROSTIE_LOG_LEVEL=DEBUG\n", encoding="utf-8")
    monkeypatch.setenv("FROSTIE_LOG_LEVEL", "WARNING")
    get_settings.cache_clear()

    assert get_settings().log_level == "WARNING"
