"""Shared pytest fixtures for the Frostie test suite."""

from __future__ import annotations

from datetime import date

import pytest

from frostie.config import get_settings
from frostie.parsing.knowledge import get_knowledge_base

FROSTIE_ENV_VARS = (
    "FROSTIE_DEFAULT_EXPIRATION_DAYS",
    "FROSTIE_KNOWLEDGE_PATH",
    "FROSTIE_LOG_LEVEL",
    "FROSTIE_LOG_FORMAT",
    "FROSTIE_AI_ENABLED",
    "FROSTIE_AI_BASE_URL",
    "FROSTIE_AI_API_KEY",
    "FROSTIE_AI_MODEL",
    "FROSTIE_AI_PROVIDER",
    "FROSTIE_AI_TEMPERATURE",
    "FROSTIE_AI_MAX_TOKENS",
    "FROSTIE_AI_TIMEOUT",
)


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Run each test without ambient FROSTIE_* variables or .env files."""

    for name in FROSTIE_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    get_knowledge_base.cache_clear()
    yield
    get_settings.cache_clear()
    get_knowledge_base.cache_clear()


@pytest.fixture()
def today() -> date:
    """Fixed reference date used by the worked examples."""

    return date(2024, 1, 10)
