"""Application configuration helpers."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

ENV_FILE_CANDIDATES = (Path(".env"), Path(".env.local"))


class Settings(BaseModel):
    """Global parser settings loaded from environment variables or .env files."""

    default_expiration_days: int = Field(
        default=30,
        description="Days added to today when no other expiration source applies.",
    )
    knowledge_path: Optional[Path] = Field(
        default=None,
        description="Override for the packaged shelf-life/category knowledge JSON file.",
    )
    log_level: str = Field(default="INFO", description="Logging level (DEBUG/INFO/WARNING/ERROR)")
    log_format: str = Field(
        default="plain",
        description="Logging format (plain/json).",
    )
    ai_enabled: bool = Field(
        default=False,
        description="Ask an LLM for a candidate parse before the rule-based parser when true.",
    )
    ai_base_url: Optional[str] = Field(
        default=None,
        description="LLM base URL (OpenAI-compatible runtime or Ollama).",
    )
    ai_api_key: Optional[str] = Field(
        default=None,
        description="Bearer token sent to OpenAI-compatible endpoints.",
    )
    ai_model: str = Field(
        default="gemini-2.0-flash",
        description="Model identifier passed to the LLM endpoint.",
    )
    ai_provider: str = Field(
        default="openai",
        description="LLM provider (openai or ollama).",
    )
    ai_temperature: float = Field(
        default=0.0,
        description="Sampling temperature for item parsing.",
    )
    ai_max_tokens: int = Field(
        default=300,
        description="Max tokens for item parsing responses.",
    )
    ai_timeout: float = Field(
        default=10.0,
        description="Seconds to wait for the LLM before falling back to rule-based parsing.",
    )

    model_config = ConfigDict(frozen=True)


def _coerce_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _parse_env_file(path: Path) -> dict[str, str]:
    payload: dict[str, str] = {}
    try:
        with path.open("r", encoding="utf-8") as handle:
            for raw_line in handle:
                line = raw_line.strip()
                if not line or line.startswith("#") or "=" not in line:
                    continue
                key, raw_value = line.split("=", 1)
                payload[key.strip()] = raw_value.strip()
    except FileNotFoundError:
        return {}
    return payload


def _load_env_file_values() -> dict[str, str]:
    values: dict[str, str] = {}
    for candidate in ENV_FILE_CANDIDATES:
        values.update(_parse_env_file(candidate))
    return values


def _load_from_env() -> dict[str, object]:
    """Load optional overrides from env vars (with .env fallbacks)."""

    file_values = _load_env_file_values()

    def _env(key: str) -> Optional[str]:
        return os.environ.get(key) or file_values.get(key)

    payload: dict[str, object] = {}
    if (default_days := _env("FROSTIE_DEFAULT_EXPIRATION_DAYS")):
        try:
            payload["default_expiration_days"] = int(default_days)
        except ValueError:
            pass
    if (knowledge_path := _env("FROSTIE_KNOWLEDGE_PATH")):
        payload["knowledge_path"] = Path(knowledge_path)
    if (log_level := _env("FROSTIE_LOG_LEVEL")):
        payload["log_level"] = log_level
    if (log_format := _env("FROSTIE_LOG_FORMAT")):
        payload["log_format"] = log_format
    if (ai_enabled := _env("FROSTIE_AI_ENABLED")):
        payload["ai_enabled"] = _coerce_bool(ai_enabled)
    if (ai_base_url := _env("FROSTIE_AI_BASE_URL")):
        payload["ai_base_url"] = ai_base_url
    if (ai_api_key := _env("FROSTIE_AI_API_KEY")):
        payload["ai_api_key"] = ai_api_key
    if (ai_model := _env("FROSTIE_AI_MODEL")):
        payload["ai_model"] = ai_model
    if (ai_provider := _env("FROSTIE_AI_PROVIDER")):
        payload["ai_provider"] = ai_provider
    if (ai_temperature := _env("FROSTIE_AI_TEMPERATURE")):
        try:
            payload["ai_temperature"] = float(ai_temperature)
        except ValueError:
            pass
    if (ai_max_tokens := _env("FROSTIE_AI_MAX_TOKENS")):
        try:
            payload["ai_max_tokens"] = int(ai_max_tokens)
        except ValueError:
            pass
    if (ai_timeout := _env("FROSTIE_AI_TIMEOUT")):
        try:
            payload["ai_timeout"] = float(ai_timeout)
        except ValueError:
            pass
    return payload


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings."""

    return Settings(**_load_from_env())
