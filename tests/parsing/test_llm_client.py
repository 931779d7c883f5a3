"""Tests for the LLM item candidate client."""

from __future__ import annotations

import json
from datetime import date

import httpx
import pytest

from frostie.config import get_settings
from frostie.parsing.llm_client import ItemLLMClient, build_item_llm_client


def _client(handler, provider: str = "openai", api_key: str | None = None) -> ItemLLMClient:
    return ItemLLMClient(
        base_url="http://llm.local/v1/",
        model="test-model",
        provider=provider,
        temperature=0.0,
        max_tokens=200,
        timeout=1.0,
        api_key=api_key,
        transport=httpx.MockTransport(handler),
    )


def test_openai_response_is_parsed_into_candidate():
    seen: dict[str, object] = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["auth"] = request.headers.get("Authorization")
        seen["body"] = json.loads(request.content)
        content = (
            "```json\n"
            '{"name": "Frozen Peas", "quantity": 2, "category": "Fruits & Vegetables", '
            '"size": "", "expirationDate": "2024-01-24", "tags": ["veggie"]}\n'
            "```"
        )
        return httpx.Response(200, json={"choices": [{"message": {"content": content}}]})

    client = _client(handler, api_key="sk-test")
    candidate = client.parse_item("Two bags of frozen peas", today=date(2024, 1, 10))

    assert seen["url"] == "http://llm.local/v1/chat/completions"
    assert seen["auth"] == "Bearer sk-test"
    body = seen["body"]
    assert body["model"] == "test-model"
    assert "2024-01-10" in body["messages"][1]["content"]
    assert "Ready-to-Eat" in body["messages"][1]["content"]
    assert candidate.name == "Frozen Peas"
    assert candidate.quantity == 2
    assert candidate.expiration_date == "2024-01-24"
    assert candidate.tags == ["veggie"]


def test_ollama_provider_uses_chat_endpoint():
    seen: dict[str, object] = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["auth"] = request.headers.get("Authorization")
        return httpx.Response(
            200,
            json={"message": {"content": 'Sure! {"name": "Bagels", "quantity": 6}'}},
        )

    client = _client(handler, provider="ollama", api_key="ignored")
    candidate = client.parse_item("6 bagels", today=date(2024, 1, 10))

    assert seen["url"] == "http://llm.local/v1/api/chat"
    assert seen["auth"] is None
    assert candidate.name == "Bagels"
    assert candidate.quantity == 6


def test_invalid_json_raises_value_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"choices": [{"message": {"content": "{name: peas"}}]})

    with pytest.raises(ValueError):
        _client(handler).parse_item("peas", today=date(2024, 1, 10))


def test_empty_choices_raise_value_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"choices": []})

    with pytest.raises(ValueError):
        _client(handler).parse_item("peas", today=date(2024, 1, 10))


def test_http_errors_propagate():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503, json={"error": "busy"})

    with pytest.raises(httpx.HTTPStatusError):
        _client(handler).parse_item("peas", today=date(2024, 1, 10))


def test_build_client_disabled_by_default():
    assert build_item_llm_client() is None


def test_build_client_requires_base_url(monkeypatch):
    monkeypatch.setenv("FROSTIE_AI_ENABLED", "true")
    get_settings.cache_clear()

    assert build_item_llm_client() is None


def test_build_client_from_settings(monkeypatch):
    monkeypatch.setenv("FROSTIE_AI_ENABLED", "yes")
    monkeypatch.setenv("FROSTIE_AI_BASE_URL", "http://localhost:11434")
    monkeypatch.setenv("FROSTIE_AI_PROVIDER", "ollama")
    get_settings.cache_clear()

    assert isinstance(build_item_llm_client(), ItemLLMClient)
