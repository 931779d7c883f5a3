"""LLM helper that proposes a candidate parse for an item description."""
# mypy: ignore-errors

from __future__ import annotations

import json
import logging
import re
from datetime import date
from typing import Optional

import httpx

from frostie.config import get_settings
from frostie.models.item import AiCandidate, Category

_JSON_BLOCK_RE = re.compile(r"```(?:json)?\s*(\{.*?\})\s*```", re.DOTALL)

ITEM_SYSTEM_PROMPT = (
    "You are a food item parser for a freezer inventory app. Given a short text describing "
    "one food item, extract its fields and return only a JSON object, no other text."
)

ITEM_USER_PROMPT = (
    "Extract the following from the text below:\n"
    "- name: the name of the food item\n"
    "- quantity: number of units (default 1)\n"
    "- category: one of {categories}\n"
    "- size: size or weight, e.g. \"1 lb\" or \"500g\" (empty string if none)\n"
    "- expirationDate: ISO date YYYY-MM-DD. Use an explicit date when given. For a relative "
    "period such as \"expires in 2 weeks\", add it to TODAY, which is {today}. Use null when the "
    "text gives no expiration information.\n"
    "- tags: 2-3 relevant single-word tags (e.g. protein, dinner, homemade)\n\n"
    "Text: \"{text}\"\n\n"
    "Return exactly this shape:\n"
    '{{"name": string, "quantity": number, "category": string, "size": string, '
    '"expirationDate": string|null, "tags": string[]}}'
)

logger = logging.getLogger(__name__)


class ItemLLMClient:
    """Call an OpenAI/Ollama-compatible endpoint to propose item fields."""

    def __init__(
        self,
        *,
        base_url: str,
        model: str,
        provider: str,
        temperature: float,
        max_tokens: int,
        timeout: float,
        api_key: Optional[str] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._model = model
        self._provider = (provider or "openai").strip().lower()
        self._temperature = max(0.0, float(temperature))
        self._max_tokens = max(1, int(max_tokens))
        self._timeout = timeout
        self._api_key = api_key
        self._transport = transport

    def parse_item(self, text: str, *, today: date) -> AiCandidate:
        prompt = ITEM_USER_PROMPT.format(
            categories=", ".join(member.value for member in Category),
            today=today.isoformat(),
            text=text.strip()[:500],
        )
        try:
            content = self._execute_chat(ITEM_SYSTEM_PROMPT, prompt)
        except Exception:
            logger.exception("Item LLM request failed")
            raise

        json_blob = _extract_json_blob(content)
        try:
            parsed = json.loads(json_blob)
        except json.JSONDecodeError as exc:
            snippet = json_blob.strip().replace("\n", " ")[:200]
            raise ValueError(f"Item LLM returned invalid JSON: {exc}: payload={snippet}") from exc

        candidate = AiCandidate.from_payload(parsed)
        if candidate is None:
            raise ValueError("Item LLM response was not a JSON object.")
        return candidate

    def _execute_chat(self, system: str, user: str) -> str:
        messages = [
            {"role": "system", "content": system},
            {"role": "user", "content": user},
        ]
        if self._provider == "ollama":
            endpoint = self._base_url
            if not endpoint.endswith("/api/chat"):
                endpoint = f"{endpoint}/api/chat"
            payload = {
                "model": self._model,
                "messages": messages,
                "stream": False,
                "format": "json",
                "options": {
                    "temperature": self._temperature,
                    "num_predict": self._max_tokens,
                },
            }
            body = self._post(endpoint, payload)
            message = body.get("message") or {}
            content = (message.get("content") or "").strip()
            if not content:
                raise ValueError("Ollama item response did not include content.")
            return content

        endpoint = self._base_url
        if not endpoint.endswith("/chat/completions"):
            endpoint = f"{endpoint}/chat/completions"
        payload = {
            "model": self._model,
            "temperature": self._temperature,
            "max_tokens": self._max_tokens,
            "messages": messages,
        }
        body = self._post(endpoint, payload)
        choices = body.get("choices") or []
        if not choices:
            raise ValueError("Item LLM returned no choices.")
        message = choices[0].get("message") or {}
        content = (message.get("content") or "").strip()
        if not content:
            raise ValueError("Item LLM returned an empty response.")
        return content

    def _post(self, endpoint: str, payload: dict[str, object]) -> dict:
        headers = {}
        if self._api_key and self._provider != "ollama":
            headers["Authorization"] = f"Bearer {self._api_key}"
        with httpx.Client(timeout=self._timeout, transport=self._transport) as client:
            response = client.post(endpoint, json=payload, headers=headers)
        response.raise_for_status()
        return response.json()


def _extract_json_blob(text: str) -> str:
    match = _JSON_BLOCK_RE.search(text)
    if match:
        return match.group(1).strip()

    start = text.find("{")
    end = text.rfind("}")
    if start != -1 and end != -1 and end > start:
        return text[start : end + 1].strip()
    return text.strip()


def build_item_llm_client() -> ItemLLMClient | None:
    """Create an LLM client when AI-assisted parsing is enabled."""

    settings = get_settings()
    if not settings.ai_enabled:
        return None

    if not settings.ai_base_url:
        logger.debug("Item LLM enabled but no base URL configured.")
        return None

    return ItemLLMClient(
        base_url=settings.ai_base_url,
        model=settings.ai_model,
        provider=settings.ai_provider,
        temperature=settings.ai_temperature,
        max_tokens=settings.ai_max_tokens,
        timeout=settings.ai_timeout,
        api_key=settings.ai_api_key,
    )


__all__ = ["ItemLLMClient", "build_item_llm_client"]
