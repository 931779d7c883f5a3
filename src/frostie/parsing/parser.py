"""Turn a freeform item description into a structured freezer inventory record."""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Optional, Protocol

from frostie import metrics
from frostie.config import get_settings
from frostie.models.item import AiCandidate, Category, ExpirationSource, ExtractedText, ParsedItem
from frostie.parsing import categories, expiration, shelf_life, tags
from frostie.parsing.extractor import extract
from frostie.parsing.knowledge import KnowledgeBase

logger = logging.getLogger(__name__)

DEFAULT_EXPIRATION_DAYS = 30


class ItemCandidateSource(Protocol):
    def parse_item(self, text: str, *, today: date) -> AiCandidate: ...


def display_name(name: str, quantity: int) -> str:
    """Title-case each word and pluralize the last one when ``quantity`` > 1."""

    words = [word[:1].upper() + word[1:].lower() for word in name.split(" ") if word]
    if not words:
        return name
    if quantity > 1:
        last = words[-1]
        if last.endswith("y") and len(last) > 1:
            words[-1] = last[:-1] + "ies"
        elif not last.endswith(("s", "sh", "ch", "x", "z")):
            words[-1] = last + "s"
    return " ".join(words)


def _merge_category(
    candidate: Optional[AiCandidate],
    name: str,
    knowledge: Optional[KnowledgeBase],
) -> Category:
    if candidate is not None and candidate.category is not None:
        return categories.validate_category(candidate.category)
    return categories.classify(name, knowledge)


def parse(
    input_text: str,
    default_expiration_days: int = DEFAULT_EXPIRATION_DAYS,
    ai_candidate: Any = None,
    *,
    today: Optional[date] = None,
    display_names: bool = False,
    knowledge: Optional[KnowledgeBase] = None,
) -> ParsedItem:
    """Parse one item description, optionally reconciling an upstream AI candidate.

    The AI candidate's expiration date is only honoured when it lies in the future, its
    category is re-validated against :class:`Category`, and every field it leaves empty
    falls back to rule-based extraction. Never raises for string input.
    """

    today = today or date.today()
    candidate = AiCandidate.from_payload(ai_candidate) if ai_candidate is not None else None
    extracted: ExtractedText = extract(input_text)

    name = (candidate.name if candidate and candidate.name else None) or extracted.name
    quantity = (candidate.quantity if candidate and candidate.quantity else None) or extracted.quantity
    size = (candidate.size if candidate and candidate.size else None) or extracted.size
    item_tags = list((candidate.tags if candidate and candidate.tags else None) or extracted.tags)

    category = _merge_category(candidate, name, knowledge)
    days = shelf_life.lookup(name, category, default_expiration_days, knowledge)

    ai_date = candidate.expiration_date if candidate is not None else None
    resolution = expiration.resolve(
        today=today,
        shelf_life_days=days,
        default_days=default_expiration_days,
        ai_date=ai_date,
        explicit_date=extracted.explicit_date,
        explicit_period=extracted.explicit_period,
    )

    if not item_tags:
        item_tags = tags.suggest(name, category, knowledge)

    if candidate is not None and ai_date is not None:
        accepted = resolution.source is ExpirationSource.AI
        metrics.AI_CANDIDATES.labels(result="accepted" if accepted else "rejected").inc()
    metrics.ITEMS_PARSED.labels(source=resolution.source.value).inc()

    logger.debug(
        "Parsed %r -> %r (category=%s, expires=%s)",
        input_text,
        name,
        category.value,
        resolution.expiration_date,
        extra={"expiration_source": resolution.source.value},
    )

    return ParsedItem(
        name=display_name(name, quantity) if display_names else name,
        quantity=max(1, quantity),
        category=category,
        size=size,
        expiration_date=resolution.expiration_date,
        tags=item_tags[: tags.MAX_TAGS],
        expiration_source=resolution.source,
    )


class ItemTextParser:
    """Ask an optional LLM for a candidate parse, then reconcile it with the rule-based parser."""

    def __init__(
        self,
        *,
        llm_client: Optional[ItemCandidateSource] = None,
        default_expiration_days: Optional[int] = None,
        knowledge: Optional[KnowledgeBase] = None,
    ) -> None:
        self._llm_client = llm_client
        if default_expiration_days is None:
            default_expiration_days = get_settings().default_expiration_days
        self._default_expiration_days = default_expiration_days
        self._knowledge = knowledge

    def parse(
        self,
        text: str,
        *,
        today: Optional[date] = None,
        display_names: bool = False,
    ) -> ParsedItem:
        today = today or date.today()
        candidate = self._request_candidate(text, today)
        return parse(
            text,
            self._default_expiration_days,
            candidate,
            today=today,
            display_names=display_names,
            knowledge=self._knowledge,
        )

    def _request_candidate(self, text: str, today: date) -> Optional[AiCandidate]:
        if not self._llm_client:
            return None
        try:
            return self._llm_client.parse_item(text, today=today)
        except Exception as exc:
            logger.warning("AI item parsing failed, using rule-based parser: %s", exc)
            metrics.AI_CANDIDATES.labels(result="failed").inc()
            return None


__all__ = ["DEFAULT_EXPIRATION_DAYS", "ItemTextParser", "display_name", "parse"]
