"""Ordered, immutable shelf-life and category knowledge tables."""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from frostie.config import get_settings
from frostie.models.item import Category

logger = logging.getLogger(__name__)


class ShelfLifeEntry(BaseModel):
    keyword: str
    days: int = Field(ge=1)

    model_config = ConfigDict(frozen=True)


class CategoryRule(BaseModel):
    category: Category
    keywords: tuple[str, ...]

    model_config = ConfigDict(frozen=True)

    @field_validator("keywords")
    @classmethod
    def _lowercase_keywords(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        return tuple(keyword.lower() for keyword in value)


class KnowledgeBase(BaseModel):
    """Static tables consulted by the classifier and the shelf-life lookup.

    Order is significant in ``shelf_life`` and ``category_rules``: the first entry that
    matches a name wins, so earlier entries shadow later, more specific ones.
    """

    shelf_life: tuple[ShelfLifeEntry, ...]
    category_defaults: dict[Category, int] = Field(default_factory=dict)
    category_rules: tuple[CategoryRule, ...]
    fruit_keywords: tuple[str, ...] = ()

    model_config = ConfigDict(frozen=True)

    @field_validator("fruit_keywords")
    @classmethod
    def _lowercase_fruit_keywords(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        return tuple(keyword.lower() for keyword in value)

    @field_validator("shelf_life", mode="before")
    @classmethod
    def _entries_from_pairs(cls, value: Any) -> Any:
        if isinstance(value, list):
            return tuple(
                {"keyword": entry[0].lower(), "days": entry[1]}
                if isinstance(entry, (list, tuple))
                else entry
                for entry in value
            )
        return value


def load_knowledge_base(path: Optional[Path] = None) -> KnowledgeBase:
    """Load tables from ``path`` or from the JSON file shipped with the package."""

    if path is not None:
        raw = Path(path).read_text(encoding="utf-8")
        source = str(path)
    else:
        raw = resources.files("frostie.data").joinpath("knowledge.json").read_text(encoding="utf-8")
        source = "frostie.data/knowledge.json"
    knowledge = KnowledgeBase.model_validate(json.loads(raw))
    logger.debug(
        "Loaded knowledge base from %s: %s shelf-life entries, %s category rules",
        source,
        len(knowledge.shelf_life),
        len(knowledge.category_rules),
    )
    return knowledge


@lru_cache
def get_knowledge_base() -> KnowledgeBase:
    """Return the process-wide knowledge base, honouring ``FROSTIE_KNOWLEDGE_PATH``."""

    return load_knowledge_base(get_settings().knowledge_path)


__all__ = [
    "CategoryRule",
    "KnowledgeBase",
    "ShelfLifeEntry",
    "get_knowledge_base",
    "load_knowledge_base",
]
