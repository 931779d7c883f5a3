"""Fallback tag suggestions for items entered without ``#tags``."""

from __future__ import annotations

from typing import Optional

from frostie.models.item import Category
from frostie.parsing.knowledge import KnowledgeBase, get_knowledge_base

MAX_TAGS = 3

_CATEGORY_TAGS: dict[Category, tuple[str, ...]] = {
    Category.MEAT_POULTRY: ("protein",),
    Category.SEAFOOD: ("protein", "seafood"),
    Category.PREPARED_MEALS: ("meal", "ready"),
    Category.BAKERY_BREAD: ("bakery",),
    Category.DAIRY_ALTERNATIVES: ("dairy",),
}

_MEAL_TIME_TAGS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("breakfast", ("breakfast",)),
    ("lunch", ("lunch",)),
    ("dinner", ("dinner",)),
    ("dessert", ("dessert", "ice cream")),
)


def suggest(name: str, category: Category, knowledge: Optional[KnowledgeBase] = None) -> list[str]:
    if knowledge is None:
        knowledge = get_knowledge_base()
    lowered = (name or "").lower()
    tags: list[str] = []

    if category is Category.FRUITS_VEGETABLES:
        is_fruit = any(keyword in lowered for keyword in knowledge.fruit_keywords)
        tags.extend(["fruit" if is_fruit else "veggie", "healthy"])
    else:
        tags.extend(_CATEGORY_TAGS.get(category, ()))

    for tag, keywords in _MEAL_TIME_TAGS:
        if any(keyword in lowered for keyword in keywords) and tag not in tags:
            tags.append(tag)

    if len(tags) < 2:
        tags.append("freezer")

    return tags[:MAX_TAGS]


__all__ = ["MAX_TAGS", "suggest"]
