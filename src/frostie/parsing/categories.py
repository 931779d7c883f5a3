"""Keyword-rule category classifier."""

from __future__ import annotations

from typing import Any, Optional

from frostie.models.item import Category
from frostie.parsing.knowledge import KnowledgeBase, get_knowledge_base


def classify(name: str, knowledge: Optional[KnowledgeBase] = None) -> Category:
    """Return the category of the first rule with a keyword contained in ``name``."""

    if knowledge is None:
        knowledge = get_knowledge_base()
    lowered = (name or "").lower()
    for rule in knowledge.category_rules:
        if any(keyword in lowered for keyword in rule.keywords):
            return rule.category
    return Category.OTHER


def validate_category(value: Any) -> Category:
    """Map an untrusted category value onto the closed enum, falling back to ``Other``."""

    return Category.coerce(value) or Category.OTHER


__all__ = ["classify", "validate_category"]
