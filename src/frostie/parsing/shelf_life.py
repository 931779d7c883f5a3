"""FoodKeeper-style freezer shelf-life lookup."""

from __future__ import annotations

import logging
from typing import Optional

from frostie.models.item import Category
from frostie.parsing.knowledge import KnowledgeBase, ShelfLifeEntry, get_knowledge_base

logger = logging.getLogger(__name__)


def find_entry(name: str, knowledge: Optional[KnowledgeBase] = None) -> Optional[ShelfLifeEntry]:
    """Return the first table entry whose keyword occurs in ``name`` (case-insensitive)."""

    if knowledge is None:
        knowledge = get_knowledge_base()
    lowered = (name or "").lower()
    if not lowered:
        return None
    for entry in knowledge.shelf_life:
        if entry.keyword in lowered:
            return entry
    return None


def lookup(
    name: str,
    category: Category,
    default_days: int,
    knowledge: Optional[KnowledgeBase] = None,
) -> int:
    """Resolve freezer shelf-life days for an item.

    Tiers, in order: keyword table, per-category default, then ``default_days``. A
    category default equal to ``default_days`` counts as "no category data".
    """

    if knowledge is None:
        knowledge = get_knowledge_base()

    entry = find_entry(name, knowledge)
    if entry is not None:
        logger.debug("Shelf-life keyword %r matched %r: %s days", entry.keyword, name, entry.days)
        return entry.days

    category_days = knowledge.category_defaults.get(category)
    if category_days is not None and category_days != default_days:
        logger.debug("Using %s category shelf-life for %r: %s days", category.value, name, category_days)
        return category_days

    logger.debug("No shelf-life data for %r, using default %s days", name, default_days)
    return default_days


__all__ = ["find_entry", "lookup"]
