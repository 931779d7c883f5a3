"""Strip tags, dates, size and quantity tokens from freeform item text."""

from __future__ import annotations

import logging
import re
from datetime import date
from typing import Optional, Union

from frostie.models.item import ExtractedText, Period
from frostie.parsing.rules import (
    DATE_PATTERNS,
    QUANTITY_LEADING_PATTERN,
    QUANTITY_OF_PATTERN,
    SIZE_PATTERN,
    TAG_PATTERN,
    Rule,
    apply_first,
    collapse_whitespace,
    to_number,
)

logger = logging.getLogger(__name__)

_EDGE_PUNCTUATION = " \t,.;:-"


def parse_absolute_date(value: str) -> Optional[date]:
    """Read a month/day/year string with ``-`` or ``/`` separators; None when invalid."""

    parts = re.split(r"[-/]", value.strip())
    if len(parts) != 3:
        return None
    try:
        month, day, year = (int(part) for part in parts)
        if year < 100:
            year += 2000
        return date(year, month, day)
    except ValueError:
        return None


def _period_from_match(match: re.Match[str]) -> Optional[Period]:
    amount = to_number(match.group(1))
    if amount is None:
        return None
    unit = match.group(2).lower().rstrip("s")
    return Period(amount=amount, unit=unit)


def _date_from_match(match: re.Match[str]) -> Optional[date]:
    return parse_absolute_date(match.group(1))


DATE_RULES: tuple[Rule[Union[date, Period]], ...] = tuple(
    Rule(
        name=pattern.kind,
        pattern=pattern.regex,
        extract=_date_from_match if pattern.kind == "explicit-date" else _period_from_match,
    )
    for pattern in DATE_PATTERNS
)

SIZE_RULES: tuple[Rule[str], ...] = (
    Rule(name="size", pattern=SIZE_PATTERN, extract=lambda match: match.group(1).strip()),
)

QUANTITY_RULES: tuple[Rule[int], ...] = (
    Rule(name="quantity-of", pattern=QUANTITY_OF_PATTERN, extract=lambda m: to_number(m.group(1))),
    Rule(name="quantity", pattern=QUANTITY_LEADING_PATTERN, extract=lambda m: to_number(m.group(1))),
)


def extract_tags(text: str) -> tuple[list[str], str]:
    """Return ``#tags`` in order of appearance (deduplicated) and the text without them."""

    tags: list[str] = []
    for tag in TAG_PATTERN.findall(text):
        if tag not in tags:
            tags.append(tag)
    return tags, collapse_whitespace(TAG_PATTERN.sub(" ", text))


def extract(raw_text: str) -> ExtractedText:
    """Run tag, date, size and quantity extraction in that fixed order.

    Each step removes its match before the next runs, so later steps only ever see the
    residual text. Whatever survives all four steps is the item name.
    """

    working = collapse_whitespace(raw_text or "")

    tags, working = extract_tags(working)

    explicit_date: Optional[date] = None
    explicit_period: Optional[Period] = None
    date_match = apply_first(DATE_RULES, working)
    if date_match is not None:
        working = date_match.residual
        if isinstance(date_match.value, Period):
            explicit_period = date_match.value
        elif isinstance(date_match.value, date):
            explicit_date = date_match.value
        else:
            logger.debug("Discarded unreadable date expression %r", date_match.matched_text)

    size = ""
    size_match = apply_first(SIZE_RULES, working)
    if size_match is not None and size_match.value:
        size = size_match.value
        working = size_match.residual

    quantity = 1
    quantity_match = apply_first(QUANTITY_RULES, working)
    if quantity_match is not None:
        working = quantity_match.residual
        if quantity_match.value:
            quantity = quantity_match.value

    if working.lower().startswith("of "):
        working = working[3:]

    name = collapse_whitespace(working).strip(_EDGE_PUNCTUATION)
    return ExtractedText(
        name=name,
        quantity=max(1, quantity),
        size=size,
        tags=tags,
        explicit_date=explicit_date,
        explicit_period=explicit_period,
    )


__all__ = ["DATE_RULES", "extract", "extract_tags", "parse_absolute_date"]
