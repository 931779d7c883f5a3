"""First-match-wins regex rules that consume what they capture."""

from __future__ import annotations

import dataclasses
import re
from typing import Callable, Generic, Iterable, Literal, Optional, TypeVar

T = TypeVar("T")

NUMBER_WORDS = {
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
    "ten": 10,
}

NUMBER = r"(\d+|one|two|three|four|five|six|seven|eight|nine|ten)"
PERIOD_UNIT = r"(days?|weeks?|months?)"


def to_number(token: str) -> Optional[int]:
    """Convert a digit string or a number word (one..ten) into an int."""

    token = token.strip().lower()
    if token.isdigit():
        return int(token)
    return NUMBER_WORDS.get(token)


def collapse_whitespace(value: str) -> str:
    return re.sub(r"\s+", " ", value).strip()


@dataclasses.dataclass(frozen=True)
class Rule(Generic[T]):
    """A named pattern plus the function that turns its match into a value."""

    name: str
    pattern: re.Pattern[str]
    extract: Callable[[re.Match[str]], Optional[T]]


@dataclasses.dataclass(frozen=True)
class RuleMatch(Generic[T]):
    rule: Rule[T]
    value: Optional[T]
    matched_text: str
    residual: str


def apply_first(rules: Iterable[Rule[T]], text: str) -> Optional[RuleMatch[T]]:
    """Apply the first rule whose pattern matches ``text``.

    The matched substring is always removed from the residual text, even when the rule's
    extractor rejects the value (e.g. an impossible calendar date).
    """

    for rule in rules:
        match = rule.pattern.search(text)
        if not match:
            continue
        try:
            value = rule.extract(match)
        except (ValueError, OverflowError):
            value = None
        residual = collapse_whitespace(text[: match.start()] + " " + text[match.end() :])
        return RuleMatch(rule=rule, value=value, matched_text=match.group(0), residual=residual)
    return None


@dataclasses.dataclass(frozen=True)
class DatePattern:
    regex: re.Pattern[str]
    kind: Literal["explicit-date", "relative-period"]


# Priority order: the first pattern that matches is the only date expression extracted.
DATE_PATTERNS: tuple[DatePattern, ...] = (
    DatePattern(
        re.compile(r"expires?:?\s?(\d{1,2}[-/]\d{1,2}[-/]\d{2,4})\b", re.IGNORECASE),
        "explicit-date",
    ),
    DatePattern(
        re.compile(rf"expires?\s+in\s+{NUMBER}\s+{PERIOD_UNIT}\b", re.IGNORECASE),
        "relative-period",
    ),
    DatePattern(
        re.compile(rf"good\s+for\s+{NUMBER}\s+{PERIOD_UNIT}\b", re.IGNORECASE),
        "relative-period",
    ),
    DatePattern(
        re.compile(rf"for\s+{NUMBER}\s+{PERIOD_UNIT}\b", re.IGNORECASE),
        "relative-period",
    ),
    DatePattern(
        re.compile(rf"\bin\s+{NUMBER}\s+{PERIOD_UNIT}\b", re.IGNORECASE),
        "relative-period",
    ),
)

SIZE_PATTERN = re.compile(
    r"(\d+(?:\.\d+)?\s*(?:fl\.?\s*oz|lbs?|pounds?|kilograms?|kg|grams?|g|ounces?|oz"
    r"|milliliters?|ml))\b",
    re.IGNORECASE,
)

TAG_PATTERN = re.compile(r"#(\w+)")

_CONTAINER = (
    r"(?:bags?|box(?:es)?|packs?|packages?|containers?|cans?|jars?|bottles?|tubs?|trays?"
    r"|cartons?|pieces?|portions?|servings?|bunch(?:es)?|loaf|loaves|blocks?)"
)

QUANTITY_OF_PATTERN = re.compile(rf"^{NUMBER}\s+(?:{_CONTAINER}\s+)?of\s+", re.IGNORECASE)
QUANTITY_LEADING_PATTERN = re.compile(rf"^{NUMBER}\s+", re.IGNORECASE)


__all__ = [
    "DATE_PATTERNS",
    "DatePattern",
    "NUMBER_WORDS",
    "QUANTITY_LEADING_PATTERN",
    "QUANTITY_OF_PATTERN",
    "Rule",
    "RuleMatch",
    "SIZE_PATTERN",
    "TAG_PATTERN",
    "apply_first",
    "collapse_whitespace",
    "to_number",
]
