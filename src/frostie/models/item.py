"""Pydantic models for parsed freezer items."""

from __future__ import annotations

import json
import re
from datetime import date
from enum import Enum
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


def _category_key(value: str) -> str:
    return re.sub(r"[^a-z0-9]", "", value.lower())


class Category(str, Enum):
    """Closed set of freezer item categories; values are the display labels."""

    MEAT_POULTRY = "Meat & Poultry"
    SEAFOOD = "Seafood"
    FRUITS_VEGETABLES = "Fruits & Vegetables"
    PREPARED_MEALS = "Prepared Meals"
    READY_TO_EAT = "Ready-to-Eat"
    BAKERY_BREAD = "Bakery & Bread"
    DAIRY_ALTERNATIVES = "Dairy & Alternatives"
    SOUPS_BROTHS = "Soups & Broths"
    HERBS_SEASONINGS = "Herbs & Seasonings"
    OTHER = "Other"

    @classmethod
    def coerce(cls, value: Any) -> Optional["Category"]:
        """Match a label ("Meat & Poultry"), member name or CamelCase name; None when unknown."""

        if isinstance(value, cls):
            return value
        if not isinstance(value, str) or not value.strip():
            return None
        key = _category_key(value)
        for member in cls:
            if key in (_category_key(member.value), _category_key(member.name)):
                return member
        return None


class ExpirationSource(str, Enum):
    """Which resolution tier produced the final expiration date."""

    AI = "ai"
    EXPLICIT = "explicit"
    FOODKEEPER = "foodkeeper"
    DEFAULT = "default"


class Period(BaseModel):
    """Relative shelf period such as "2 weeks"."""

    amount: int = Field(ge=0)
    unit: Literal["day", "week", "month"]

    model_config = ConfigDict(frozen=True)


class ExtractedText(BaseModel):
    """Structural tokens pulled out of the raw input plus the residual item name."""

    name: str
    quantity: int = Field(default=1, ge=1)
    size: str = ""
    tags: list[str] = Field(default_factory=list)
    explicit_date: Optional[date] = None
    explicit_period: Optional[Period] = None

    model_config = ConfigDict(frozen=True)


class Resolution(BaseModel):
    """Final expiration date together with its provenance."""

    expiration_date: date
    source: ExpirationSource

    model_config = ConfigDict(frozen=True)


class AiCandidate(BaseModel):
    """Best-guess fields supplied by an upstream model; every field may be missing."""

    name: Optional[str] = None
    quantity: Optional[int] = None
    category: Optional[str] = None
    size: Optional[str] = None
    expiration_date: Optional[str] = Field(default=None, alias="expirationDate")
    tags: list[str] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @classmethod
    def from_payload(cls, payload: Any) -> Optional["AiCandidate"]:
        """Leniently coerce a JSON string or mapping; fields with the wrong type are dropped."""

        if isinstance(payload, cls):
            return payload
        if isinstance(payload, (str, bytes)):
            try:
                payload = json.loads(payload)
            except (TypeError, ValueError):
                return None
        if not isinstance(payload, dict):
            return None

        def _text(*keys: str) -> Optional[str]:
            for key in keys:
                value = payload.get(key)
                if isinstance(value, str) and value.strip():
                    return value.strip()
            return None

        quantity = payload.get("quantity")
        if isinstance(quantity, bool):
            quantity = None
        elif isinstance(quantity, float) and quantity.is_integer():
            quantity = int(quantity)
        elif isinstance(quantity, str) and quantity.strip().isdecimal():
            try:
                quantity = int(quantity.strip())
            except ValueError:
                quantity = None
        if not isinstance(quantity, int) or quantity < 1:
            quantity = None

        raw_tags = payload.get("tags")
        tags: list[str] = []
        if isinstance(raw_tags, list):
            for tag in raw_tags:
                if isinstance(tag, str) and tag.strip() and tag.strip() not in tags:
                    tags.append(tag.strip())

        return cls(
            name=_text("name"),
            quantity=quantity,
            category=_text("category"),
            size=_text("size"),
            expiration_date=_text("expirationDate", "expiration_date"),
            tags=tags,
        )


class ParsedItem(BaseModel):
    """Structured inventory record produced for one input string."""

    name: str
    quantity: int = Field(ge=1)
    category: Category = Category.OTHER
    size: str = ""
    expiration_date: date = Field(alias="expirationDate")
    tags: list[str] = Field(default_factory=list, max_length=3)
    expiration_source: ExpirationSource = Field(alias="expirationSource")

    model_config = ConfigDict(frozen=True, populate_by_name=True)
