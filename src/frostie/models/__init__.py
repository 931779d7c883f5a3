"""Pydantic models defining shared data contracts."""

from frostie.models.item import (
    AiCandidate,
    Category,
    ExpirationSource,
    ExtractedText,
    ParsedItem,
    Period,
    Resolution,
)

__all__ = [
    "AiCandidate",
    "Category",
    "ExpirationSource",
    "ExtractedText",
    "ParsedItem",
    "Period",
    "Resolution",
]
