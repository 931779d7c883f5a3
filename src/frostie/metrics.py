"""Prometheus metrics definitions for Frostie."""

from __future__ import annotations

from prometheus_client import Counter

ITEMS_PARSED = Counter(
    "frostie_items_parsed_total",
    "Number of item descriptions parsed, by expiration date source",
    ["source"],
)

AI_CANDIDATES = Counter(
    "frostie_ai_candidates_total",
    "Number of AI candidate parses seen, by outcome",
    ["result"],
)

__all__ = ["ITEMS_PARSED", "AI_CANDIDATES"]
