"""
Frostie freezer-inventory item parser.

The package turns a short freeform food description into a structured inventory record and
resolves a single expiration date from AI, explicit-text and shelf-life sources.
"""

from frostie.parsing.parser import ItemTextParser, parse

__all__ = ["__version__", "ItemTextParser", "parse"]

__version__ = "0.1.0"
