"""Rule-based item parsing pipeline."""

from .extractor import extract
from .knowledge import KnowledgeBase, get_knowledge_base, load_knowledge_base
from .llm_client import ItemLLMClient, build_item_llm_client
from .parser import ItemTextParser, parse

__all__ = [
    "ItemLLMClient",
    "ItemTextParser",
    "KnowledgeBase",
    "build_item_llm_client",
    "extract",
    "get_knowledge_base",
    "load_knowledge_base",
    "parse",
]
