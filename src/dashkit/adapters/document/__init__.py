"""In-memory document backend."""

from .memory import MemoryDocument, MemoryElement
from .selectors import SelectorList, parse_selector

__all__ = ["MemoryDocument", "MemoryElement", "SelectorList", "parse_selector"]
