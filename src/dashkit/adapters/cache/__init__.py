"""Cache store backends for memoization."""

from .memory import DictCache, LRUCache, WeakKeyCache

__all__ = ["DictCache", "LRUCache", "WeakKeyCache"]
