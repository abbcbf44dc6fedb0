"""In-memory cache stores.

Exports
-------
- DictCache: insertion-ordered ``dict`` store, the default memoization cache.
- LRUCache: bounded store evicting the least recently used entry.
- WeakKeyCache: ``weakref.WeakKeyDictionary`` store; entries disappear once
  their key object is garbage collected.

None of these persist beyond the process.
"""

from __future__ import annotations

import threading
import weakref
from collections import OrderedDict
from collections.abc import Hashable
from typing import Any

from dashkit.interfaces.cache import CacheStore

__all__ = ["DictCache", "LRUCache", "WeakKeyCache"]


class DictCache(CacheStore):
    """Unbounded cache backed by a plain ``dict`` (insertion ordered)."""

    def __init__(self) -> None:
        self._data: dict[Hashable, Any] = {}

    def has(self, key: Hashable) -> bool:
        return key in self._data

    def get(self, key: Hashable) -> Any:
        return self._data.get(key)

    def set(self, key: Hashable, value: Any) -> None:
        self._data[key] = value

    def delete(self, key: Hashable) -> bool:
        return self._data.pop(key, _MISSING) is not _MISSING

    def clear(self) -> None:
        self._data.clear()

    def keys(self) -> list[Hashable]:
        """Return the stored keys in insertion order."""
        return list(self._data)

    def __len__(self) -> int:
        return len(self._data)


class LRUCache(CacheStore):
    """Bounded cache evicting the least recently used entry.

    Both `get` and a successful `has` count as a use. Access is serialized
    with a lock because reads reorder the underlying ``OrderedDict``.

    Args:
        maxsize: Maximum number of entries; must be at least 1.
    """

    def __init__(self, maxsize: int = 128) -> None:
        if maxsize < 1:
            raise ValueError(f"maxsize must be >= 1, got {maxsize}")
        self.maxsize = maxsize
        self._data: OrderedDict[Hashable, Any] = OrderedDict()
        self._lock = threading.RLock()

    def has(self, key: Hashable) -> bool:
        with self._lock:
            if key in self._data:
                self._data.move_to_end(key)
                return True
            return False

    def get(self, key: Hashable) -> Any:
        with self._lock:
            if key not in self._data:
                return None
            self._data.move_to_end(key)
            return self._data[key]

    def set(self, key: Hashable, value: Any) -> None:
        with self._lock:
            self._data[key] = value
            self._data.move_to_end(key)
            while len(self._data) > self.maxsize:
                self._data.popitem(last=False)

    def delete(self, key: Hashable) -> bool:
        with self._lock:
            return self._data.pop(key, _MISSING) is not _MISSING

    def clear(self) -> None:
        with self._lock:
            self._data.clear()

    def keys(self) -> list[Hashable]:
        """Return the stored keys, least recently used first."""
        with self._lock:
            return list(self._data)

    def __len__(self) -> int:
        return len(self._data)


class WeakKeyCache(CacheStore):
    """Cache holding its keys weakly.

    Keys must be hashable and weak-referenceable (plain ``int``/``str``
    values are not); using such a key raises `TypeError` from `set`.
    """

    def __init__(self) -> None:
        self._data: weakref.WeakKeyDictionary[Any, Any] = weakref.WeakKeyDictionary()

    def has(self, key: Hashable) -> bool:
        return key in self._data

    def get(self, key: Hashable) -> Any:
        try:
            return self._data.get(key)
        except TypeError:
            # not weak-referenceable, so never stored
            return None

    def set(self, key: Hashable, value: Any) -> None:
        self._data[key] = value

    def delete(self, key: Hashable) -> bool:
        try:
            return self._data.pop(key, _MISSING) is not _MISSING
        except TypeError:
            return False

    def clear(self) -> None:
        self._data.clear()

    def __len__(self) -> int:
        return len(self._data)


_MISSING = object()
