"""Fixtures for CacheStore contract tests.

Provided fixtures
-----------------
- **store**: Parametrized backend returning a **fresh** `CacheStore` per test.
- **make_key**: Factory for keys every backend accepts. The weak-key store
  only holds weak-referenceable keys, so keys are small objects hashed by
  identity rather than strings.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable

import pytest

from dashkit.adapters.cache import DictCache, LRUCache, WeakKeyCache
from dashkit.interfaces.cache import CacheStore

# pylint: disable=too-few-public-methods


class Key:
    """A weak-referenceable key with identity hashing."""

    def __init__(self, label: str) -> None:
        self.label = label

    def __repr__(self) -> str:
        return f"Key({self.label!r})"


@pytest.fixture(params=["dict", "lru", "weak"])
def store(request: pytest.FixtureRequest) -> CacheStore:
    """Return a fresh cache store for the requested backend.

    Current params:
      - `"dict"` → `DictCache`
      - `"lru"` → `LRUCache` (large enough that nothing is evicted)
      - `"weak"` → `WeakKeyCache`
    """

    match request.param:
        case "dict":
            return DictCache()
        case "lru":
            return LRUCache(maxsize=1024)
        case "weak":
            return WeakKeyCache()
        case _:
            raise ValueError(f"unknown cache type: {request.param}")


@pytest.fixture
def make_key() -> Callable[[str], Hashable]:
    """Return a factory building keys that stay alive for the whole test."""
    alive: list[Key] = []

    def _make(label: str) -> Key:
        key = Key(label)
        alive.append(key)
        return key

    return _make
