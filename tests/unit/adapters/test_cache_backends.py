"""Backend-specific tests for the in-memory cache stores.

Shared has/get/set/delete behaviour is covered by the cache contract suite;
these tests cover LRU eviction/recency and weak-key lifetime.
"""

import gc

import pytest

from dashkit.adapters.cache import DictCache, LRUCache, WeakKeyCache

# pylint: disable=too-few-public-methods


class Key:
    """A hashable, weak-referenceable key object."""


def test_dict_cache_keeps_insertion_order():
    """keys() reflects insertion order; overwriting does not move a key."""
    cache = DictCache()
    for key in ("b", "a", "c"):
        cache.set(key, key.upper())
    cache.set("b", "again")
    assert cache.keys() == ["b", "a", "c"]


def test_lru_evicts_least_recently_used():
    """Inserting past maxsize evicts the oldest unused key."""
    cache = LRUCache(maxsize=2)
    cache.set("a", 1)
    cache.set("b", 2)
    cache.set("c", 3)

    assert not cache.has("a")
    assert cache.keys() == ["b", "c"]
    assert len(cache) == 2


@pytest.mark.parametrize("touch", ["get", "has", "set"])
def test_lru_use_refreshes_recency(touch):
    """get, a successful has, and set all mark a key as recently used."""
    cache = LRUCache(maxsize=2)
    cache.set("a", 1)
    cache.set("b", 2)

    if touch == "set":
        cache.set("a", 10)
    else:
        getattr(cache, touch)("a")
    cache.set("c", 3)

    assert cache.keys() == ["a", "c"]


def test_lru_miss_does_not_change_order():
    """A has/get miss leaves recency untouched."""
    cache = LRUCache(maxsize=3)
    cache.set("a", 1)
    cache.set("b", 2)
    assert cache.get("zzz") is None
    assert not cache.has("zzz")
    assert cache.keys() == ["a", "b"]


@pytest.mark.parametrize("maxsize", [0, -1])
def test_lru_rejects_non_positive_maxsize(maxsize):
    """maxsize must be at least 1."""
    with pytest.raises(ValueError, match="maxsize"):
        LRUCache(maxsize=maxsize)


def test_weak_cache_drops_entries_with_their_keys():
    """Once the key object is collected, its entry disappears."""
    cache = WeakKeyCache()
    key = Key()
    cache.set(key, "value")
    assert cache.has(key)
    assert len(cache) == 1

    del key
    gc.collect()

    assert len(cache) == 0


def test_weak_cache_rejects_non_weakrefable_keys_on_set():
    """Plain ints cannot be weakly referenced."""
    cache = WeakKeyCache()
    with pytest.raises(TypeError):
        cache.set(1, "x")


def test_weak_cache_lookups_with_non_weakrefable_keys_miss():
    """Lookups with such keys report a miss instead of failing."""
    cache = WeakKeyCache()
    assert not cache.has(1)
    assert cache.get(1) is None
    assert cache.delete(1) is False
