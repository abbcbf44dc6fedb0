"""Stateless helpers: type predicates, shuffling, projection and fetch."""

from __future__ import annotations

import numbers
import random
from collections.abc import Collection, Mapping, Sequence
from typing import Any, TypeVar

from dashkit.interfaces.fetcher import Fetcher, Request, Response

T = TypeVar("T")
K = TypeVar("K")
V = TypeVar("V")


def is_null(value: Any = None) -> bool:
    """Return True if ``value`` is None."""
    return value is None


def is_nil(value: Any = None) -> bool:
    """Return True if ``value`` is None.

    Python has a single null value, so this coincides with `is_null`; both
    exist so either spelling can be used.
    """
    return value is None


def is_number(value: Any = None) -> bool:
    """Return True for numeric values (``int``, ``float``, ``Decimal``...), not ``bool``."""
    return isinstance(value, numbers.Number) and not isinstance(value, bool)


def is_function(value: Any = None) -> bool:
    """Return True if ``value`` can be called."""
    return callable(value)


def shuffle(items: Sequence[T], rng: random.Random | None = None) -> list[T]:
    """Return a new list holding a uniformly random permutation of ``items``.

    Fisher–Yates: position ``i`` is swapped with a uniform position in
    ``[i, n)``. ``items`` itself is left untouched.

    Args:
        items: Values to shuffle.
        rng: Random source; the module-level generator when omitted.
    """
    result = list(items)
    randrange = (rng or random).randrange
    n = len(result)
    for i in range(n - 1):
        j = randrange(i, n)
        result[i], result[j] = result[j], result[i]
    return result


def _key_set(keys: Collection[K] | str) -> Collection[K]:
    # a bare string is one key, not a collection of characters
    return {keys} if isinstance(keys, str) else keys


def pick(obj: Mapping[K, V] | None, keys: Collection[K]) -> dict[K, V]:
    """Return the entries of ``obj`` whose key is in ``keys`` ({} for None).

    A single string is accepted as one key.
    """
    if obj is None:
        return {}
    keys = _key_set(keys)
    return {key: value for key, value in obj.items() if key in keys}


def omit(obj: Mapping[K, V] | None, keys: Collection[K]) -> dict[K, V]:
    """Return the entries of ``obj`` whose key is not in ``keys`` ({} for None).

    A single string is accepted as one key.
    """
    if obj is None:
        return {}
    keys = _key_set(keys)
    return {key: value for key, value in obj.items() if key not in keys}


def fetch(
    url: str, init: Mapping[str, Any] | None = None, *, fetcher: Fetcher
) -> Response:
    """Fetch ``url`` through ``fetcher``; see `Request.build` for ``init``."""
    return fetcher.fetch(Request.build(url, init))
