"""Cache store interface used to back memoization."""

import abc
from collections.abc import Hashable
from typing import Any


class CacheStore(abc.ABC):
    """Contract for a key/value store backing a memoized function.

    The memoizer only relies on `has`, `get`, `set` and `delete`; key equality
    is whatever the concrete store defines. A second `set` for the same key
    overwrites the first.
    """

    @abc.abstractmethod
    def has(self, key: Hashable) -> bool:
        """Return True if a value is stored under ``key``."""

    @abc.abstractmethod
    def get(self, key: Hashable) -> Any:
        """Return the value stored under ``key``, or None if absent."""

    @abc.abstractmethod
    def set(self, key: Hashable, value: Any) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""

    @abc.abstractmethod
    def delete(self, key: Hashable) -> bool:
        """Remove ``key``.

        Returns:
            bool: True if an entry was removed, False if ``key`` was absent.
        """

    @abc.abstractmethod
    def clear(self) -> None:
        """Remove every entry."""

    @abc.abstractmethod
    def __len__(self) -> int:
        """Return the number of stored entries."""
