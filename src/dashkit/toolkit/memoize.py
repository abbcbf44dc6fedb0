"""Function memoization with a pluggable cache store.

`memoize` wraps a function so that repeated calls with an equivalent key
return the stored result instead of recomputing it. The key is the first
positional argument, or whatever a ``resolver`` returns for the call's
arguments.

The cache backing a wrapper is created once, at wrap time, by the
``cache_factory`` in effect at that moment (`DictCache` by default) and is
exposed as the wrapper's ``cache`` attribute. Any object with ``has``,
``get``, ``set`` and ``delete`` methods may be returned by the factory.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from typing import Any, Generic, TypeVar

from dashkit.adapters.cache import DictCache
from dashkit.interfaces.cache import CacheStore
from dashkit.interfaces.errors import NotCallableError

logger = logging.getLogger(__name__)

R = TypeVar("R")

CacheFactory = Callable[[], CacheStore]


class MemoizedFunction(Generic[R]):
    """A memoizing wrapper around ``func``.

    When stored as a class attribute and accessed through an instance, the
    instance is forwarded to ``func`` (and to the resolver) as its first
    argument, but it does not take part in the default key: the default key
    is the first argument after the instance. The cache is per wrapper, so
    every instance shares it.

    Attributes:
        func: The wrapped function.
        resolver: Optional key function, called with the same arguments.
        cache: The store holding results for this wrapper.
    """

    def __init__(
        self,
        func: Callable[..., R],
        resolver: Callable[..., Any] | None,
        cache: CacheStore,
    ) -> None:
        functools.update_wrapper(self, func)
        self.func = func
        self.resolver = resolver
        self.cache = cache

    def __repr__(self) -> str:
        return f"<memoized {getattr(self.func, '__qualname__', self.func)!r}>"

    def __call__(self, *args: Any, **kwargs: Any) -> R:
        return self._invoke((), args, kwargs)

    def __get__(self, instance: object, owner: type | None = None) -> Any:
        if instance is None:
            return self
        bound = functools.partial(self._invoke_bound, instance)
        functools.update_wrapper(bound, self.func)
        # the store stays reachable through instance access
        bound.cache = self.cache
        return bound

    def _invoke_bound(self, instance: object, *args: Any, **kwargs: Any) -> R:
        return self._invoke((instance,), args, kwargs)

    def _invoke(
        self, context: tuple[object, ...], args: tuple[Any, ...], kwargs: dict[str, Any]
    ) -> R:
        if self.resolver is not None:
            key = self.resolver(*context, *args, **kwargs)
        else:
            key = args[0] if args else None

        cache = self.cache
        if cache.has(key):
            logger.debug("Cache hit for %r key=%r", self, key)
            return cache.get(key)

        logger.debug("Cache miss for %r key=%r", self, key)
        result = self.func(*context, *args, **kwargs)
        cache.set(key, result)
        return result


def memoize(
    func: Callable[..., R],
    resolver: Callable[..., Any] | None = None,
    *,
    cache_factory: CacheFactory | None = None,
) -> MemoizedFunction[R]:
    """Wrap ``func`` so results are cached by key.

    Args:
        func: Function whose output depends only on the key.
        resolver: Optional function computing the key from the call's
            arguments. Without one, the key is the first positional argument
            and the remaining arguments are ignored.
        cache_factory: Zero-argument callable producing the cache store.
            Defaults to `DictCache`.

    Returns:
        MemoizedFunction: The wrapper; its ``cache`` attribute is the store.

    Raises:
        NotCallableError: If ``func`` or a non-None ``resolver`` is not
            callable (raised here, not at call time).

    Example:
        >>> calls = []
        >>> def square(n):
        ...     calls.append(n)
        ...     return n * n
        >>> fast = memoize(square)
        >>> fast(4), fast(4), calls
        (16, 16, [4])
    """
    if not callable(func):
        raise NotCallableError("func", func)
    if resolver is not None and not callable(resolver):
        raise NotCallableError("resolver", resolver)
    cache = (cache_factory or DictCache)()
    return MemoizedFunction(func, resolver, cache)


def memoized(
    resolver: Callable[..., Any] | None = None,
    *,
    cache_factory: CacheFactory | None = None,
) -> Callable[[Callable[..., R]], MemoizedFunction[R]]:
    """Decorator form of `memoize`.

    Example:
        >>> @memoized(resolver=lambda a, b: (a, b))
        ... def add(a, b):
        ...     return a + b
        >>> add(1, 2)
        3
    """

    def decorator(func: Callable[..., R]) -> MemoizedFunction[R]:
        return memoize(func, resolver, cache_factory=cache_factory)

    return decorator
