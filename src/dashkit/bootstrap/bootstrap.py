"""Wire collaborators into a `Toolkit`."""

from __future__ import annotations

import dataclasses
import functools
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from dashkit import config
from dashkit.adapters.cache import DictCache, LRUCache, WeakKeyCache
from dashkit.adapters.document import MemoryDocument
from dashkit.adapters.fetcher import UrllibFetcher
from dashkit.adapters.timers import AsyncioTimer, ManualTimer, ThreadingTimer
from dashkit.interfaces.document import Document, Element, Event
from dashkit.interfaces.fetcher import Fetcher, Response
from dashkit.interfaces.timer import Timer
from dashkit.toolkit import helpers
from dashkit.toolkit.click_outside import click_outside
from dashkit.toolkit.element import AugmentedElement, augment
from dashkit.toolkit.memoize import CacheFactory, MemoizedFunction, memoize
from dashkit.toolkit.rate_limit import Debounced, Throttled, debounce, throttle

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Toolkit:
    """The helper namespace bound to one set of collaborators.

    Calling the toolkit with a selector augments the first matching element
    (``_("#menu").hide()``); attributes expose the remaining helpers.

    The cache factory is fixed per toolkit. `with_cache_factory` returns a new
    toolkit for later wrappers; wrappers already created keep their cache.
    """

    document: Document
    timer: Timer
    cache_factory: CacheFactory
    fetcher: Fetcher

    is_null = staticmethod(helpers.is_null)
    is_nil = staticmethod(helpers.is_nil)
    is_number = staticmethod(helpers.is_number)
    is_function = staticmethod(helpers.is_function)
    shuffle = staticmethod(helpers.shuffle)
    pick = staticmethod(helpers.pick)
    omit = staticmethod(helpers.omit)

    def __call__(
        self, selector: str | None, strict: bool = False
    ) -> AugmentedElement | None:
        return self.augment(selector, strict=strict)

    def augment(
        self, selector: str | None, *, strict: bool = False
    ) -> AugmentedElement | None:
        """See `dashkit.toolkit.element.augment`."""
        return augment(selector, document=self.document, strict=strict)

    def click_outside(
        self,
        element: Element | AugmentedElement,
        callback: Callable[[Event], Any],
    ) -> None:
        """See `dashkit.toolkit.click_outside.click_outside`."""
        click_outside(element, callback, document=self.document)

    def memoize(
        self,
        func: Callable[..., Any],
        resolver: Callable[..., Any] | None = None,
    ) -> MemoizedFunction[Any]:
        """See `dashkit.toolkit.memoize.memoize`; uses this toolkit's cache factory."""
        return memoize(func, resolver, cache_factory=self.cache_factory)

    def debounce(
        self, callback: Callable[..., Any], delay_ms: float
    ) -> Debounced:
        """See `dashkit.toolkit.rate_limit.debounce`."""
        return debounce(callback, delay_ms, timer=self.timer)

    def throttle(
        self, callback: Callable[..., Any], delay_ms: float
    ) -> Throttled:
        """See `dashkit.toolkit.rate_limit.throttle`."""
        return throttle(callback, delay_ms, timer=self.timer)

    def fetch(self, url: str, init: Mapping[str, Any] | None = None) -> Response:
        """See `dashkit.toolkit.helpers.fetch`."""
        return helpers.fetch(url, init, fetcher=self.fetcher)

    def with_cache_factory(self, cache_factory: CacheFactory) -> Toolkit:
        """Return a copy of this toolkit using ``cache_factory`` for new wrappers."""
        return dataclasses.replace(self, cache_factory=cache_factory)


def build_timer(kind: str) -> Timer:
    """Build the timer adapter named by ``kind`` (see `config.TIMER_KINDS`)."""
    match kind:
        case "threading":
            return ThreadingTimer()
        case "asyncio":
            return AsyncioTimer()
        case "manual":
            return ManualTimer()
        case _:
            raise ValueError(f"unknown timer kind: {kind}")


def build_cache_factory(kind: str, maxsize: int = 128) -> CacheFactory:
    """Return a zero-argument factory for the cache store named by ``kind``."""
    match kind:
        case "dict":
            return DictCache
        case "lru":
            return functools.partial(LRUCache, maxsize)
        case "weak":
            return WeakKeyCache
        case _:
            raise ValueError(f"unknown cache kind: {kind}")


def build_fetcher(timeout: float) -> Fetcher:
    """Build the default fetcher."""
    return UrllibFetcher(timeout=timeout)


def bootstrap(
    *,
    document: Document | None = None,
    timer: Timer | None = None,
    cache_factory: CacheFactory | None = None,
    fetcher: Fetcher | None = None,
    settings: config.Settings | None = None,
) -> Toolkit:
    """Assemble a `Toolkit`.

    Collaborators passed explicitly win; the others are built from
    ``settings`` (read from the environment when omitted). The default
    document is a fresh, empty `MemoryDocument`.

    Raises:
        InvalidSettingError: If the environment holds an unusable setting.
    """
    settings = settings or config.load_settings()
    toolkit = Toolkit(
        document=document if document is not None else MemoryDocument(),
        timer=timer or build_timer(settings.timer),
        cache_factory=cache_factory or build_cache_factory(
            settings.cache, settings.cache_maxsize
        ),
        fetcher=fetcher or build_fetcher(settings.fetch_timeout),
    )
    logger.debug(
        "Bootstrapped toolkit: document=%s timer=%s fetcher=%s",
        type(toolkit.document).__name__,
        type(toolkit.timer).__name__,
        type(toolkit.fetcher).__name__,
    )
    return toolkit
