"""Timer-based rate limiting: debounce and throttle.

Both wrappers hold at most one pending timer handle and never return the
callback's result to their caller; the callback runs later, in whatever
execution context the `Timer` provides.

- `Debounced`: every call cancels the pending invocation and schedules a new
  one, so only the last call of a burst fires, ``delay_ms`` after it.
- `Throttled`: while an invocation is pending, calls are dropped; the first
  call of a burst fires ``delay_ms`` after it, with its own arguments.

Callback errors are logged and re-raised inside the timer's context; the
original caller never sees them.
"""

from __future__ import annotations

import functools
import logging
import numbers
import threading
from collections.abc import Callable
from typing import Any

from dashkit.interfaces.errors import NotCallableError
from dashkit.interfaces.timer import Timer, TimerHandle

logger = logging.getLogger(__name__)


class _RateLimited:
    """State and validation shared by both policies."""

    def __init__(self, callback: Callable[..., Any], delay_ms: float, timer: Timer):
        if not callable(callback):
            raise NotCallableError("callback", callback)
        if (
            not isinstance(delay_ms, numbers.Real)
            or isinstance(delay_ms, bool)
            or delay_ms < 0
        ):
            raise ValueError(f"delay_ms must be a non-negative number, got {delay_ms!r}")
        functools.update_wrapper(self, callback)
        self.callback = callback
        self.delay_ms = delay_ms
        self.timer = timer
        self._lock = threading.Lock()
        self._handle: TimerHandle | None = None
        # identifies the invocation allowed to fire
        self._ticket: object | None = None

    def __get__(self, instance: object, owner: type | None = None) -> Any:
        if instance is None:
            return self
        return functools.partial(self, instance)

    @property
    def pending(self) -> bool:
        """True while an invocation is scheduled and has not fired yet."""
        return self._ticket is not None

    def _run(self, args: tuple[Any, ...], kwargs: dict[str, Any]) -> None:
        try:
            self.callback(*args, **kwargs)
        except Exception:  # pylint: disable=broad-except
            logger.exception("%s callback %r raised", type(self).__name__, self.callback)
            raise


class Debounced(_RateLimited):
    """Postpone ``callback`` until ``delay_ms`` passed without a new call."""

    def __call__(self, *args: Any, **kwargs: Any) -> None:
        with self._lock:
            if self._handle is not None:
                self.timer.cancel(self._handle)
            ticket = object()
            self._ticket = ticket
            self._handle = self.timer.schedule(
                lambda: self._fire(ticket, args, kwargs), self.delay_ms
            )

    def _fire(self, ticket: object, args: tuple[Any, ...], kwargs: dict[str, Any]):
        with self._lock:
            if self._ticket is not ticket:
                # superseded by a later call whose cancel came too late
                return
        try:
            self._run(args, kwargs)
        finally:
            with self._lock:
                if self._ticket is ticket:
                    self._ticket = None
                    self._handle = None


class Throttled(_RateLimited):
    """Run ``callback`` at most once per ``delay_ms`` window.

    The first call of a window schedules the invocation with its arguments;
    later calls in the same window are discarded.
    """

    def __call__(self, *args: Any, **kwargs: Any) -> None:
        with self._lock:
            if self._ticket is not None:
                logger.debug("Throttled call to %r dropped", self.callback)
                return
            ticket = object()
            self._ticket = ticket
            self._handle = self.timer.schedule(
                lambda: self._fire(args, kwargs), self.delay_ms
            )

    def _fire(self, args: tuple[Any, ...], kwargs: dict[str, Any]) -> None:
        # cleared first so a failing callback never wedges the throttle
        with self._lock:
            self._ticket = None
            self._handle = None
        self._run(args, kwargs)


def debounce(callback: Callable[..., Any], delay_ms: float, *, timer: Timer) -> Debounced:
    """Return a debounced wrapper around ``callback``.

    Args:
        callback: Function to postpone.
        delay_ms: Quiet period in milliseconds.
        timer: Timer used to schedule and cancel invocations.

    Raises:
        NotCallableError: If ``callback`` is not callable.
        ValueError: If ``delay_ms`` is negative or not a number.
    """
    return Debounced(callback, delay_ms, timer)


def throttle(callback: Callable[..., Any], delay_ms: float, *, timer: Timer) -> Throttled:
    """Return a throttled wrapper around ``callback``.

    Args:
        callback: Function to rate limit.
        delay_ms: Window length in milliseconds.
        timer: Timer used to schedule invocations.

    Raises:
        NotCallableError: If ``callback`` is not callable.
        ValueError: If ``delay_ms`` is negative or not a number.
    """
    return Throttled(callback, delay_ms, timer)
