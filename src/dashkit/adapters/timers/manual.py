"""Deterministic timer driven by a virtual millisecond clock.

Nothing fires on its own: callers move time forward with `advance` (or
drain everything with `run_all`) and due callbacks run synchronously on the
caller's thread, in due-time order and, for equal due times, in scheduling
order. Exceptions raised by a callback propagate out of `advance`.

Note:
    Intended for tests, demos and simulations, not for production use.
"""

from __future__ import annotations

import heapq
import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from dashkit.interfaces.timer import Timer, TimerHandle

logger = logging.getLogger(__name__)


@dataclass(order=True)
class ScheduledCall:
    """A callback waiting on the virtual clock."""

    due: float
    seq: int
    fn: Callable[[], None] = field(compare=False)
    cancelled: bool = field(default=False, compare=False)
    fired: bool = field(default=False, compare=False)


class ManualTimer(Timer):
    """A `Timer` whose clock only moves when told to.

    Args:
        start: Initial clock value in milliseconds.
    """

    def __init__(self, start: float = 0) -> None:
        self._now = start
        self._seq = 0
        self._queue: list[ScheduledCall] = []
        self._live = 0

    @property
    def now(self) -> float:
        """Current virtual time in milliseconds."""
        return self._now

    @property
    def pending_count(self) -> int:
        """Number of scheduled callbacks that have neither fired nor been cancelled."""
        return self._live

    def schedule(self, fn: Callable[[], None], delay_ms: float) -> TimerHandle:
        self._seq += 1
        call = ScheduledCall(due=self._now + max(delay_ms, 0), seq=self._seq, fn=fn)
        heapq.heappush(self._queue, call)
        self._live += 1
        return call

    def cancel(self, handle: TimerHandle) -> None:
        assert isinstance(handle, ScheduledCall)
        if handle.cancelled or handle.fired:
            return
        handle.cancelled = True
        self._live -= 1
        self._prune()

    def _prune(self) -> None:
        # cancelled entries deeper in the heap are dropped once they reach the head
        while self._queue and self._queue[0].cancelled:
            heapq.heappop(self._queue)

    def advance(self, ms: float) -> int:
        """Move the clock forward by ``ms`` and run every callback now due.

        Callbacks scheduled while advancing also run if they fall due within
        the window.

        Returns:
            int: Number of callbacks that ran.
        """
        if ms < 0:
            raise ValueError(f"cannot move the clock backwards ({ms}ms)")
        target = self._now + ms
        ran = 0
        while self._queue and self._queue[0].due <= target:
            call = heapq.heappop(self._queue)
            if call.cancelled:
                continue
            self._now = call.due
            call.fired = True
            self._live -= 1
            ran += 1
            call.fn()
        self._now = target
        self._prune()
        logger.debug("Advanced virtual clock to %sms (%d fired)", target, ran)
        return ran

    def run_all(self) -> int:
        """Advance until no callback is pending.

        Returns:
            int: Number of callbacks that ran.
        """
        ran = 0
        while self.pending_count:
            next_due = self._queue[0].due
            ran += self.advance(next_due - self._now)
        return ran
