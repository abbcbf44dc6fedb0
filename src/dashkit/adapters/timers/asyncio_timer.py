"""Timer backed by an asyncio event loop."""

import asyncio
import logging
from collections.abc import Callable

from dashkit.interfaces.timer import Timer, TimerHandle

logger = logging.getLogger(__name__)


class AsyncioTimer(Timer):
    """Schedule callbacks with ``loop.call_later``.

    Callbacks run on the loop's thread, which gives the single-threaded,
    cooperative model the rate limiters are designed around.

    Args:
        loop: Event loop to schedule on. When omitted, the loop running at
            `schedule` time is used, so `schedule` must then be called from
            within a coroutine or loop callback.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    def schedule(self, fn: Callable[[], None], delay_ms: float) -> TimerHandle:
        loop = self._loop or asyncio.get_running_loop()
        handle = loop.call_later(delay_ms / 1000, fn)
        logger.debug("Scheduled %r in %sms", fn, delay_ms)
        return handle

    def cancel(self, handle: TimerHandle) -> None:
        assert isinstance(handle, asyncio.TimerHandle)
        handle.cancel()
