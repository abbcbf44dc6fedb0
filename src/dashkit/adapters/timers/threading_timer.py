"""Timer backed by ``threading.Timer`` worker threads."""

import logging
import threading
from collections.abc import Callable

from dashkit.interfaces.timer import Timer, TimerHandle

logger = logging.getLogger(__name__)


class ThreadingTimer(Timer):
    """Run each scheduled callback on its own daemon ``threading.Timer``.

    Callbacks run off the calling thread; callers sharing state with them
    must synchronize. Exceptions raised by a callback go to
    ``threading.excepthook``.
    """

    def schedule(self, fn: Callable[[], None], delay_ms: float) -> TimerHandle:
        """Start a daemon timer thread firing ``fn`` after ``delay_ms``."""
        timer = threading.Timer(delay_ms / 1000, fn)
        timer.daemon = True
        timer.start()
        logger.debug("Scheduled %r in %sms on %s", fn, delay_ms, timer.name)
        return timer

    def cancel(self, handle: TimerHandle) -> None:
        """Cancel the timer thread (no-op once it fired)."""
        assert isinstance(handle, threading.Timer)
        handle.cancel()
