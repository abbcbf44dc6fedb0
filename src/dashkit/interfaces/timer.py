"""Timer interface: schedule or cancel a callback after a delay."""

import abc
from collections.abc import Callable

# Opaque to callers; each adapter decides what a handle is.
TimerHandle = object


class Timer(abc.ABC):
    """Contract for a one-shot callback scheduler.

    Scheduled callbacks run once, after at least ``delay_ms`` milliseconds,
    on whatever execution context the adapter provides. Cancelling a handle
    that already fired or was already cancelled is a no-op.
    """

    @abc.abstractmethod
    def schedule(self, fn: Callable[[], None], delay_ms: float) -> TimerHandle:
        """Schedule ``fn`` to run once after ``delay_ms`` milliseconds."""

    @abc.abstractmethod
    def cancel(self, handle: TimerHandle) -> None:
        """Cancel a pending callback."""
