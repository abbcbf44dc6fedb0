"""Timer backends."""

from .asyncio_timer import AsyncioTimer
from .manual import ManualTimer
from .threading_timer import ThreadingTimer

__all__ = ["AsyncioTimer", "ManualTimer", "ThreadingTimer"]
