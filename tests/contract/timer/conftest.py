"""Fixtures for Timer contract tests.

Provided fixtures
-----------------
- **harness**: Parametrized backend wrapped in a `TimerHarness`, whose
  ``settle(ms)`` lets at least ``ms`` milliseconds pass on that backend's
  clock and runs everything that became due. The threading and asyncio
  backends run on real time and are marked ``slow``.
"""

from __future__ import annotations

import asyncio
import time
from collections.abc import Callable, Iterator
from dataclasses import dataclass

import pytest

from dashkit.adapters.timers import AsyncioTimer, ManualTimer, ThreadingTimer
from dashkit.interfaces.timer import Timer

# Extra wall-clock time granted to real timers before asserting.
SETTLE_MARGIN_S = 0.15


@dataclass
class TimerHarness:
    """A timer plus a way to let its clock move forward."""

    timer: Timer
    settle: Callable[[float], None]


@pytest.fixture(
    params=[
        "manual",
        pytest.param("threading", marks=pytest.mark.slow),
        pytest.param("asyncio", marks=pytest.mark.slow),
    ]
)
def harness(request: pytest.FixtureRequest) -> Iterator[TimerHarness]:
    """Yield a harness around a fresh timer for the requested backend."""

    match request.param:
        case "manual":
            manual = ManualTimer()
            yield TimerHarness(manual, manual.advance)
        case "threading":
            yield TimerHarness(
                ThreadingTimer(), lambda ms: time.sleep(ms / 1000 + SETTLE_MARGIN_S)
            )
        case "asyncio":
            loop = asyncio.new_event_loop()
            try:
                yield TimerHarness(
                    AsyncioTimer(loop),
                    lambda ms: loop.run_until_complete(
                        asyncio.sleep(ms / 1000 + SETTLE_MARGIN_S)
                    ),
                )
            finally:
                loop.close()
        case _:
            raise ValueError(f"unknown timer type: {request.param}")
