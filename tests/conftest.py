"""Global pytest fixtures for DASHKIT."""

from __future__ import annotations

import pytest

from dashkit.adapters.document import MemoryDocument
from dashkit.adapters.timers import ManualTimer
from dashkit.bootstrap import Toolkit, bootstrap
from dashkit.config import Settings

# pylint: disable=redefined-outer-name


@pytest.fixture
def document() -> MemoryDocument:
    """Return a fresh, empty in-memory document."""
    return MemoryDocument()


@pytest.fixture
def timer() -> ManualTimer:
    """Return a virtual-clock timer starting at 0ms."""
    return ManualTimer()


@pytest.fixture
def toolkit(document: MemoryDocument, timer: ManualTimer) -> Toolkit:
    """Return a toolkit wired to the ``document`` and ``timer`` fixtures.

    Settings are passed explicitly so the environment never leaks in.
    """
    return bootstrap(document=document, timer=timer, settings=Settings())
