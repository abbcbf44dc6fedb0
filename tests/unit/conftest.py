"""Default marks for the dashkit unit suite.

Tests here exercise one toolkit, adapter or CLI helper module at a time
against in-memory collaborators (`MemoryDocument`, `ManualTimer`,
fake fetchers). They never touch the network or wall-clock time.
"""

from pathlib import Path

import pytest

from tests.helpers.markers import mark_items_under

# pylint: disable=unused-argument

UNIT_ROOT = Path(__file__).parent.resolve()


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Mark everything under `tests/unit/` as `unit`."""
    mark_items_under(UNIT_ROOT, "unit", items)
