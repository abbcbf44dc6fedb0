"""Default marks for the dashkit port contract suites.

Each sub-package parametrizes one port (`CacheStore`, `Timer`) over every
adapter, so the same assertions run against every backend.
"""

from pathlib import Path

import pytest

from tests.helpers.markers import mark_items_under

# pylint: disable=unused-argument

CONTRACT_ROOT = Path(__file__).parent.resolve()


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Mark everything under `tests/contract/` as `contract`."""
    mark_items_under(CONTRACT_ROOT, "contract", items)
