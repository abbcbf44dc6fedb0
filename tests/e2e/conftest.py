"""Default marks for the dashkit CLI end-to-end suite.

Tests here drive the `dashkit` command through `CliRunner`.
"""

from pathlib import Path

import pytest

from tests.helpers.markers import mark_items_under

# pylint: disable=unused-argument

E2E_ROOT = Path(__file__).parent.resolve()


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Mark everything under `tests/e2e/` as `e2e`."""
    mark_items_under(E2E_ROOT, "e2e", items)
