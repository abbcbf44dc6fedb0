"""Directory-based default markers shared by the suite conftests."""

from pathlib import Path

import pytest


def mark_items_under(root: Path, marker_name: str, items: list[pytest.Item]) -> None:
    """Add ``marker_name`` to every collected item below ``root``.

    Items that already carry the marker explicitly are left alone, so a
    module can still opt into extra marks (``slow``, ``property``) on top.
    """
    marker = getattr(pytest.mark, marker_name)
    for item in items:
        if root not in item.path.resolve().parents:
            continue
        if not any(m.name == marker_name for m in item.iter_markers()):
            item.add_marker(marker)
