from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]

for candidate in (
    ROOT / "libs" / "core" / "src",
    ROOT / "libs" / "adapters" / "src",
    ROOT / "apps" / "cli" / "src",
):
    if str(candidate) not in sys.path:
        sys.path.insert(0, str(candidate))

from hashbench import registry  # noqa: E402


@pytest.fixture
def isolated_registry():
    """Swap the global registry contents out for the duration of a test."""
    original_items = dict(registry._items)  # type: ignore[attr-defined]
    registry._items.clear()  # type: ignore[attr-defined]
    try:
        yield registry
    finally:
        registry._items.clear()  # type: ignore[attr-defined]
        registry._items.update(original_items)  # type: ignore[attr-defined]
