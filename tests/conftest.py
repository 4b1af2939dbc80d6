"""Pytest fixtures shared across the resolver and API tests."""

from __future__ import annotations

from collections.abc import Sequence

import pytest

from formatting.dto import CategoryRecord
from tests.factories import make_category, make_other


@pytest.fixture
def categories() -> tuple[CategoryRecord, ...]:
    """Return `[A (pillar), B, OTHER]` in binding order."""

    return (make_category("A", is_pillar=True), make_category("B"), make_other())


def pytest_collection_modifyitems(items: Sequence[pytest.Item]) -> None:
    """Enforce that every test has exactly one speed marker.

    - `unit`: pure, fast tests with no Django request cycle.
    - `integration`: tests touching Django views, settings, or the test client.
    """

    invalid: list[str] = []
    for item in items:
        has_unit = item.get_closest_marker("unit") is not None
        has_integration = item.get_closest_marker("integration") is not None
        if has_unit == has_integration:
            markers = []
            if has_unit:
                markers.append("unit")
            if has_integration:
                markers.append("integration")
            invalid.append(f"{item.nodeid} (markers={markers or 'none'})")

    if invalid:
        joined = "\n".join(f"- {nodeid}" for nodeid in invalid)
        raise pytest.UsageError(
            "Each test must have exactly one speed marker: `@pytest.mark.unit` or "
            "`@pytest.mark.integration`.\n"
            f"Offending tests:\n{joined}"
        )
