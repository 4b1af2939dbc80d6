"""Tests for the definePillars resolver."""

from __future__ import annotations

import pytest

from formatting.engine import enumerate_properties
from formatting.modes import Mode
from formatting.resolvers import has_explicit_pillar
from formatting.state import ConfigurationState, DefinePillarsSettings
from tests.factories import make_category, make_other

pytestmark = pytest.mark.unit


def _state(*, total_pillar: bool) -> ConfigurationState:
    return ConfigurationState(define_pillars=DefinePillarsSettings(total_pillar=total_pillar))


def test_static_mode_emits_one_targeted_item_per_regular_category(categories) -> None:
    """Static mode exposes each category's pillar flag and skips the sentinel."""

    items = enumerate_properties("definePillars", mode=Mode.static, state=_state(total_pillar=True), categories=categories)

    assert [item.display_name for item in items] == ["A", "B"]
    assert [dict(item.properties) for item in items] == [{"pillars": True}, {"pillars": False}]
    assert [item.selector for item in items] == [{"id": "A"}, {"id": "B"}]
    assert not any(item.is_global for item in items)


def test_static_category_appends_total_pillar_when_only_pillar_is_last() -> None:
    """A lone pillar in the last regular position does not count as an explicit pillar."""

    categories = (make_category("B"), make_category("A", is_pillar=True), make_other())

    items = enumerate_properties(
        "definePillars", mode=Mode.static_category, state=_state(total_pillar=False), categories=categories
    )

    assert len(items) == 3
    assert [dict(item.properties) for item in items[:2]] == [{"pillars": False}, {"pillars": True}]
    assert items[2].is_global
    assert dict(items[2].properties) == {"Totalpillar": False}


def test_static_category_omits_total_pillar_when_an_earlier_pillar_exists(categories) -> None:
    """An explicit pillar before the last regular category hides the total pillar toggle."""

    items = enumerate_properties(
        "definePillars", mode=Mode.static_category, state=_state(total_pillar=False), categories=categories
    )

    assert [item.display_name for item in items] == ["A", "B"]
    assert not any(item.is_global for item in items)


def test_static_category_total_pillar_on_suppresses_per_category_items(categories) -> None:
    """With the total pillar on, only the global toggle is offered."""

    items = enumerate_properties(
        "definePillars", mode=Mode.static_category, state=_state(total_pillar=True), categories=categories
    )

    assert len(items) == 1
    assert items[0].is_global
    assert dict(items[0].properties) == {"Totalpillar": True}


def test_drillable_category_exposes_only_total_pillar(categories) -> None:
    """Drill hierarchies expose one global toggle and no per-node items."""

    items = enumerate_properties(
        "definePillars", mode=Mode.drillable_category, state=_state(total_pillar=False), categories=categories
    )

    assert len(items) == 1
    assert dict(items[0].properties) == {"Totalpillar": False}


@pytest.mark.parametrize("mode", [Mode.drillable_matrix_single_level, Mode.drillable_matrix_multi_level])
def test_matrix_modes_expose_no_pillar_items(mode: Mode, categories) -> None:
    """Matrix modes have nothing to show in the pillar group."""

    assert enumerate_properties("definePillars", mode=mode, state=ConfigurationState(), categories=categories) == ()


def test_has_explicit_pillar_ignores_sentinel_and_last_regular_category() -> None:
    """Only flagged, non-sentinel, non-last categories qualify."""

    last_only = (make_category("A"), make_category("B", is_pillar=True), make_other())
    first = (make_category("A", is_pillar=True), make_category("B"), make_other())

    assert has_explicit_pillar(last_only, total_pillar=False) is False
    assert has_explicit_pillar(first, total_pillar=False) is True
    assert has_explicit_pillar(first, total_pillar=True) is False
    assert has_explicit_pillar((), total_pillar=False) is False


def test_category_without_identity_falls_back_to_global_item() -> None:
    """A record without an identity never produces a targeted item."""

    categories = (make_category("A", identity=None, is_pillar=True), make_category("B"))

    items = enumerate_properties("definePillars", mode=Mode.static, state=ConfigurationState(), categories=categories)

    assert items[0].is_global
    assert items[0].display_name == "A"
    assert dict(items[0].properties) == {"pillars": True}
    assert items[1].selector == {"id": "B"}
