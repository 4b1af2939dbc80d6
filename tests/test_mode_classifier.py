"""Tests for operating mode classification."""

from __future__ import annotations

import pytest

from formatting.modes import Mode, classify_mode

pytestmark = pytest.mark.unit


@pytest.mark.parametrize(
    ("visual_type", "expected"),
    [
        ("static", Mode.static),
        ("staticCategory", Mode.static_category),
        ("drillableCategory", Mode.drillable_category),
    ],
)
def test_named_visual_types_ignore_row_depth(visual_type: str, expected: Mode) -> None:
    """Named type tags map directly to their mode whatever the depth."""

    assert classify_mode(visual_type, 3) is expected
    assert classify_mode(visual_type) is expected


def test_matrix_depth_selects_single_or_multi_level() -> None:
    """Other tags classify by row hierarchy depth."""

    assert classify_mode("drillable", 1) is Mode.drillable_matrix_single_level
    assert classify_mode("drillable", 2) is Mode.drillable_matrix_multi_level
    assert classify_mode("somethingNew", "1") is Mode.drillable_matrix_single_level


@pytest.mark.parametrize("row_levels", [None, 0, -2, "deep", 1.5, True, [1]])
def test_unusable_depth_fails_closed_to_multi_level(row_levels: object) -> None:
    """Missing or malformed depth resolves to the deepest matrix mode without raising."""

    assert classify_mode("drillable", row_levels) is Mode.drillable_matrix_multi_level
    assert classify_mode(None, row_levels) is Mode.drillable_matrix_multi_level


def test_per_category_support_is_limited_to_flat_modes() -> None:
    """Only the flat modes offer per-category overrides."""

    assert {mode for mode in Mode if mode.supports_per_category} == {Mode.static, Mode.static_category}
