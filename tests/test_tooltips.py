"""Tests for the tooltip boundary delegates."""

from __future__ import annotations

from typing import Any

import pytest

from formatting.tooltips import (
    TooltipDataItem,
    TooltipEventArgs,
    TooltipServiceWrapper,
    tooltip_identity_for_category,
    tooltip_items_for_category,
)
from tests.factories import make_category, make_other

pytestmark = pytest.mark.unit


class _RecordingWrapper:
    """In-memory stand-in for the host interaction layer."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, Any]] = []

    def add_tooltip(self, selection, get_tooltip_info, get_data_point_identity, reload_tooltip_data_on_mouse_move=False):
        self.calls.append(("add", selection))

    def hide(self) -> None:
        self.calls.append(("hide", None))


def test_recording_wrapper_satisfies_protocol() -> None:
    """Any object with add_tooltip/hide can serve as the interaction layer."""

    assert isinstance(_RecordingWrapper(), TooltipServiceWrapper)
    assert not isinstance(object(), TooltipServiceWrapper)


def test_tooltip_items_for_regular_category() -> None:
    """Bars show their display name and formatted value."""

    record = make_category("Sales", display_name="Net sales", formatted_value="1.2K")

    items = tooltip_items_for_category(TooltipEventArgs(data=record, coordinates=(1.0, 2.0)))

    assert items == [TooltipDataItem(display_name="Net sales", value="1.2K")]


def test_tooltip_items_include_child_count_for_drill_nodes() -> None:
    """Drill nodes report how many children they roll up."""

    record = make_category("Region", formatted_value="9", children_count=4)

    items = tooltip_items_for_category(TooltipEventArgs(data=record, coordinates=(0.0, 0.0), is_touch_event=True))

    assert items[-1] == TooltipDataItem(display_name="Items", value="4")


def test_tooltip_identity_skips_sentinel() -> None:
    """The "other" bucket is never keyed by identity."""

    assert tooltip_identity_for_category(TooltipEventArgs(data=make_category("A"), coordinates=(0, 0))) == {"id": "A"}
    assert tooltip_identity_for_category(TooltipEventArgs(data=make_other(), coordinates=(0, 0))) is None
