"""Tests for the Legend and sentimentColor resolvers."""

from __future__ import annotations

import pytest

from formatting.engine import enumerate_properties
from formatting.modes import Mode
from formatting.state import ChartOrientationSettings, ConfigurationState, SentimentColorSettings

pytestmark = pytest.mark.unit

FOUR_SLOTS = ["sentimentColorTotal", "sentimentColorFavourable", "sentimentColorAdverse", "sentimentColorOther"]


def _state(*, sentiment: bool) -> ConfigurationState:
    return ConfigurationState(
        chart_orientation=ChartOrientationSettings(use_sentiment_features=sentiment),
        sentiment_color=SentimentColorSettings(sentiment_color_other="#999999"),
    )


@pytest.mark.parametrize("mode", list(Mode))
def test_legend_follows_sentiment_toggle_in_every_mode(mode: Mode) -> None:
    """The legend group is populated only with sentiment features on."""

    assert enumerate_properties("Legend", mode=mode, state=_state(sentiment=False)) == ()

    items = enumerate_properties("Legend", mode=mode, state=_state(sentiment=True))
    assert len(items) == 1
    assert list(items[0].properties) == ["show", "textFavourable", "textAdverse", "fontSize", "fontColor", "fontFamily"]


@pytest.mark.parametrize("mode", [Mode.static, Mode.static_category])
def test_flat_modes_with_sentiment_on_expose_four_slots(mode: Mode, categories) -> None:
    """Sentiment features replace per-category colors with four slots."""

    items = enumerate_properties("sentimentColor", mode=mode, state=_state(sentiment=True), categories=categories)

    assert len(items) == 1
    assert list(items[0].properties) == FOUR_SLOTS


def test_flat_modes_with_sentiment_off_expand_conditional_colors(categories) -> None:
    """Each regular category gets a conditional-formatting fill; the sentinel keeps its slot."""

    items = enumerate_properties(
        "sentimentColor", mode=Mode.static_category, state=_state(sentiment=False), categories=categories
    )

    assert len(items) == 3
    first, second, other = items
    assert first.display_name == "A"
    assert dict(first.properties) == {"fill": {"solid": {"color": "#bar-A"}}}
    assert first.selector is None
    assert first.match_scope == "instancesAndTotals"
    assert first.alt_constant_selector == {"id": "A"}
    assert first.instance_kinds == {"fill": "ConstantOrRule"}
    assert second.alt_constant_selector == {"id": "B"}
    assert other.is_global
    assert dict(other.properties) == {"sentimentColorOther": "#999999"}


@pytest.mark.parametrize(
    "mode",
    [Mode.drillable_category, Mode.drillable_matrix_single_level, Mode.drillable_matrix_multi_level],
)
def test_drill_modes_always_expose_four_slots(mode: Mode, categories) -> None:
    """Outside the flat modes the sentiment toggle is ignored."""

    items = enumerate_properties("sentimentColor", mode=mode, state=_state(sentiment=False), categories=categories)

    assert len(items) == 1
    assert items[0].is_global
    assert list(items[0].properties) == FOUR_SLOTS
