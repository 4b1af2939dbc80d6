"""Tests for the LabelsFormatting resolver and its sub-resolvers."""

from __future__ import annotations

import pytest

from formatting.dto import NumberRange
from formatting.engine import enumerate_properties
from formatting.modes import Mode
from formatting.state import ChartOrientationSettings, ConfigurationState, LabelsFormattingSettings

pytestmark = pytest.mark.unit


def _labels(mode: Mode, categories=(), *, sentiment: bool = False, **options: object):
    state = ConfigurationState(
        chart_orientation=ChartOrientationSettings(use_sentiment_features=sentiment),
        labels_formatting=LabelsFormattingSettings(**options),  # type: ignore[arg-type]
    )
    return enumerate_properties("LabelsFormatting", mode=mode, state=state, categories=categories)


def test_hidden_labels_expose_only_show_toggle(categories) -> None:
    """With labels hidden nothing but the toggle is editable."""

    items = _labels(Mode.static, categories, show=False, use_default_font_color=False)

    assert len(items) == 1
    assert dict(items[0].properties) == {"show": False}


def test_default_color_and_position_layout() -> None:
    """Default color and positioning give the seven-item layout."""

    items = _labels(Mode.static, show=True, use_default_font_color=True, use_default_label_positioning=True)

    assert [list(item.properties) for item in items] == [
        ["show", "fontSize", "useDefaultFontColor"],
        ["fontColor"],
        ["fontFamily"],
        ["useDefaultLabelPositioning"],
        ["labelPosition"],
        ["valueFormat", "decimalPlaces"],
        ["HideZeroBlankValues"],
    ]
    assert items[5].valid_ranges == {"decimalPlaces": NumberRange(min=0, max=15)}


@pytest.mark.parametrize(
    ("mode", "sentiment"),
    [(Mode.static, True), (Mode.static_category, True), (Mode.drillable_category, False), (Mode.drillable_matrix_multi_level, False)],
)
def test_sentiment_slots_replace_defaults(mode: Mode, sentiment: bool, categories) -> None:
    """Sentiment features, or any non-flat mode, offer four sentiment slots."""

    items = _labels(
        mode,
        categories,
        sentiment=sentiment,
        use_default_font_color=False,
        use_default_label_positioning=False,
    )

    assert list(items[1].properties) == [
        "sentimentFontColorTotal",
        "sentimentFontColorFavourable",
        "sentimentFontColorAdverse",
        "sentimentFontColorOther",
    ]
    assert list(items[4].properties) == [
        "labelPositionTotal",
        "labelPositionFavourable",
        "labelPositionAdverse",
        "labelPositionOther",
    ]
    assert len(items) == 7


def test_per_category_font_colors_and_positions(categories) -> None:
    """Flat modes without sentiment expand font color and position per category."""

    items = _labels(
        Mode.static,
        categories,
        use_default_font_color=False,
        use_default_label_positioning=False,
        sentiment_font_color_other="#123456",
        label_position_other="Inside base",
    )

    font_a, font_b, font_other = items[1:4]
    assert dict(font_a.properties) == {"fill": {"solid": {"color": "#font-A"}}}
    assert font_a.match_scope == "instancesAndTotals"
    assert font_a.alt_constant_selector == {"id": "A"}
    assert font_b.alt_constant_selector == {"id": "B"}
    assert font_other.is_global
    assert font_other.display_name == "Other"
    assert dict(font_other.properties) == {"sentimentFontColorOther": "#123456"}

    assert list(items[4].properties) == ["fontFamily"]
    assert list(items[5].properties) == ["useDefaultLabelPositioning"]

    pos_a, pos_b, pos_other = items[6:9]
    assert pos_a.selector == {"id": "A"}
    assert dict(pos_a.properties) == {"labelPosition": "Inside end"}
    assert pos_b.display_name == "B"
    assert pos_other.is_global
    assert pos_other.display_name == "Other"
    assert dict(pos_other.properties) == {"labelPositionOther": "Inside base"}

    assert [list(item.properties) for item in items[9:]] == [["valueFormat", "decimalPlaces"], ["HideZeroBlankValues"]]


def test_default_font_color_with_per_category_positions(categories) -> None:
    """The two sub-resolvers switch independently."""

    items = _labels(
        Mode.static_category,
        categories,
        use_default_font_color=True,
        use_default_label_positioning=False,
    )

    assert list(items[1].properties) == ["fontColor"]
    assert len(items) == 9
