"""Configuration state of the waterfall visual.

Each option group of the format pane is a frozen dataclass. Field metadata
carries the host-facing option name so the resolvers and the payload codec
share one naming table.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any

_HOST = "host"


def _opt(default: Any, host: str) -> Any:
    """Declare an option with its default and host-facing name."""

    return field(default=default, metadata={_HOST: host})


def _group(factory: type, host: str) -> Any:
    """Declare a nested option group with its host object name."""

    return field(default_factory=factory, metadata={_HOST: host})


def host_name(settings: object, attr: str) -> str:
    """Return the host-facing option name for a settings attribute.

    Args:
        settings: Option group dataclass instance (or class).
        attr: Python attribute name on the dataclass.

    Returns:
        The host option name declared in the field metadata.

    Raises:
        KeyError: When the dataclass has no such field.
    """

    return _host_names(type(settings) if not isinstance(settings, type) else settings)[attr]


def host_values(settings: object, *attrs: str) -> dict[str, Any]:
    """Return an ordered host-name to value mapping for selected attributes.

    Args:
        settings: Option group dataclass instance.
        *attrs: Python attribute names, in the order they should appear.

    Returns:
        Dict keyed by host option names, preserving `attrs` order.
    """

    names = _host_names(type(settings))
    return {names[attr]: getattr(settings, attr) for attr in attrs}


def _host_names(cls: type) -> dict[str, str]:
    return {f.name: f.metadata.get(_HOST, f.name) for f in fields(cls)}


@dataclass(frozen=True, slots=True)
class ChartOrientationSettings:
    """General layout options (`chartOrientation`)."""

    orientation: str = _opt("vertical", "orientation")
    use_sentiment_features: bool = _opt(False, "useSentimentFeatures")
    sort_data: str = _opt("none", "sortData")
    limit_breakdown: bool = _opt(False, "limitBreakdown")
    max_breakdown: int = _opt(5, "maxBreakdown")


@dataclass(frozen=True, slots=True)
class DefinePillarsSettings:
    """Pillar options (`definePillars`).

    `total_pillar` renders the whole breakdown as one trailing total pillar.
    """

    total_pillar: bool = _opt(True, "Totalpillar")


@dataclass(frozen=True, slots=True)
class LegendSettings:
    """Sentiment legend options (`Legend`)."""

    show: bool = _opt(True, "show")
    text_favourable: str = _opt("Favourable", "textFavourable")
    text_adverse: str = _opt("Adverse", "textAdverse")
    font_size: float = _opt(9, "fontSize")
    font_color: str = _opt("#777777", "fontColor")
    font_family: str = _opt("Segoe UI", "fontFamily")


@dataclass(frozen=True, slots=True)
class SentimentColorSettings:
    """Bar colors by sentiment (`sentimentColor`)."""

    sentiment_color_total: str = _opt("#41A4FF", "sentimentColorTotal")
    sentiment_color_favourable: str = _opt("#13B016", "sentimentColorFavourable")
    sentiment_color_adverse: str = _opt("#E13C3C", "sentimentColorAdverse")
    sentiment_color_other: str = _opt("#B3B3B3", "sentimentColorOther")


@dataclass(frozen=True, slots=True)
class XAxisFormattingSettings:
    """Category axis options (`xAxisFormatting`)."""

    font_size: float = _opt(9, "fontSize")
    font_color: str = _opt("#777777", "fontColor")
    font_family: str = _opt("Segoe UI", "fontFamily")
    fit_to_width: bool = _opt(True, "fitToWidth")
    label_wrap_text: bool = _opt(True, "labelWrapText")
    show_angle: bool = _opt(True, "showAngle")
    x_label_angle: float = _opt(0, "xLabelAngle")
    bar_width: float = _opt(20, "barWidth")
    padding: float = _opt(5, "padding")
    show_grid_line: bool = _opt(False, "showGridLine")
    grid_line_stroke_width: float = _opt(1, "gridLineStrokeWidth")
    grid_line_color: str = _opt("#CCCCCC", "gridLineColor")


@dataclass(frozen=True, slots=True)
class YAxisFormattingSettings:
    """Value axis options (`yAxisFormatting`)."""

    show: bool = _opt(True, "show")
    y_axis_data_point_option: str = _opt("Range", "YAxisDataPointOption")
    show_y_axis_values: bool = _opt(True, "showYAxisValues")
    font_size: float = _opt(9, "fontSize")
    font_color: str = _opt("#777777", "fontColor")
    y_axis_value_format_option: str = _opt("auto", "YAxisValueFormatOption")
    decimal_places: int = _opt(0, "decimalPlaces")
    show_grid_line: bool = _opt(True, "showGridLine")
    grid_line_stroke_width: float = _opt(1, "gridLineStrokeWidth")
    grid_line_color: str = _opt("#CCCCCC", "gridLineColor")
    show_zero_axis_grid_line: bool = _opt(False, "showZeroAxisGridLine")
    zero_line_stroke_width: float = _opt(1, "zeroLineStrokeWidth")
    zero_line_color: str = _opt("#777777", "zeroLineColor")
    join_bars: bool = _opt(False, "joinBars")
    join_bars_stroke_width: float = _opt(1, "joinBarsStrokeWidth")
    join_bars_color: str = _opt("#777777", "joinBarsColor")


@dataclass(frozen=True, slots=True)
class LabelsFormattingSettings:
    """Data label options (`LabelsFormatting`)."""

    show: bool = _opt(True, "show")
    font_size: float = _opt(9, "fontSize")
    use_default_font_color: bool = _opt(True, "useDefaultFontColor")
    font_color: str = _opt("#777777", "fontColor")
    sentiment_font_color_total: str = _opt("#777777", "sentimentFontColorTotal")
    sentiment_font_color_favourable: str = _opt("#777777", "sentimentFontColorFavourable")
    sentiment_font_color_adverse: str = _opt("#777777", "sentimentFontColorAdverse")
    sentiment_font_color_other: str = _opt("#777777", "sentimentFontColorOther")
    font_family: str = _opt("Segoe UI", "fontFamily")
    use_default_label_positioning: bool = _opt(True, "useDefaultLabelPositioning")
    label_position: str = _opt("Outside end", "labelPosition")
    label_position_total: str = _opt("Outside end", "labelPositionTotal")
    label_position_favourable: str = _opt("Outside end", "labelPositionFavourable")
    label_position_adverse: str = _opt("Outside end", "labelPositionAdverse")
    label_position_other: str = _opt("Outside end", "labelPositionOther")
    value_format: str = _opt("auto", "valueFormat")
    decimal_places: int = _opt(0, "decimalPlaces")
    hide_zero_blank_values: bool = _opt(False, "HideZeroBlankValues")


@dataclass(frozen=True, slots=True)
class MarginSettings:
    """Outer chart margins in pixels (`margins`)."""

    top_margin: float = _opt(0, "topMargin")
    bottom_margin: float = _opt(0, "bottomMargin")
    left_margin: float = _opt(0, "leftMargin")
    right_margin: float = _opt(0, "rightMargin")


@dataclass(frozen=True, slots=True)
class ConfigurationState:
    """Snapshot of every option group, read-only for one enumeration call.

    Args:
        chart_orientation: General layout options.
        define_pillars: Pillar options.
        legend: Sentiment legend options.
        sentiment_color: Sentiment bar colors.
        x_axis_formatting: Category axis options.
        y_axis_formatting: Value axis options.
        labels_formatting: Data label options.
        margins: Outer margins.
    """

    chart_orientation: ChartOrientationSettings = _group(ChartOrientationSettings, "chartOrientation")
    define_pillars: DefinePillarsSettings = _group(DefinePillarsSettings, "definePillars")
    legend: LegendSettings = _group(LegendSettings, "Legend")
    sentiment_color: SentimentColorSettings = _group(SentimentColorSettings, "sentimentColor")
    x_axis_formatting: XAxisFormattingSettings = _group(XAxisFormattingSettings, "xAxisFormatting")
    y_axis_formatting: YAxisFormattingSettings = _group(YAxisFormattingSettings, "yAxisFormatting")
    labels_formatting: LabelsFormattingSettings = _group(LabelsFormattingSettings, "LabelsFormatting")
    margins: MarginSettings = _group(MarginSettings, "margins")
