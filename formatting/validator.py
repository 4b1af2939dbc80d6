"""Validation for ConfigurationState values.

The format pane advertises numeric ranges but the host may still hand back
stored values from older reports. Validation reports every problem instead of
failing on the first one.
"""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Real

from .groups import GroupId
from .ranges import OPTION_RANGES
from .state import ChartOrientationSettings, ConfigurationState, XAxisFormattingSettings, host_name

ALLOWED_ORIENTATIONS = frozenset({"vertical", "horizontal"})
ALLOWED_VALUE_FORMATS = frozenset({"auto", "none", "thousands", "millions", "billions", "trillions"})
ALLOWED_LABEL_POSITIONS = frozenset({"Inside end", "Inside center", "Inside base", "Outside end"})

_STATE_ATTRS: dict[GroupId, str] = {
    GroupId.chart_orientation: "chart_orientation",
    GroupId.define_pillars: "define_pillars",
    GroupId.legend: "legend",
    GroupId.sentiment_color: "sentiment_color",
    GroupId.x_axis_formatting: "x_axis_formatting",
    GroupId.y_axis_formatting: "y_axis_formatting",
    GroupId.labels_formatting: "labels_formatting",
    GroupId.margins: "margins",
}


@dataclass(frozen=True, slots=True)
class StateValidationResult:
    """Result of validating a configuration state.

    Args:
        is_valid: True when no errors exist.
        errors: Values the format pane would reject.
        warnings: Non-fatal notes intended for UI display.
    """

    is_valid: bool
    errors: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()


def validate_configuration_state(state: ConfigurationState) -> StateValidationResult:
    """Validate stored option values against the advertised constraints.

    Args:
        state: ConfigurationState decoded from the host.

    Returns:
        StateValidationResult listing out-of-range numbers, unknown choice
        values, and options that are set but currently hidden.
    """

    errors: list[str] = []
    warnings: list[str] = []

    for group_id, ranges in OPTION_RANGES.items():
        settings = getattr(state, _STATE_ATTRS[group_id])
        for attr, bounds in ranges.items():
            value = getattr(settings, attr)
            name = f"{group_id.value}.{host_name(settings, attr)}"
            if isinstance(value, bool) or not isinstance(value, Real):
                errors.append(f"{name} must be a number; got {value!r}.")
                continue
            if not bounds.contains(value):
                errors.append(f"{name}={value!r} is outside [{bounds.min:g}, {bounds.max:g}].")

    orientation = state.chart_orientation
    if orientation.orientation not in ALLOWED_ORIENTATIONS:
        errors.append(f"chartOrientation.orientation is not a supported value: {orientation.orientation!r}.")

    labels = state.labels_formatting
    for attr in (
        "label_position",
        "label_position_total",
        "label_position_favourable",
        "label_position_adverse",
        "label_position_other",
    ):
        value = getattr(labels, attr)
        if value not in ALLOWED_LABEL_POSITIONS:
            errors.append(f"LabelsFormatting.{host_name(labels, attr)} is not a supported value: {value!r}.")
    if labels.value_format not in ALLOWED_VALUE_FORMATS:
        errors.append(f"LabelsFormatting.valueFormat is not a supported value: {labels.value_format!r}.")

    y_axis = state.y_axis_formatting
    if y_axis.y_axis_value_format_option not in ALLOWED_VALUE_FORMATS:
        errors.append(
            f"yAxisFormatting.YAxisValueFormatOption is not a supported value: {y_axis.y_axis_value_format_option!r}."
        )

    if not orientation.limit_breakdown and orientation.max_breakdown != ChartOrientationSettings().max_breakdown:
        warnings.append("chartOrientation.maxBreakdown is ignored while limitBreakdown is off.")
    x_axis = state.x_axis_formatting
    if x_axis.show_angle and x_axis.x_label_angle != 0:
        warnings.append("xAxisFormatting.xLabelAngle is ignored while showAngle is on.")
    if x_axis.fit_to_width and x_axis.bar_width != XAxisFormattingSettings().bar_width:
        warnings.append("xAxisFormatting.barWidth is ignored while fitToWidth is on.")

    return StateValidationResult(is_valid=not errors, errors=tuple(errors), warnings=tuple(warnings))
