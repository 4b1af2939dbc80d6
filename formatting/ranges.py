"""Numeric validity ranges advertised by the format pane.

Resolvers attach these bounds to the items they build and the state validator
checks stored values against the same table.
"""

from __future__ import annotations

from .dto import NumberRange
from .groups import GroupId

MAX_BREAKDOWN_RANGE = NumberRange(min=1, max=100)
X_LABEL_ANGLE_RANGE = NumberRange(min=-90, max=90)
BAR_WIDTH_RANGE = NumberRange(min=10, max=100)
AXIS_PADDING_RANGE = NumberRange(min=0, max=20)
STROKE_WIDTH_RANGE = NumberRange(min=1, max=50)
DECIMAL_PLACES_RANGE = NumberRange(min=0, max=15)
MARGIN_RANGE = NumberRange(min=0, max=100)

OPTION_RANGES: dict[GroupId, dict[str, NumberRange]] = {
    GroupId.chart_orientation: {
        "max_breakdown": MAX_BREAKDOWN_RANGE,
    },
    GroupId.x_axis_formatting: {
        "x_label_angle": X_LABEL_ANGLE_RANGE,
        "bar_width": BAR_WIDTH_RANGE,
        "padding": AXIS_PADDING_RANGE,
        "grid_line_stroke_width": STROKE_WIDTH_RANGE,
    },
    GroupId.y_axis_formatting: {
        "decimal_places": DECIMAL_PLACES_RANGE,
        "grid_line_stroke_width": STROKE_WIDTH_RANGE,
        "zero_line_stroke_width": STROKE_WIDTH_RANGE,
        "join_bars_stroke_width": STROKE_WIDTH_RANGE,
    },
    GroupId.labels_formatting: {
        "decimal_places": DECIMAL_PLACES_RANGE,
    },
    GroupId.margins: {
        "top_margin": MARGIN_RANGE,
        "bottom_margin": MARGIN_RANGE,
        "left_margin": MARGIN_RANGE,
        "right_margin": MARGIN_RANGE,
    },
}


def range_for(group_id: GroupId, attr: str) -> NumberRange:
    """Return the range declared for one option.

    Args:
        group_id: Option group.
        attr: Python attribute name of the option within its settings dataclass.

    Returns:
        The NumberRange for the option.

    Raises:
        KeyError: When no range is declared for the option.
    """

    return OPTION_RANGES[group_id][attr]
