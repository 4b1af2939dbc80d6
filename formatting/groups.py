"""Option group identifiers exposed to the host format pane."""

from __future__ import annotations

from enum import StrEnum


class GroupId(StrEnum):
    """Closed set of option groups the engine can enumerate.

    Values are the host object names and are stable across releases.
    """

    chart_orientation = "chartOrientation"
    define_pillars = "definePillars"
    legend = "Legend"
    sentiment_color = "sentimentColor"
    x_axis_formatting = "xAxisFormatting"
    y_axis_formatting = "yAxisFormatting"
    labels_formatting = "LabelsFormatting"
    margins = "margins"


def parse_group_id(value: object) -> GroupId | None:
    """Return the GroupId for a host object name, or None when unknown."""

    try:
        return GroupId(str(value))
    except ValueError:
        return None
