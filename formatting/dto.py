"""DTO types consumed and produced by the property enumeration engine.

DTOs are plain data containers. Category records are produced by the
data-binding layer, property instances are handed to the host adapter. Neither
carries any Django/ORM dependency.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal, Mapping

OTHER_CATEGORY_KEY = "defaultBreakdownStepOther"

MatchScope = Literal["instancesAndTotals"]
InstanceKind = Literal["ConstantOrRule"]

INSTANCES_AND_TOTALS: MatchScope = "instancesAndTotals"
CONSTANT_OR_RULE: InstanceKind = "ConstantOrRule"


@dataclass(frozen=True, slots=True)
class CategoryRecord:
    """One bound data category, or the synthetic "other" bucket.

    Args:
        category: Category key. `OTHER_CATEGORY_KEY` marks the sentinel bucket.
        value: Raw measure value.
        number_format: Format string of the bound measure.
        formatted_value: Display value after the visual's formatting.
        original_formatted_value: Display value using the source format.
        is_pillar: Tri-state roll-up flag (None when the user never set it).
        color: Resolved bar color.
        custom_bar_color: Per-category bar color override.
        custom_font_color: Per-category label font color override.
        custom_label_positioning: Per-category label position override.
        identity: Opaque selector targeting this record, or None when the
            binding could not produce one.
        children_count: Number of child nodes in drillable hierarchies.
        display_name: Human readable label.
    """

    category: str
    value: float | None = None
    number_format: str = ""
    formatted_value: str = ""
    original_formatted_value: str = ""
    is_pillar: int | bool | None = None
    color: str = ""
    custom_bar_color: str = ""
    custom_font_color: str = ""
    custom_label_positioning: str = ""
    identity: Any = None
    children_count: int = 0
    display_name: str = ""

    @property
    def is_other(self) -> bool:
        """Return True for the aggregated "other" sentinel bucket."""

        return self.category == OTHER_CATEGORY_KEY


@dataclass(frozen=True, slots=True)
class NumberRange:
    """Inclusive numeric bounds advertised for one option.

    Args:
        min: Lowest accepted value.
        max: Highest accepted value.
    """

    min: float
    max: float

    def contains(self, value: float) -> bool:
        """Return True when `value` lies inside the inclusive bounds."""

        return self.min <= value <= self.max


@dataclass(frozen=True, slots=True)
class EnumerationDefaults:
    """Caller-supplied defaults displayed instead of stored values.

    Args:
        x_axis_gridline_stroke_width: Stroke width shown for x-axis gridlines.
        y_axis_gridline_stroke_width: Stroke width shown for y-axis gridlines.
    """

    x_axis_gridline_stroke_width: float = 1
    y_axis_gridline_stroke_width: float = 1


@dataclass(frozen=True, slots=True)
class PropertyInstance:
    """One editable item of the format pane.

    Args:
        group_id: Option group (host object name) the item belongs to.
        properties: Option name to current value, in display order.
        selector: Identity of the one targeted category, or None for a global item.
        display_name: Label shown when the item targets a single category.
        valid_ranges: Numeric bounds per option name.
        match_scope: Conditional-formatting scope; set instead of a plain
            selector when the value applies across instances and totals.
        alt_constant_selector: Identity used by the host when the user picks
            a literal value for a conditional-formatting item.
        instance_kinds: Per-option kind hints for conditional-formatting items.
    """

    group_id: str
    properties: Mapping[str, Any]
    selector: Any = None
    display_name: str | None = None
    valid_ranges: Mapping[str, NumberRange] = field(default_factory=dict)
    match_scope: MatchScope | None = None
    alt_constant_selector: Any = None
    instance_kinds: Mapping[str, InstanceKind] = field(default_factory=dict)

    @property
    def is_global(self) -> bool:
        """Return True when the item affects the whole group."""

        return self.selector is None and self.match_scope is None
