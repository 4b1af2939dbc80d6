"""Resolver for the data label group.

Font color and label position each have three variants: a single default
value, four sentiment slots, or one override per category. Per-category
overrides are only reachable in the flat modes with sentiment features off.
"""

from __future__ import annotations

from .builder import ItemBuilder, expand_over_categories
from .context import EnumerationContext
from .dto import PropertyInstance
from .groups import GroupId

LABEL_POSITION = "labelPosition"

SENTIMENT_FONT_COLOR_SLOTS = (
    "sentiment_font_color_total",
    "sentiment_font_color_favourable",
    "sentiment_font_color_adverse",
    "sentiment_font_color_other",
)

LABEL_POSITION_SLOTS = (
    "label_position_total",
    "label_position_favourable",
    "label_position_adverse",
    "label_position_other",
)


def resolve_font_color(context: EnumerationContext, builder: ItemBuilder) -> list[PropertyInstance]:
    """Resolve the label font color items."""

    settings = context.state.labels_formatting
    if settings.use_default_font_color:
        return [builder.options("font_color")]
    if not context.per_category_overrides:
        return [builder.options(*SENTIMENT_FONT_COLOR_SLOTS)]
    return expand_over_categories(
        context.categories,
        per_category=lambda record: builder.conditional_fill(record, record.custom_font_color),
        for_other=lambda record: builder.options("sentiment_font_color_other", display_name=record.display_name),
    )


def resolve_label_position(context: EnumerationContext, builder: ItemBuilder) -> list[PropertyInstance]:
    """Resolve the label position items."""

    settings = context.state.labels_formatting
    if settings.use_default_label_positioning:
        return [builder.options("label_position")]
    if not context.per_category_overrides:
        return [builder.options(*LABEL_POSITION_SLOTS)]
    return expand_over_categories(
        context.categories,
        per_category=lambda record: builder.targeted(record, {LABEL_POSITION: record.custom_label_positioning}),
        for_other=lambda record: builder.options("label_position_other", display_name=record.display_name),
    )


def resolve_labels_formatting(context: EnumerationContext) -> list[PropertyInstance]:
    """Resolve the data label group.

    Args:
        context: Enumeration input snapshot.

    Returns:
        Only the `show` toggle while labels are hidden. Otherwise, in pane
        order: show/font size/default color toggle, font color items, font
        family, default positioning toggle, label position items, value format
        with decimal places, and the hide zero/blank toggle.
    """

    settings = context.state.labels_formatting
    builder = ItemBuilder(GroupId.labels_formatting, settings)
    if not settings.show:
        return [builder.options("show")]

    return [
        builder.options("show", "font_size", "use_default_font_color"),
        *resolve_font_color(context, builder),
        builder.options("font_family"),
        builder.options("use_default_label_positioning"),
        *resolve_label_position(context, builder),
        builder.options("value_format", "decimal_places", ranged=("decimal_places",)),
        builder.options("hide_zero_blank_values"),
    ]
