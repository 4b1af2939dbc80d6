"""Resolvers for the category (x) and value (y) axis groups.

Both axes are mode independent. Each optional item is appended on its own
toggle, so no item's presence depends on another optional item.
"""

from __future__ import annotations

from .builder import ItemBuilder, solid_fill
from .context import EnumerationContext
from .dto import PropertyInstance
from .groups import GroupId


def resolve_x_axis(context: EnumerationContext) -> list[PropertyInstance]:
    """Resolve the category axis group.

    Args:
        context: Enumeration input snapshot.

    Returns:
        Items in pane order: font and layout toggles, label angle (when the
        automatic angle is off), bar width (when fit-to-width is off), padding
        and gridline toggle, gridline style (when gridlines are on).
    """

    settings = context.state.x_axis_formatting
    builder = ItemBuilder(GroupId.x_axis_formatting, settings)

    items = [builder.options("font_size", "font_color", "font_family", "fit_to_width", "label_wrap_text", "show_angle")]
    if not settings.show_angle:
        items.append(builder.options("x_label_angle", ranged=("x_label_angle",)))
    if not settings.fit_to_width:
        items.append(builder.options("bar_width", ranged=("bar_width",)))
    items.append(builder.options("padding", "show_grid_line", ranged=("padding",)))
    if settings.show_grid_line:
        items.append(
            builder.options(
                "grid_line_stroke_width",
                "grid_line_color",
                ranged=("grid_line_stroke_width",),
                overrides={
                    "grid_line_stroke_width": context.defaults.x_axis_gridline_stroke_width,
                    "grid_line_color": solid_fill(settings.grid_line_color),
                },
            )
        )
    return items


def resolve_y_axis(context: EnumerationContext) -> list[PropertyInstance]:
    """Resolve the value axis group.

    Every toggle (value labels, gridline, zero line, join bars) is followed by
    its detail item only while the toggle is on.
    """

    settings = context.state.y_axis_formatting
    builder = ItemBuilder(GroupId.y_axis_formatting, settings)

    items = [builder.options("show", "y_axis_data_point_option", "show_y_axis_values")]
    if settings.show_y_axis_values:
        items.append(
            builder.options(
                "font_size",
                "font_color",
                "y_axis_value_format_option",
                "decimal_places",
                ranged=("decimal_places",),
            )
        )

    items.append(builder.options("show_grid_line"))
    if settings.show_grid_line:
        items.append(
            builder.options(
                "grid_line_stroke_width",
                "grid_line_color",
                ranged=("grid_line_stroke_width",),
                overrides={
                    "grid_line_stroke_width": context.defaults.y_axis_gridline_stroke_width,
                    "grid_line_color": solid_fill(settings.grid_line_color),
                },
            )
        )

    items.append(builder.options("show_zero_axis_grid_line"))
    if settings.show_zero_axis_grid_line:
        items.append(
            builder.options(
                "zero_line_stroke_width",
                "zero_line_color",
                ranged=("zero_line_stroke_width",),
                overrides={"zero_line_color": solid_fill(settings.zero_line_color)},
            )
        )

    items.append(builder.options("join_bars"))
    if settings.join_bars:
        items.append(
            builder.options("join_bars_stroke_width", "join_bars_color", ranged=("join_bars_stroke_width",))
        )
    return items
