"""Resolvers for the layout, pillar, legend, sentiment color and margin groups.

Each resolver is a pure function of an EnumerationContext. Mode-dependent
resolvers look their rule up in a per-group table keyed by Mode; modes missing
from a table contribute nothing.
"""

from __future__ import annotations

from typing import Callable

from .builder import ItemBuilder, expand_over_categories
from .context import EnumerationContext
from .dto import CategoryRecord, PropertyInstance
from .groups import GroupId
from .modes import Mode

Rule = Callable[[EnumerationContext], list[PropertyInstance]]

PILLARS = "pillars"

SENTIMENT_COLOR_SLOTS = (
    "sentiment_color_total",
    "sentiment_color_favourable",
    "sentiment_color_adverse",
    "sentiment_color_other",
)


def _apply(rules: dict[Mode, Rule], context: EnumerationContext) -> list[PropertyInstance]:
    rule = rules.get(context.mode)
    if rule is None:
        return []
    return rule(context)


# chartOrientation


def _orientation_builder(context: EnumerationContext) -> ItemBuilder:
    return ItemBuilder(GroupId.chart_orientation, context.state.chart_orientation)


def _breakdown_limit_items(builder: ItemBuilder, context: EnumerationContext) -> list[PropertyInstance]:
    items = [builder.options("limit_breakdown")]
    if context.state.chart_orientation.limit_breakdown:
        items.append(builder.options("max_breakdown", ranged=("max_breakdown",)))
    return items


def _orientation_static(context: EnumerationContext) -> list[PropertyInstance]:
    builder = _orientation_builder(context)
    return [builder.options("orientation", "use_sentiment_features", "sort_data")]


def _orientation_static_category(context: EnumerationContext) -> list[PropertyInstance]:
    builder = _orientation_builder(context)
    return [
        builder.options("orientation", "use_sentiment_features", "sort_data"),
        *_breakdown_limit_items(builder, context),
    ]


def _orientation_single_level_matrix(context: EnumerationContext) -> list[PropertyInstance]:
    builder = _orientation_builder(context)
    return [builder.options("orientation", "sort_data"), *_breakdown_limit_items(builder, context)]


def _orientation_only(context: EnumerationContext) -> list[PropertyInstance]:
    return [_orientation_builder(context).options("orientation")]


_ORIENTATION_RULES: dict[Mode, Rule] = {
    Mode.static: _orientation_static,
    Mode.static_category: _orientation_static_category,
    Mode.drillable_matrix_single_level: _orientation_single_level_matrix,
    Mode.drillable_category: _orientation_only,
    Mode.drillable_matrix_multi_level: _orientation_only,
}


def resolve_chart_orientation(context: EnumerationContext) -> list[PropertyInstance]:
    """Resolve the general layout group.

    Flat modes expose the sentiment toggle. The breakdown limit is offered for
    `static_category` and single-level matrices, with `maxBreakdown` only when
    the limit is switched on.
    """

    return _apply(_ORIENTATION_RULES, context)


# definePillars


def _pillar_builder(context: EnumerationContext) -> ItemBuilder:
    return ItemBuilder(GroupId.define_pillars, context.state.define_pillars)


def _per_category_pillars(context: EnumerationContext) -> list[PropertyInstance]:
    builder = _pillar_builder(context)
    return expand_over_categories(
        context.categories,
        per_category=lambda record: builder.targeted(record, {PILLARS: bool(record.is_pillar)}),
    )


def has_explicit_pillar(categories: tuple[CategoryRecord, ...], *, total_pillar: bool) -> bool:
    """Return True when a user-flagged pillar exists outside the final position.

    The last regular category never counts: a lone pillar at the end of the
    breakdown is treated as no pillar at all. Always False while the total
    pillar toggle is on.

    Args:
        categories: Category records in binding order.
        total_pillar: Current value of the `Totalpillar` toggle.

    Returns:
        True when at least one qualifying pillar exists.
    """

    if total_pillar:
        return False
    regular = [record for record in categories if not record.is_other]
    return any(record.is_pillar for record in regular[:-1])


def _pillars_with_total_fallback(context: EnumerationContext) -> list[PropertyInstance]:
    total_pillar = bool(context.state.define_pillars.total_pillar)
    items = [] if total_pillar else _per_category_pillars(context)
    if not has_explicit_pillar(context.categories, total_pillar=total_pillar):
        items.append(_pillar_builder(context).options("total_pillar"))
    return items


def _total_pillar_only(context: EnumerationContext) -> list[PropertyInstance]:
    return [_pillar_builder(context).options("total_pillar")]


_PILLAR_RULES: dict[Mode, Rule] = {
    Mode.static: _per_category_pillars,
    Mode.static_category: _pillars_with_total_fallback,
    Mode.drillable_category: _total_pillar_only,
}


def resolve_define_pillars(context: EnumerationContext) -> list[PropertyInstance]:
    """Resolve the pillar group.

    Drill hierarchies never expose per-node pillar flags; matrices expose
    nothing at all.
    """

    return _apply(_PILLAR_RULES, context)


# Legend


def resolve_legend(context: EnumerationContext) -> list[PropertyInstance]:
    """Resolve the sentiment legend group, shown only with sentiment features on."""

    if not context.sentiment_enabled:
        return []
    builder = ItemBuilder(GroupId.legend, context.state.legend)
    return [builder.options("show", "text_favourable", "text_adverse", "font_size", "font_color", "font_family")]


# sentimentColor


def resolve_sentiment_color(context: EnumerationContext) -> list[PropertyInstance]:
    """Resolve the bar color group.

    Outside the flat modes the four sentiment slots are always offered. In the
    flat modes, switching sentiment features off replaces them with one
    conditional-formatting color per category; the "other" bucket keeps its
    sentiment slot.
    """

    builder = ItemBuilder(GroupId.sentiment_color, context.state.sentiment_color)
    if not context.per_category_overrides:
        return [builder.options(*SENTIMENT_COLOR_SLOTS)]
    return expand_over_categories(
        context.categories,
        per_category=lambda record: builder.conditional_fill(record, record.custom_bar_color),
        for_other=lambda record: builder.options("sentiment_color_other"),
    )


# margins


def resolve_margins(context: EnumerationContext) -> list[PropertyInstance]:
    """Resolve the margin group: one item, each side bounded independently."""

    builder = ItemBuilder(GroupId.margins, context.state.margins)
    sides = ("top_margin", "bottom_margin", "left_margin", "right_margin")
    return [builder.options(*sides, ranged=sides)]
