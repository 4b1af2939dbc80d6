"""Property enumeration engine.

The engine maps an option group id to its resolver and returns the fully
materialised, ordered tuple of editable items. Calls share no state, so the
same inputs always produce the same output.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable

from .axes import resolve_x_axis, resolve_y_axis
from .context import EnumerationContext
from .dto import CategoryRecord, EnumerationDefaults, PropertyInstance
from .groups import GroupId, parse_group_id
from .labels import resolve_labels_formatting
from .modes import Mode
from .resolvers import (
    resolve_chart_orientation,
    resolve_define_pillars,
    resolve_legend,
    resolve_margins,
    resolve_sentiment_color,
)
from .state import ConfigurationState

logger = logging.getLogger(__name__)

Resolver = Callable[[EnumerationContext], list[PropertyInstance]]

GROUP_RESOLVERS: dict[GroupId, Resolver] = {
    GroupId.chart_orientation: resolve_chart_orientation,
    GroupId.define_pillars: resolve_define_pillars,
    GroupId.legend: resolve_legend,
    GroupId.sentiment_color: resolve_sentiment_color,
    GroupId.x_axis_formatting: resolve_x_axis,
    GroupId.y_axis_formatting: resolve_y_axis,
    GroupId.labels_formatting: resolve_labels_formatting,
    GroupId.margins: resolve_margins,
}


def enumerate_properties(
    group_id: str,
    *,
    mode: Mode,
    state: ConfigurationState,
    categories: Iterable[CategoryRecord] = (),
    defaults: EnumerationDefaults | None = None,
) -> tuple[PropertyInstance, ...]:
    """Enumerate the editable items of one option group.

    Args:
        group_id: Host object name of the requested option group.
        mode: Active operating mode.
        state: Current configuration values.
        categories: Bound category records, in binding order.
        defaults: Caller-supplied display defaults.

    Returns:
        Ordered tuple of PropertyInstance items. Unknown group ids yield an
        empty tuple.
    """

    parsed = parse_group_id(group_id)
    if parsed is None:
        logger.debug("No resolver for option group %r.", group_id)
        return ()

    context = EnumerationContext(
        mode=mode,
        state=state,
        categories=tuple(categories),
        defaults=defaults or EnumerationDefaults(),
    )
    return tuple(GROUP_RESOLVERS[parsed](context))


class PropertyEnumerator:
    """Bind one data refresh's inputs and enumerate groups on demand.

    Args:
        mode: Active operating mode.
        state: Current configuration values.
        categories: Bound category records, in binding order.
        defaults: Caller-supplied display defaults.
    """

    def __init__(
        self,
        *,
        mode: Mode,
        state: ConfigurationState,
        categories: Iterable[CategoryRecord] = (),
        defaults: EnumerationDefaults | None = None,
    ) -> None:
        self.mode = mode
        self.state = state
        self.categories = tuple(categories)
        self.defaults = defaults or EnumerationDefaults()

    def enumerate(self, group_id: str) -> tuple[PropertyInstance, ...]:
        """Enumerate one option group against the bound inputs."""

        return enumerate_properties(
            group_id,
            mode=self.mode,
            state=self.state,
            categories=self.categories,
            defaults=self.defaults,
        )
