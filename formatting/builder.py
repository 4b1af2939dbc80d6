"""Construction helpers for PropertyInstance items.

Items are finished at construction time: validity ranges, selectors and
conditional-formatting hints are attached by the builder, never patched onto an
already emitted item.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Mapping

from .dto import (
    CONSTANT_OR_RULE,
    INSTANCES_AND_TOTALS,
    CategoryRecord,
    NumberRange,
    PropertyInstance,
)
from .groups import GroupId
from .ranges import range_for
from .state import host_name, host_values

logger = logging.getLogger(__name__)

FILL = "fill"


def solid_fill(color: str) -> dict[str, dict[str, str]]:
    """Wrap a color in the host's solid fill descriptor."""

    return {"solid": {"color": color}}


class ItemBuilder:
    """Build items for one option group from its settings dataclass.

    Args:
        group_id: Option group the items belong to.
        settings: Settings dataclass holding the group's current values.
    """

    def __init__(self, group_id: GroupId, settings: object) -> None:
        self.group_id = group_id
        self.settings = settings

    def options(
        self,
        *attrs: str,
        ranged: Iterable[str] = (),
        overrides: Mapping[str, Any] | None = None,
        display_name: str | None = None,
    ) -> PropertyInstance:
        """Return a global item exposing the given options.

        Args:
            *attrs: Settings attribute names, in display order.
            ranged: Attributes whose declared range is attached to the item.
            overrides: Values replacing the stored value, keyed by attribute.
            display_name: Optional label for the item.

        Returns:
            A finished global PropertyInstance.
        """

        properties = host_values(self.settings, *attrs)
        for attr, value in (overrides or {}).items():
            properties[host_name(self.settings, attr)] = value
        valid_ranges: dict[str, NumberRange] = {
            host_name(self.settings, attr): range_for(self.group_id, attr) for attr in ranged
        }
        return PropertyInstance(
            group_id=self.group_id.value,
            properties=properties,
            display_name=display_name,
            valid_ranges=valid_ranges,
        )

    def targeted(self, record: CategoryRecord, properties: Mapping[str, Any]) -> PropertyInstance:
        """Return an item targeting exactly one category by its identity.

        Records without an identity yield a global item carrying the same
        properties, so a malformed selector is never emitted.
        """

        if record.identity is None:
            logger.debug("Category %r has no identity; emitting a global %s item.", record.category, self.group_id)
            return PropertyInstance(
                group_id=self.group_id.value,
                properties=dict(properties),
                display_name=record.category,
            )
        return PropertyInstance(
            group_id=self.group_id.value,
            properties=dict(properties),
            selector=record.identity,
            display_name=record.category,
        )

    def conditional_fill(self, record: CategoryRecord, color: str) -> PropertyInstance:
        """Return a conditional-formatting fill item for one category.

        The item matches instances and totals, and carries the category's
        identity as the literal-value fallback selector.
        """

        properties = {FILL: solid_fill(color)}
        if record.identity is None:
            return self.targeted(record, properties)
        return PropertyInstance(
            group_id=self.group_id.value,
            properties=properties,
            display_name=record.category,
            match_scope=INSTANCES_AND_TOTALS,
            alt_constant_selector=record.identity,
            instance_kinds={FILL: CONSTANT_OR_RULE},
        )


def expand_over_categories(
    categories: Iterable[CategoryRecord],
    *,
    per_category: Callable[[CategoryRecord], PropertyInstance],
    for_other: Callable[[CategoryRecord], PropertyInstance] | None = None,
) -> list[PropertyInstance]:
    """Expand an item rule over the bound categories, in binding order.

    Args:
        categories: Category records in binding order.
        per_category: Builds the item for a regular category.
        for_other: Builds the item for the "other" sentinel. When None the
            sentinel is skipped.

    Returns:
        One item per regular category plus one per sentinel when `for_other`
        is given.
    """

    items: list[PropertyInstance] = []
    for record in categories:
        if record.is_other:
            if for_other is not None:
                items.append(for_other(record))
            continue
        items.append(per_category(record))
    return items
