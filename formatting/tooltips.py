"""Tooltip boundary of the waterfall visual.

The hover layer is an independent collaborator: given a pointer event over a
rendered bar it asks two delegates for display items and an identity, then
shows, moves or hides the host tooltip surface. This module defines that
contract and the visual's own delegates; the engine never calls into it.

`TooltipServiceWrapper` is implemented by the rendering layer, not here. The
content delegates are served to hosts by `core.views.tooltip_api`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Protocol, Sequence, TypeVar, runtime_checkable

from .dto import CategoryRecord

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class TooltipEventArgs(Generic[T]):
    """Pointer event data handed to tooltip delegates.

    Args:
        data: Datum bound to the hovered element.
        coordinates: Pointer position relative to the visual's root element.
        element_coordinates: Pointer position relative to the hovered element.
        is_touch_event: True for touch/pen pointers.
    """

    data: T
    coordinates: tuple[float, float]
    element_coordinates: tuple[float, float] = (0.0, 0.0)
    is_touch_event: bool = False


@dataclass(frozen=True, slots=True)
class TooltipDataItem:
    """One label/value row of a tooltip."""

    display_name: str
    value: str


TooltipInfoDelegate = Callable[[TooltipEventArgs[T]], Sequence[TooltipDataItem]]
TooltipIdentityDelegate = Callable[[TooltipEventArgs[T]], Any]


@runtime_checkable
class TooltipServiceWrapper(Protocol):
    """Interaction layer that binds tooltips to rendered elements."""

    def add_tooltip(
        self,
        selection: Any,
        get_tooltip_info: TooltipInfoDelegate,
        get_data_point_identity: TooltipIdentityDelegate,
        reload_tooltip_data_on_mouse_move: bool = False,
    ) -> None:
        """Attach show/move/hide handlers to `selection`."""

    def hide(self) -> None:
        """Hide the host tooltip immediately."""


def tooltip_items_for_category(args: TooltipEventArgs[CategoryRecord]) -> list[TooltipDataItem]:
    """Return the tooltip rows for a hovered bar.

    The category row is labelled with the record's display name when it has
    one. Drillable nodes also report how many children they roll up.
    """

    record = args.data
    label = record.display_name or record.category
    items = [TooltipDataItem(display_name=label, value=record.formatted_value)]
    if record.children_count:
        items.append(TooltipDataItem(display_name="Items", value=str(record.children_count)))
    return items


def tooltip_identity_for_category(args: TooltipEventArgs[CategoryRecord]) -> Any:
    """Return the identity that keys the tooltip, or None for the "other" bucket."""

    record = args.data
    if record.is_other:
        return None
    return record.identity
