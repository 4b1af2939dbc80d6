"""Operating modes of the waterfall visual.

The visual renders one of five structural variants depending on how the data
is bound. Every resolver branches on the active mode, so classification lives
in one place and never fails.
"""

from __future__ import annotations

import logging
from enum import StrEnum

logger = logging.getLogger(__name__)


class Mode(StrEnum):
    """Structural operating variant of the visual.

    Values are stable identifiers shared with the host payloads and the API.
    """

    static = "static"
    static_category = "staticCategory"
    drillable_category = "drillableCategory"
    drillable_matrix_single_level = "drillableMatrixSingleLevel"
    drillable_matrix_multi_level = "drillableMatrixMultiLevel"

    @property
    def supports_per_category(self) -> bool:
        """Return True when per-category overrides can be offered in this mode."""

        return self in (Mode.static, Mode.static_category)


_NAMED_MODES: dict[str, Mode] = {
    "static": Mode.static,
    "staticCategory": Mode.static_category,
    "drillableCategory": Mode.drillable_category,
}


def classify_mode(visual_type: str | None, row_levels: object = None) -> Mode:
    """Derive the active Mode from the visual type tag and hierarchy depth.

    Args:
        visual_type: Type tag computed by the data-binding layer.
        row_levels: Depth of the bound row hierarchy. Only consulted when the
            tag is not one of the three named modes.

    Returns:
        The active Mode. Missing or malformed depth resolves to
        `Mode.drillable_matrix_multi_level`.
    """

    named = _NAMED_MODES.get(str(visual_type)) if visual_type is not None else None
    if named is not None:
        return named

    depth = _parse_depth(row_levels)
    if depth is None:
        logger.warning(
            "Row hierarchy depth %r is unusable for visual type %r; using %s.",
            row_levels,
            visual_type,
            Mode.drillable_matrix_multi_level.value,
        )
        return Mode.drillable_matrix_multi_level
    if depth == 1:
        return Mode.drillable_matrix_single_level
    return Mode.drillable_matrix_multi_level


def _parse_depth(value: object) -> int | None:
    """Return a positive integer depth, or None when the value is unusable."""

    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        depth = value
    elif isinstance(value, float) and value.is_integer():
        depth = int(value)
    elif isinstance(value, str) and value.strip().isdigit():
        depth = int(value.strip())
    else:
        return None
    return depth if depth >= 1 else None
