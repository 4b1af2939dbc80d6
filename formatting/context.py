"""Immutable input snapshot shared by every resolver."""

from __future__ import annotations

from dataclasses import dataclass, field

from .dto import CategoryRecord, EnumerationDefaults
from .modes import Mode
from .state import ConfigurationState


@dataclass(frozen=True, slots=True)
class EnumerationContext:
    """Everything one enumeration call may read.

    Args:
        mode: Active operating mode.
        state: Current configuration values.
        categories: Bound category records, in binding order.
        defaults: Caller-supplied display defaults.
    """

    mode: Mode
    state: ConfigurationState
    categories: tuple[CategoryRecord, ...] = ()
    defaults: EnumerationDefaults = field(default_factory=EnumerationDefaults)

    @property
    def sentiment_enabled(self) -> bool:
        """Return True when sentiment features are switched on."""

        return bool(self.state.chart_orientation.use_sentiment_features)

    @property
    def per_category_overrides(self) -> bool:
        """Return True when per-category colors and positions are offered.

        Per-category overrides replace the sentiment slots only in the flat
        modes with sentiment features switched off.
        """

        return self.mode.supports_per_category and not self.sentiment_enabled
