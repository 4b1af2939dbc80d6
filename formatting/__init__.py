"""Pure format-pane resolution package for the waterfall visual.

This package decides which options of the visual's format pane are editable
for the current mode, configuration and bound categories. It operates on
in-memory inputs, returns immutable DTOs, and must not import Django.
"""

from .engine import PropertyEnumerator, enumerate_properties
from .modes import Mode, classify_mode

__all__ = ["Mode", "PropertyEnumerator", "classify_mode", "enumerate_properties"]
