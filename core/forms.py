"""Forms for the host enumeration API.

Request envelopes arrive as JSON; the form validates the scalar fields and the
caller's gridline defaults while the nested settings and category payloads are
handled by the codec.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from django import forms
from django.conf import settings

from formatting.ranges import STROKE_WIDTH_RANGE

GRIDLINE_DEFAULT_FIELDS = ("xAxisGridlineStrokeWidth", "yAxisGridlineStrokeWidth")


class EnumerationRequestForm(forms.Form):
    """Validate the scalar fields of an enumeration request."""

    objectName = forms.CharField(max_length=64, label="Option group")
    visualType = forms.CharField(max_length=64, required=False, label="Visual type")
    rowLevels = forms.Field(required=False, label="Row hierarchy depth")
    xAxisGridlineStrokeWidth = forms.FloatField(
        required=False,
        min_value=STROKE_WIDTH_RANGE.min,
        max_value=STROKE_WIDTH_RANGE.max,
        label="Default x-axis gridline width",
    )
    yAxisGridlineStrokeWidth = forms.FloatField(
        required=False,
        min_value=STROKE_WIDTH_RANGE.min,
        max_value=STROKE_WIDTH_RANGE.max,
        label="Default y-axis gridline width",
    )

    def __init__(self, *args, **kwargs) -> None:
        """Bind the request payload and remember the category rows.

        The `defaults` keyword carries the request's `defaults` object; its
        gridline widths are validated alongside the top-level fields.
        """

        self.category_rows = kwargs.pop("category_rows", None)
        self.raw_defaults = kwargs.pop("defaults", None)
        data = kwargs.get("data")
        if data is not None:
            merged = {key: value for key, value in data.items() if key not in GRIDLINE_DEFAULT_FIELDS}
            if isinstance(self.raw_defaults, Mapping):
                merged.update(
                    {key: self.raw_defaults[key] for key in GRIDLINE_DEFAULT_FIELDS if key in self.raw_defaults}
                )
            kwargs["data"] = merged
        super().__init__(*args, **kwargs)

    def clean_objectName(self) -> str:
        """Strip whitespace around the option group name."""

        return self.cleaned_data["objectName"].strip()

    def clean(self) -> dict:
        """Reject malformed defaults and category payloads larger than the configured limit."""

        cleaned = super().clean()
        if self.raw_defaults is not None and not isinstance(self.raw_defaults, Mapping):
            raise forms.ValidationError("defaults must be an object.")
        limit = int(getattr(settings, "WATERFALL_MAX_CATEGORIES", 1000))
        rows = self.category_rows
        if isinstance(rows, list) and len(rows) > limit:
            raise forms.ValidationError(f"At most {limit} categories are accepted; got {len(rows)}.")
        return cleaned

    def gridline_defaults(self) -> dict[str, Any]:
        """Return the validated gridline widths the caller supplied."""

        return {key: self.cleaned_data[key] for key in GRIDLINE_DEFAULT_FIELDS if self.cleaned_data.get(key) is not None}
