"""Encoding/decoding helpers between host payloads and `formatting` DTOs."""

from __future__ import annotations

import math
from dataclasses import fields
from typing import Any, Iterable, Mapping, cast

from formatting.dto import CategoryRecord, EnumerationDefaults, PropertyInstance
from formatting.state import ConfigurationState, host_name
from formatting.tooltips import TooltipDataItem

OBJECT_NAME = "objectName"

_CATEGORY_FIELDS: dict[str, str] = {
    "value": "value",
    "numberFormat": "number_format",
    "formattedValue": "formatted_value",
    "originalFormattedValue": "original_formatted_value",
    "isPillar": "is_pillar",
    "category": "category",
    "color": "color",
    "customBarColor": "custom_bar_color",
    "customFontColor": "custom_font_color",
    "customLabelPositioning": "custom_label_positioning",
    "selectionId": "identity",
    "childrenCount": "children_count",
    "displayName": "display_name",
}


def decode_configuration_state(payload: Mapping[str, Any] | None) -> ConfigurationState:
    """Decode a ConfigurationState from the host's object payload.

    Args:
        payload: Mapping of host object name to a mapping of option values,
            e.g. `{"chartOrientation": {"useSentimentFeatures": true}}`.

    Returns:
        ConfigurationState with every missing or unparseable option left at
        its default.

    Raises:
        ValueError: When the payload or one of its groups is not a mapping.
    """

    if payload is None:
        return ConfigurationState()
    if not isinstance(payload, Mapping):
        raise ValueError("settings must be an object keyed by option group.")

    groups: dict[str, Any] = {}
    for group_field in fields(ConfigurationState):
        settings_cls = cast(type, group_field.default_factory)
        raw_group = payload.get(group_field.metadata["host"])
        if raw_group is None:
            continue
        if not isinstance(raw_group, Mapping):
            raise ValueError(f"settings.{group_field.metadata['host']} must be an object.")
        groups[group_field.name] = _decode_group(settings_cls, raw_group)
    return ConfigurationState(**groups)


def _decode_group(settings_cls: type, raw: Mapping[str, Any]) -> object:
    """Decode one option group, coercing each value to its default's type."""

    values: dict[str, Any] = {}
    for option in fields(settings_cls):
        name = host_name(settings_cls, option.name)
        if name not in raw:
            continue
        parsed = _coerce(raw[name], option.default)
        if parsed is not None:
            values[option.name] = parsed
    return settings_cls(**values)


def _coerce(value: object, default: object) -> Any:
    """Best-effort coercion of a host value to the type of `default`."""

    if isinstance(default, bool):
        return _parse_bool(value)
    if isinstance(default, (int, float)):
        return _parse_number(value)
    if isinstance(value, Mapping):
        return _unwrap_color(value)
    if value is None:
        return None
    return str(value)


def decode_category_records(rows: Iterable[Any] | None) -> tuple[CategoryRecord, ...]:
    """Decode bound category rows into CategoryRecords, preserving order.

    Args:
        rows: Sequence of row objects using host field names
            (`category`, `isPillar`, `customBarColor`, `selectionId`, ...).

    Returns:
        Tuple of CategoryRecord.

    Raises:
        ValueError: When `rows` is not a list or a row lacks a category key.
    """

    if rows is None:
        return ()
    if not isinstance(rows, list):
        raise ValueError("categories must be a list.")

    records: list[CategoryRecord] = []
    for idx, row in enumerate(rows):
        if not isinstance(row, Mapping) or row.get("category") is None:
            raise ValueError(f"categories[{idx}] must be an object with a category key.")
        values: dict[str, Any] = {}
        for host_key, attr in _CATEGORY_FIELDS.items():
            if host_key in row:
                values[attr] = row[host_key]
        values["category"] = str(values["category"])
        values["value"] = _parse_float(values.get("value"))
        values["children_count"] = _parse_int(values.get("children_count")) or 0
        for attr in ("custom_bar_color", "custom_font_color", "color"):
            if isinstance(values.get(attr), Mapping):
                values[attr] = _unwrap_color(values[attr])
        records.append(CategoryRecord(**values))
    return tuple(records)


def decode_enumeration_defaults(payload: Mapping[str, Any] | None, *, fallback: float) -> EnumerationDefaults:
    """Decode caller-supplied gridline defaults, using `fallback` when absent.

    Bounds are enforced by `EnumerationRequestForm`; this only parses.
    """

    raw = payload or {}
    x_width = _parse_float(raw.get("xAxisGridlineStrokeWidth"))
    y_width = _parse_float(raw.get("yAxisGridlineStrokeWidth"))
    return EnumerationDefaults(
        x_axis_gridline_stroke_width=fallback if x_width is None else x_width,
        y_axis_gridline_stroke_width=fallback if y_width is None else y_width,
    )


def encode_property_instance(item: PropertyInstance) -> dict[str, Any]:
    """Encode one PropertyInstance in the host's enumeration shape.

    Args:
        item: PropertyInstance to encode.

    Returns:
        Dict with `objectName`, `properties` and `selector`, plus
        `displayName`, `validValues`, `altConstantValueSelector` and
        `propertyInstanceKind` when present.
    """

    if item.match_scope is not None:
        selector: Any = {"wildcard": item.match_scope}
    else:
        selector = item.selector

    payload: dict[str, Any] = {OBJECT_NAME: item.group_id}
    if item.display_name is not None:
        payload["displayName"] = item.display_name
    payload["properties"] = dict(item.properties)
    payload["selector"] = selector
    if item.valid_ranges:
        payload["validValues"] = {
            name: {"numberRange": {"min": bounds.min, "max": bounds.max}} for name, bounds in item.valid_ranges.items()
        }
    if item.alt_constant_selector is not None:
        payload["altConstantValueSelector"] = item.alt_constant_selector
    if item.instance_kinds:
        payload["propertyInstanceKind"] = dict(item.instance_kinds)
    return payload


def encode_property_instances(items: Iterable[PropertyInstance]) -> list[dict[str, Any]]:
    """Encode PropertyInstances in order."""

    return [encode_property_instance(item) for item in items]


def _unwrap_color(value: Mapping[str, Any]) -> str | None:
    """Return the color of a `{"solid": {"color": ...}}` descriptor."""

    solid = value.get("solid")
    if isinstance(solid, Mapping) and solid.get("color") is not None:
        return str(solid["color"])
    return None


def _parse_int(value: object) -> int | None:
    """Best-effort int parsing for host payloads."""

    if value is None or value == "" or isinstance(value, bool):
        return None
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    try:
        return int(str(value).strip())
    except ValueError:
        return None


def _parse_number(value: object) -> int | float | None:
    """Parse a numeric option, keeping integral values as int."""

    parsed = _parse_float(value)
    if parsed is None:
        return None
    return int(parsed) if parsed.is_integer() else parsed


def _parse_float(value: object) -> float | None:
    """Best-effort float parsing for host payloads; non-finite values are dropped."""

    if value is None or value == "" or isinstance(value, bool):
        return None
    try:
        parsed = float(str(value).strip())
    except ValueError:
        return None
    return parsed if math.isfinite(parsed) else None


def _parse_bool(value: object) -> bool | None:
    """Best-effort bool parsing for host payloads."""

    if isinstance(value, bool):
        return value
    if value is None:
        return None
    normalized = str(value).strip().casefold()
    if normalized in {"1", "true", "yes", "on"}:
        return True
    if normalized in {"0", "false", "no", "off"}:
        return False
    return None


def encode_tooltip_items(items: Iterable[TooltipDataItem]) -> list[dict[str, str]]:
    """Encode tooltip rows as `{displayName, value}` objects."""

    return [{"displayName": item.display_name, "value": item.value} for item in items]
