"""JSON views exposing the property enumeration engine to the host."""

from __future__ import annotations

import json
import logging
from typing import Any

from django.conf import settings
from django.http import HttpRequest, JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_GET, require_POST

from core.enumeration.codec import (
    decode_category_records,
    decode_configuration_state,
    decode_enumeration_defaults,
    encode_property_instances,
    encode_tooltip_items,
)
from core.forms import EnumerationRequestForm
from formatting.engine import enumerate_properties
from formatting.groups import GroupId
from formatting.modes import classify_mode
from formatting.tooltips import TooltipEventArgs, tooltip_identity_for_category, tooltip_items_for_category
from formatting.validator import validate_configuration_state

logger = logging.getLogger(__name__)


def _load_json_body(request: HttpRequest) -> dict[str, Any]:
    """Parse the request body as a JSON object.

    Raises:
        ValueError: When the body is not valid JSON or not an object.
    """

    try:
        payload = json.loads(request.body or b"{}")
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ValueError("Request body must be valid JSON.") from exc
    if not isinstance(payload, dict):
        raise ValueError("Request body must be a JSON object.")
    return payload


def _bad_request(error: str) -> JsonResponse:
    return JsonResponse({"ok": False, "error": error}, status=400)


@require_GET
def groups_api(request: HttpRequest) -> JsonResponse:
    """List the option groups the engine can enumerate."""

    return JsonResponse({"groups": [group.value for group in GroupId]})


@csrf_exempt
@require_POST
def enumerate_api(request: HttpRequest) -> JsonResponse:
    """Enumerate the editable items of one option group.

    The body carries `objectName`, `visualType`, optional `rowLevels`, the
    current `settings`, the bound `categories` and optional gridline
    `defaults`. Unknown object names succeed with an empty instance list.
    """

    try:
        payload = _load_json_body(request)
    except ValueError as exc:
        logger.info("Rejected enumeration request: %s", exc)
        return _bad_request(str(exc))

    form = EnumerationRequestForm(
        data=payload,
        category_rows=payload.get("categories"),
        defaults=payload.get("defaults"),
    )
    if not form.is_valid():
        logger.info("Rejected enumeration request: %s", form.errors.as_json())
        return JsonResponse({"ok": False, "errors": form.errors.get_json_data()}, status=400)

    try:
        state = decode_configuration_state(payload.get("settings"))
        categories = decode_category_records(payload.get("categories"))
    except ValueError as exc:
        logger.info("Rejected enumeration payload: %s", exc)
        return _bad_request(str(exc))

    defaults = decode_enumeration_defaults(
        form.gridline_defaults(),
        fallback=float(settings.WATERFALL_DEFAULT_GRIDLINE_STROKE_WIDTH),
    )
    mode = classify_mode(form.cleaned_data["visualType"] or None, form.cleaned_data["rowLevels"])
    object_name = form.cleaned_data["objectName"]
    items = enumerate_properties(object_name, mode=mode, state=state, categories=categories, defaults=defaults)

    return JsonResponse(
        {
            "ok": True,
            "objectName": object_name,
            "mode": mode.value,
            "instances": encode_property_instances(items),
        }
    )


@csrf_exempt
@require_POST
def validate_api(request: HttpRequest) -> JsonResponse:
    """Validate a settings payload against the advertised option constraints."""

    try:
        payload = _load_json_body(request)
        state = decode_configuration_state(payload.get("settings"))
    except ValueError as exc:
        logger.info("Rejected validation request: %s", exc)
        return _bad_request(str(exc))

    result = validate_configuration_state(state)
    return JsonResponse(
        {
            "ok": True,
            "is_valid": result.is_valid,
            "errors": list(result.errors),
            "warnings": list(result.warnings),
        }
    )


@csrf_exempt
@require_POST
def tooltip_api(request: HttpRequest) -> JsonResponse:
    """Return the tooltip rows and identity for one hovered category.

    The body carries the bound `category` row and an optional `isTouchEvent`
    flag. The "other" bucket has no identity.
    """

    try:
        payload = _load_json_body(request)
        row = payload.get("category")
        if not isinstance(row, dict):
            raise ValueError("category must be an object.")
        (record,) = decode_category_records([row])
    except ValueError as exc:
        logger.info("Rejected tooltip request: %s", exc)
        return _bad_request(str(exc))

    args = TooltipEventArgs(
        data=record,
        coordinates=(0.0, 0.0),
        is_touch_event=payload.get("isTouchEvent") is True,
    )
    return JsonResponse(
        {
            "ok": True,
            "items": encode_tooltip_items(tooltip_items_for_category(args)),
            "identity": tooltip_identity_for_category(args),
        }
    )
