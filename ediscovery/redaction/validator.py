"""Validates external redaction payloads into typed regions."""

from typing import Any

from ediscovery.redaction.exceptions import RedactionValidationError
from ediscovery.redaction.models import (
    BoxRegion,
    RedactionMode,
    RedactionRegion,
    TextSpanRegion,
)

_BOX_FIELDS = ("x", "y", "width", "height")
_DEFAULT_PAGE_NUMBER = 1


def validate_redaction_payload(payload: Any) -> tuple[int, RedactionRegion]:
    """Build ``(document_id, region)`` from a request body.

    Expected keys: ``documentId``, ``text``, ``reason``, ``x``, ``y``,
    ``width``, ``height``, ``pageNumber`` and an optional ``mode``. An explicit
    mode wins; without one, non-empty text selects a text span and anything
    else a box.

    Raises:
        RedactionValidationError: naming the first offending field.
    """
    if not isinstance(payload, dict):
        raise RedactionValidationError("body", "must be an object")

    document_id = _require_int(payload, "documentId")
    if document_id < 1:
        raise RedactionValidationError("documentId", "must be a positive integer")

    reason = _optional_str(payload, "reason")
    mode = _resolve_mode(payload)
    if mode is RedactionMode.TEXT:
        text = payload.get("text")
        if not isinstance(text, str) or not text:
            raise RedactionValidationError("text", "must be a non-empty string for text redactions")
        return document_id, TextSpanRegion(text=text, reason=reason)

    coordinates = {name: _require_int(payload, name) for name in _BOX_FIELDS}
    page_number = (
        _require_int(payload, "pageNumber")
        if payload.get("pageNumber") is not None
        else _DEFAULT_PAGE_NUMBER
    )
    return document_id, BoxRegion(page_number=page_number, reason=reason, **coordinates)


def _resolve_mode(payload: dict[str, Any]) -> RedactionMode:
    raw = payload.get("mode")
    if raw is None:
        text = payload.get("text")
        return RedactionMode.TEXT if isinstance(text, str) and text else RedactionMode.BOX
    if not isinstance(raw, str):
        raise RedactionValidationError("mode", "must be 'text' or 'box'")
    try:
        return RedactionMode(raw.lower())
    except ValueError as exc:
        raise RedactionValidationError("mode", "must be 'text' or 'box'") from exc


def _require_int(payload: dict[str, Any], field: str) -> int:
    value = payload.get(field)
    if value is None:
        raise RedactionValidationError(field, "is required")
    if isinstance(value, bool) or not isinstance(value, int):
        raise RedactionValidationError(field, "must be an integer")
    return value


def _optional_str(payload: dict[str, Any], field: str) -> str | None:
    value = payload.get(field)
    if value is None:
        return None
    if not isinstance(value, str):
        raise RedactionValidationError(field, "must be a string")
    return value or None
