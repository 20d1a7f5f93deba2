"""Validates external production requests."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, TypeVar

from ediscovery.production.exceptions import ProductionValidationError
from ediscovery.production.models import (
    ArtifactFormat,
    IncludeFlags,
    LoadFileFormat,
    ProductionSetConfig,
)

DEFAULT_PREFIX = "PROD"
DEFAULT_START_NUMBER = 1

# Bates numbers name the per-document files of a production.
_PATH_SEPARATORS = ("/", "\\")

_E = TypeVar("_E", bound=Enum)


@dataclass(frozen=True)
class ProductionRequest:
    config: ProductionSetConfig
    document_ids: list[int]


def validate_production_request(payload: Any) -> ProductionRequest:
    """Build a ProductionRequest from a request body.

    Expected keys: ``name``, ``prefix``, ``startNumber``, ``format``,
    ``loadFileFormat``, ``includeFlags`` and ``documentIds``. Only ``name`` and
    ``documentIds`` are required.

    Raises:
        ProductionValidationError: naming the first offending field.
    """
    if not isinstance(payload, dict):
        raise ProductionValidationError("body", "must be an object")

    name = payload.get("name")
    if not isinstance(name, str) or not name.strip():
        raise ProductionValidationError("name", "must be a non-empty string")

    prefix = payload.get("prefix")
    if prefix is None or prefix == "":
        prefix = DEFAULT_PREFIX
    elif not isinstance(prefix, str):
        raise ProductionValidationError("prefix", "must be a string")
    elif any(separator in prefix for separator in _PATH_SEPARATORS):
        raise ProductionValidationError("prefix", "must not contain path separators")

    start_number = payload.get("startNumber")
    if start_number is None:
        start_number = DEFAULT_START_NUMBER
    elif isinstance(start_number, bool) or not isinstance(start_number, int):
        raise ProductionValidationError("startNumber", "must be an integer")
    elif start_number < 0:
        raise ProductionValidationError("startNumber", "must be >= 0")

    config = ProductionSetConfig(
        name=name.strip(),
        prefix=prefix,
        start_number=start_number,
        format=_parse_enum(payload, "format", ArtifactFormat, ArtifactFormat.PDF),
        include=_parse_include_flags(payload.get("includeFlags")),
        load_file_format=_parse_enum(
            payload, "loadFileFormat", LoadFileFormat, LoadFileFormat.DAT
        ),
    )
    return ProductionRequest(config=config, document_ids=_parse_document_ids(payload))


def _parse_enum(payload: dict[str, Any], field: str, enum_type: type[_E], default: _E) -> _E:
    raw = payload.get(field)
    if raw is None:
        return default
    choices = [member.value for member in enum_type]
    if not isinstance(raw, str):
        raise ProductionValidationError(field, f"must be one of {choices}")
    try:
        return enum_type(raw.upper())
    except ValueError as exc:
        raise ProductionValidationError(field, f"must be one of {choices}") from exc


def _parse_include_flags(raw: Any) -> IncludeFlags:
    if raw is None:
        return IncludeFlags()
    if not isinstance(raw, dict):
        raise ProductionValidationError("includeFlags", "must be an object")
    defaults = IncludeFlags()
    values: dict[str, bool] = {}
    for key in ("text", "images", "metadata", "native"):
        value = raw.get(key, getattr(defaults, key))
        if not isinstance(value, bool):
            raise ProductionValidationError(f"includeFlags.{key}", "must be a boolean")
        values[key] = value
    return IncludeFlags(**values)


def _parse_document_ids(payload: dict[str, Any]) -> list[int]:
    raw = payload.get("documentIds")
    if not isinstance(raw, list) or not raw:
        raise ProductionValidationError("documentIds", "must be a non-empty list")
    for value in raw:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ProductionValidationError("documentIds", "must contain only integers")
    if len(set(raw)) != len(raw):
        raise ProductionValidationError("documentIds", "must not contain duplicates")
    return list(raw)
