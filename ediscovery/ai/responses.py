"""Parses and validates JSON answers returned by the AI provider."""

import json
from typing import Any

from ediscovery.ai.exceptions import AIResponseError
from ediscovery.ai.models import TagSuggestion
from ediscovery.detection.models import CandidateSource, PiiCandidate

ENTITY_CATEGORIES = (
    "people",
    "organizations",
    "dates",
    "locations",
    "legal_references",
    "financial_values",
)


def parse_json(raw: str) -> Any:
    """Decode *raw*, tolerating a surrounding Markdown code fence."""
    cleaned = raw.strip()
    if cleaned.startswith("```"):
        lines = cleaned.splitlines()
        if lines and lines[0].startswith("```"):
            lines = lines[1:]
        if lines and lines[-1].strip() == "```":
            lines = lines[:-1]
        cleaned = "\n".join(lines)

    try:
        return json.loads(cleaned)
    except json.JSONDecodeError as exc:
        raise AIResponseError(f"Invalid JSON response: {exc}") from exc


def build_pii_candidates(data: Any) -> list[PiiCandidate]:
    """Accepts ``{"redactions": [...]}`` or a bare list of ``{text, reason}``."""
    items = data.get("redactions") if isinstance(data, dict) else data
    if not isinstance(items, list):
        raise AIResponseError("'redactions' must be a list")

    candidates: list[PiiCandidate] = []
    for i, item in enumerate(items):
        if not isinstance(item, dict):
            raise AIResponseError(f"redactions[{i}] must be an object")
        text = item.get("text")
        if not text or not isinstance(text, str):
            raise AIResponseError(f"redactions[{i}].text must be a non-empty string")
        reason = item.get("reason")
        if not isinstance(reason, str) or not reason.strip():
            reason = "Sensitive information"
        candidates.append(PiiCandidate(text=text, reason=reason, source=CandidateSource.AI))
    return candidates


def build_tag_suggestions(data: Any) -> list[TagSuggestion]:
    if not isinstance(data, dict) or not isinstance(data.get("tags"), list):
        raise AIResponseError("'tags' must be a list")

    suggestions: list[TagSuggestion] = []
    for i, item in enumerate(data["tags"]):
        if not isinstance(item, dict):
            raise AIResponseError(f"tags[{i}] must be an object")
        name = item.get("name")
        if not name or not isinstance(name, str):
            raise AIResponseError(f"tags[{i}].name must be a non-empty string")
        confidence = item.get("confidence")
        if isinstance(confidence, bool) or not isinstance(confidence, (int, float)):
            raise AIResponseError(f"tags[{i}].confidence must be a number")
        suggestions.append(
            TagSuggestion(name=name, confidence=max(0.0, min(1.0, float(confidence))))
        )
    return suggestions


def build_entities(data: Any) -> dict[str, list[str]]:
    raw = data.get("entities") if isinstance(data, dict) else None
    if not isinstance(raw, dict):
        raise AIResponseError("'entities' must be an object")

    entities: dict[str, list[str]] = {}
    for category in ENTITY_CATEGORIES:
        values = raw.get(category, [])
        if not isinstance(values, list):
            raise AIResponseError(f"entities.{category} must be a list")
        seen: list[str] = []
        for value in values:
            if isinstance(value, str) and value.strip() and value not in seen:
                seen.append(value)
        entities[category] = seen
    return entities
