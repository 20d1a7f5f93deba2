"""Offline AI client adapter.

Returns fixed, schema-valid answers without network calls. Useful for local
development, tests, and as a template for new provider adapters: implement
BaseAIClient and register the provider in AIClientFactory.
"""

import json
from typing import ClassVar

from ediscovery.ai.client_base import BaseAIClient


class ExampleClientAdapter(BaseAIClient):
    """Answers every request with a canned response keyed by response name."""

    DEFAULT_SUMMARY: ClassVar[str] = (
        "This document has been ingested for review. No AI provider is configured, "
        "so this summary is a placeholder."
    )

    DEFAULT_RESPONSES: ClassVar[dict[str, object]] = {
        "pii_candidates": {"redactions": []},
        "tag_suggestions": {"tags": []},
        "document_entities": {
            "entities": {
                "people": [],
                "organizations": [],
                "dates": [],
                "locations": [],
                "legal_references": [],
                "financial_values": [],
            }
        },
    }

    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
        response_name: str | None = None,
        json_schema: dict[str, object] | None = None,
        timeout_seconds: float | None = None,
    ) -> str:
        _ = model, temperature, system_prompt, user_prompt, json_schema, timeout_seconds
        if response_name is None:
            return self.DEFAULT_SUMMARY
        return json.dumps(self.DEFAULT_RESPONSES.get(response_name, {}))
