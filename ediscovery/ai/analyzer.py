"""AI-assisted document analysis: summaries, tag suggestions and entities."""

from ediscovery.ai import responses
from ediscovery.ai.client_base import BaseAIClient
from ediscovery.ai.models import AIModelBinding, TagSuggestion
from ediscovery.ai.prompt_loader import load_json_schema, load_system_prompt
from ediscovery.logging.logger import Log


class DocumentAnalyzer:
    """Runs the review-support prompts against an injected AI client.

    Nothing here falls back: provider failures surface as AIUnavailableError so
    callers can retry, malformed answers as AIResponseError.
    """

    MAX_CONTENT_CHARS = 12000

    def __init__(self, *, client: BaseAIClient, binding: AIModelBinding) -> None:
        self._client = client
        self._binding = binding

    def summarize(self, content: str) -> str:
        raw = self._client.create_chat_completion(
            model=self._binding.model,
            temperature=self._binding.temperature,
            system_prompt=load_system_prompt("summary"),
            user_prompt=self._document_prompt(content),
        )
        summary = raw.strip()
        Log.info(f"Summary generated: {len(summary)} chars")
        return summary

    def suggest_tags(self, content: str) -> list[TagSuggestion]:
        data = self._ask_json("tags", "tag_suggestions", content)
        tags = responses.build_tag_suggestions(data)
        Log.info(f"Tag suggestions generated: {len(tags)}")
        return tags

    def extract_entities(self, content: str) -> dict[str, list[str]]:
        data = self._ask_json("entities", "document_entities", content)
        return responses.build_entities(data)

    def _ask_json(self, prompt_name: str, response_name: str, content: str) -> object:
        raw = self._client.create_chat_completion(
            model=self._binding.model,
            temperature=self._binding.temperature,
            system_prompt=load_system_prompt(prompt_name),
            user_prompt=self._document_prompt(content),
            response_name=response_name,
            json_schema=load_json_schema(prompt_name),
        )
        Log.debug(f"AI raw response:\n{raw}")
        return responses.parse_json(raw)

    def _document_prompt(self, content: str) -> str:
        return f"Document:\n\n{content[: self.MAX_CONTENT_CHARS]}"
