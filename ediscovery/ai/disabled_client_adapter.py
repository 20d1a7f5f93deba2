from ediscovery.ai.client_base import BaseAIClient
from ediscovery.ai.exceptions import AIUnavailableError


class DisabledClientAdapter(BaseAIClient):
    """Client for deployments without an AI provider; every call is unavailable."""

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
        _ = model, temperature, system_prompt, user_prompt, response_name, json_schema
        _ = timeout_seconds
        raise AIUnavailableError("AI provider is disabled")
