from abc import ABC, abstractmethod


class BaseAIClient(ABC):
    """Contract for provider-specific AI text-analysis clients."""

    @abstractmethod
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
        """Return the provider response as plain text.

        When *json_schema* is given the provider is asked for a JSON document
        named *response_name* that conforms to it; otherwise for free text.

        Raises:
            AIUnavailableError: on network, timeout or provider-side failures.
            AIResponseError: when the provider returns no content.
        """
