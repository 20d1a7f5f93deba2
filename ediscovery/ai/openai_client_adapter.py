import httpx
import openai

from ediscovery.ai.client_base import BaseAIClient
from ediscovery.ai.exceptions import AIResponseError, AIUnavailableError


class OpenAIClientAdapter(BaseAIClient):
    """AI client adapter built on the OpenAI-compatible chat completions API."""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
        max_tokens: int = 1000,
    ) -> None:
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
            max_retries=0,
        )
        self._max_tokens = max_tokens

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
        options: dict[str, object] = {}
        if json_schema is not None:
            options["response_format"] = {
                "type": "json_schema",
                "json_schema": {
                    "name": response_name or "result",
                    "strict": True,
                    "schema": json_schema,
                },
            }
        if timeout_seconds is not None:
            options["timeout"] = timeout_seconds

        try:
            response = self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                max_tokens=self._max_tokens,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
                **options,  # type: ignore[arg-type]
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise AIUnavailableError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise AIUnavailableError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            raise AIResponseError("AI returned no choices")
        content = response.choices[0].message.content
        if content is None:
            raise AIResponseError("AI returned empty response")
        return content
