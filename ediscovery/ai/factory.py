from typing import ClassVar

from ediscovery.ai.client_base import BaseAIClient
from ediscovery.ai.disabled_client_adapter import DisabledClientAdapter
from ediscovery.ai.example_client_adapter import ExampleClientAdapter
from ediscovery.ai.models import AIModelBinding
from ediscovery.ai.openai_client_adapter import OpenAIClientAdapter
from ediscovery.config.settings import Settings


class AIClientFactory:
    """Creates the configured AI client and the model binding used with it."""

    OLLAMA_BASE_URL: ClassVar[str] = "http://localhost:11434/v1"
    PROVIDERS: ClassVar[tuple[str, ...]] = (
        "disabled",
        "example",
        "ollama",
        "openai",
        "openai_compatible",
    )

    @classmethod
    def create(cls, settings: Settings) -> tuple[BaseAIClient, AIModelBinding]:
        """Create a configured client from application settings."""
        provider = settings.ai_provider.lower()
        if provider == "disabled":
            return DisabledClientAdapter(), AIModelBinding(model="disabled", temperature=0.0)
        if provider == "example":
            return ExampleClientAdapter(), AIModelBinding(model="example", temperature=0.0)
        if provider == "openai":
            client = OpenAIClientAdapter(
                api_key=settings.ai_openai_api_key,
                timeout_seconds=settings.ai_openai_timeout_seconds,
            )
            return client, AIModelBinding(
                model=settings.ai_openai_model_name,
                temperature=settings.ai_openai_temperature,
            )
        if provider == "openai_compatible":
            url = settings.ai_openai_compatible_base_url.strip()
            if not url:
                raise ValueError(
                    "ai_openai_compatible_base_url is required for "
                    "ai_provider=openai_compatible"
                )
            client = OpenAIClientAdapter(
                api_key=settings.ai_openai_compatible_api_key,
                timeout_seconds=settings.ai_openai_compatible_timeout_seconds,
                base_url=url,
            )
            return client, AIModelBinding(model=settings.ai_openai_compatible_model_name)
        if provider == "ollama":
            client = OpenAIClientAdapter(
                api_key=settings.ai_ollama_api_key,
                timeout_seconds=settings.ai_ollama_timeout_seconds,
                base_url=cls.OLLAMA_BASE_URL,
            )
            return client, AIModelBinding(model=settings.ai_ollama_model_name)
        raise ValueError(
            f"Unknown AI provider '{provider}'. Choose from: {list(cls.PROVIDERS)}"
        )
