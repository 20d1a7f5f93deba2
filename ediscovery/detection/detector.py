from ediscovery.ai import responses
from ediscovery.ai.client_base import BaseAIClient
from ediscovery.ai.exceptions import AIError
from ediscovery.ai.models import AIModelBinding
from ediscovery.ai.prompt_loader import load_json_schema, load_system_prompt
from ediscovery.detection.base import BasePiiDetector
from ediscovery.detection.models import PiiCandidate
from ediscovery.detection.regex_detector import RegexPiiDetector
from ediscovery.logging.logger import Log


class PiiDetector(BasePiiDetector):
    """Asks the AI client for redaction candidates, falling back to regex rules.

    Detection never fails because of the provider: any AIError, including a
    timeout or an answer that does not validate, switches to the fallback.
    """

    MIN_TEXT_LENGTH = 10
    MAX_CONTENT_CHARS = 12000

    def __init__(
        self,
        *,
        client: BaseAIClient,
        binding: AIModelBinding,
        fallback: BasePiiDetector | None = None,
        default_timeout_seconds: float | None = None,
    ) -> None:
        self._client = client
        self._binding = binding
        self._fallback = fallback if fallback is not None else RegexPiiDetector()
        self._default_timeout_seconds = default_timeout_seconds

    def detect(self, text: str, timeout_seconds: float | None = None) -> list[PiiCandidate]:
        if len(text) < self.MIN_TEXT_LENGTH:
            return []

        timeout = timeout_seconds if timeout_seconds is not None else self._default_timeout_seconds
        try:
            candidates = self._detect_with_ai(text, timeout)
        except AIError as exc:
            Log.warning(f"AI PII detection failed, using pattern fallback: {exc}")
            candidates = self._fallback.detect(text)
            Log.info(f"Pattern fallback found {len(candidates)} PII candidates")
            return candidates

        Log.info(f"AI found {len(candidates)} PII candidates")
        return candidates

    def _detect_with_ai(self, text: str, timeout: float | None) -> list[PiiCandidate]:
        raw = self._client.create_chat_completion(
            model=self._binding.model,
            temperature=self._binding.temperature,
            system_prompt=load_system_prompt("pii"),
            user_prompt=f"Document:\n\n{text[: self.MAX_CONTENT_CHARS]}",
            response_name="pii_candidates",
            json_schema=load_json_schema("pii"),
            timeout_seconds=timeout,
        )
        Log.debug(f"AI raw PII response:\n{raw}")
        return responses.build_pii_candidates(responses.parse_json(raw))
