from ediscovery.ai.factory import AIClientFactory
from ediscovery.config.settings import Settings
from ediscovery.detection.detector import PiiDetector


class PiiDetectorFactory:
    """Creates a PiiDetector bound to the configured AI provider."""

    @classmethod
    def create(cls, settings: Settings) -> PiiDetector:
        client, binding = AIClientFactory.create(settings)
        return PiiDetector(
            client=client,
            binding=binding,
            default_timeout_seconds=settings.pii_detection_timeout_seconds,
        )
