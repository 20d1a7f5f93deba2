from abc import ABC, abstractmethod

from ediscovery.detection.models import PiiCandidate


class BasePiiDetector(ABC):
    """Contract for components that propose redaction candidates."""

    @abstractmethod
    def detect(self, text: str, timeout_seconds: float | None = None) -> list[PiiCandidate]:
        """Return candidates in detection order; duplicates are allowed."""
