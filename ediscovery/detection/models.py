from dataclasses import dataclass
from enum import Enum


class CandidateSource(str, Enum):
    AI = "ai"
    REGEX = "regex"


@dataclass(frozen=True)
class PiiCandidate:
    """A proposed redaction: literal text found in the document and why."""

    text: str
    reason: str
    source: CandidateSource = CandidateSource.AI
