"""Pattern-based PII detection used when the AI provider is unavailable."""

import re
from typing import ClassVar

from ediscovery.detection.base import BasePiiDetector
from ediscovery.detection.models import CandidateSource, PiiCandidate


class RegexPiiDetector(BasePiiDetector):
    """Runs each labelled pattern once over the text, in declaration order.

    Results are additive: one string may match several patterns (a 10-digit
    phone number is also a zip code prefix) and is reported once per match.
    """

    _RULES: ClassVar[list[tuple[str, re.Pattern[str]]]] = [
        ("Phone Number", re.compile(r"\b\d{3}[-.\s]?\d{3}[-.\s]?\d{4}\b")),
        (
            "Email Address",
            re.compile(r"\b[A-Z0-9._%+-]+@[A-Z0-9.-]+\.[A-Z]{2,}\b", re.IGNORECASE),
        ),
        ("SSN", re.compile(r"\b\d{3}[-.\s]?\d{2}[-.\s]?\d{4}\b")),
        ("Zip Code", re.compile(r"\b\d{5}(?:[-\s]\d{4})?\b")),
        ("Financial Amount", re.compile(r"\$\s*\d+(?:,\d{3})*(?:\.\d{2})?")),
        ("IP Address", re.compile(r"\b(?:\d{1,3}\.){3}\d{1,3}\b")),
        (
            "Address",
            re.compile(
                r"\b\d+\s+[A-Za-z\s]+(?:Avenue|Ave|Street|St|Road|Rd|Boulevard|Blvd"
                r"|Lane|Ln|Drive|Dr|Way|Court|Ct|Place|Pl|Terrace|Ter)\b[^,]*,?\s*"
                r"[A-Za-z\s]+,\s*[A-Z]{2}\s*\d{5}(?:-\d{4})?\b",
                re.IGNORECASE,
            ),
        ),
    ]

    def detect(self, text: str, timeout_seconds: float | None = None) -> list[PiiCandidate]:
        _ = timeout_seconds
        candidates: list[PiiCandidate] = []
        for label, pattern in self._RULES:
            for match in pattern.finditer(text):
                candidates.append(
                    PiiCandidate(text=match.group(0), reason=label, source=CandidateSource.REGEX)
                )
        return candidates
