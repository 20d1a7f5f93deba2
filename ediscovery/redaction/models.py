from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import ClassVar

from ediscovery.redaction.exceptions import RedactionValidationError


class RedactionMode(str, Enum):
    TEXT = "text"
    BOX = "box"


@dataclass(frozen=True)
class TextSpanRegion:
    """A literal substring of the extracted text to obscure."""

    mode: ClassVar[RedactionMode] = RedactionMode.TEXT

    text: str
    reason: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.text, str) or not self.text:
            raise RedactionValidationError("text", "must be a non-empty string")


@dataclass(frozen=True)
class BoxRegion:
    """An opaque rectangle over a rendered page, in viewer pixel space."""

    mode: ClassVar[RedactionMode] = RedactionMode.BOX

    page_number: int
    x: int
    y: int
    width: int
    height: int
    reason: str | None = None

    def __post_init__(self) -> None:
        if self.page_number < 1:
            raise RedactionValidationError("pageNumber", "must be >= 1")
        if self.width <= 0:
            raise RedactionValidationError("width", "must be positive")
        if self.height <= 0:
            raise RedactionValidationError("height", "must be positive")


RedactionRegion = TextSpanRegion | BoxRegion


@dataclass(frozen=True)
class Redaction:
    """A persisted redaction owned by exactly one document."""

    id: int
    document_id: int
    region: RedactionRegion
    created_at: datetime | None = None
