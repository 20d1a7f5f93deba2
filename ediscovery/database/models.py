from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass
class Document:
    """Represents a row from the documents table."""

    id: int
    title: str
    content: str
    file_path: str
    file_type: str
    file_size: int
    custodian: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)
    ai_summary: str | None = None
    is_reviewed: bool = False
    is_redacted: bool = False
    uploaded_at: datetime | None = None


@dataclass(frozen=True)
class NewDocument:
    """Column values for inserting a document; id and timestamps come from the store."""

    title: str
    content: str
    file_path: str
    file_type: str
    file_size: int
    custodian: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)
    ai_summary: str | None = None
