from dataclasses import dataclass, field
from pathlib import PurePath
from typing import Any


@dataclass(frozen=True)
class UploadedFile:
    """An upload as received: bytes plus the caller-supplied form fields."""

    data: bytes
    original_name: str
    title: str | None = None
    custodian: str | None = None
    content: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def extension(self) -> str:
        return PurePath(self.original_name).suffix.lower().lstrip(".")

    @property
    def size(self) -> int:
        return len(self.data)

    @property
    def display_title(self) -> str:
        return self.title or self.original_name


@dataclass(frozen=True)
class DownloadedFile:
    content: bytes
    content_type: str
    filename: str
