from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from ediscovery.redaction.models import BoxRegion


class ArtifactFormat(str, Enum):
    PDF = "PDF"
    TIFF = "TIFF"
    NATIVE = "NATIVE"


class LoadFileFormat(str, Enum):
    DAT = "DAT"  # Concordance
    OPT = "OPT"  # Opticon
    CSV = "CSV"
    DII = "DII"  # Summation, emitted in the CSV layout
    XML = "XML"  # EDRM, emitted in the CSV layout


@dataclass(frozen=True)
class IncludeFlags:
    text: bool = True
    images: bool = True
    metadata: bool = True
    native: bool = False


@dataclass(frozen=True)
class ProductionSetConfig:
    """Export request settings. Immutable once created."""

    name: str
    prefix: str
    start_number: int = 1
    format: ArtifactFormat = ArtifactFormat.PDF
    include: IncludeFlags = field(default_factory=IncludeFlags)
    load_file_format: LoadFileFormat = LoadFileFormat.DAT


@dataclass(frozen=True)
class ProductionSet:
    """A persisted production set configuration."""

    id: int
    config: ProductionSetConfig
    created_at: datetime | None = None


@dataclass(frozen=True)
class BatesAssignment:
    """A bates number planned for a document before it is persisted."""

    document_id: int
    sequence: int
    bates_number: str


@dataclass(frozen=True)
class ProductionDocumentLink:
    """Associates a production set with a document and its single bates number."""

    production_set_id: int
    document_id: int
    bates_number: str


@dataclass
class ProductionResult:
    """Output of one assembly run."""

    production_set: ProductionSet
    links: list[ProductionDocumentLink]
    load_file: bytes
    load_file_name: str
    text_files: dict[str, str] = field(default_factory=dict)
    box_overlays: dict[str, dict[int, list[BoxRegion]]] = field(default_factory=dict)
    redacted_document_ids: list[int] = field(default_factory=list)

    @property
    def bates_numbers(self) -> list[str]:
        return [link.bates_number for link in self.links]
