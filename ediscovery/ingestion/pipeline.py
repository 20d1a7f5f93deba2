from abc import ABC, abstractmethod
from dataclasses import dataclass

from ediscovery.database.models import Document
from ediscovery.ingestion.models import UploadedFile


@dataclass(slots=True)
class PipelineContext:
    upload: UploadedFile
    extracted_text: str = ""
    file_path: str = ""
    document: Document | None = None


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
