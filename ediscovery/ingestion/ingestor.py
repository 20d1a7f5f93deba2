from pathlib import Path

from ediscovery.config.settings import Settings
from ediscovery.database.models import Document
from ediscovery.database.repositories.base import BaseDocumentRepository
from ediscovery.extraction.factory import FormatExtractorFactory
from ediscovery.ingestion.file_store import FileStore
from ediscovery.ingestion.models import UploadedFile
from ediscovery.ingestion.pipeline import PipelineContext, PipelineStep
from ediscovery.ingestion.steps import (
    ExtractTextStep,
    PersistDocumentStep,
    StoreFileStep,
    ValidateUploadStep,
)


class Ingestor:
    """Runs an upload through validate -> extract -> store -> persist.

    Validation happens before any extraction or write, so a rejected upload
    leaves no trace.
    """

    def __init__(self, steps: list[PipelineStep]) -> None:
        self._steps = steps

    def ingest(self, upload: UploadedFile) -> Document:
        context = PipelineContext(upload=upload)
        for step in self._steps:
            context = step.run(context)
        if context.document is None:
            raise RuntimeError("Ingestion pipeline finished without a document")
        return context.document


def build_ingestor(
    settings: Settings,
    doc_repo: BaseDocumentRepository,
    file_store: FileStore | None = None,
) -> Ingestor:
    store = file_store if file_store is not None else FileStore(Path(settings.files_root))
    return Ingestor(
        [
            ValidateUploadStep(settings.max_upload_bytes),
            ExtractTextStep(FormatExtractorFactory.create(settings)),
            StoreFileStep(store),
            PersistDocumentStep(doc_repo, store),
        ]
    )
