from ediscovery.database.exceptions import DocumentEncodingError
from ediscovery.database.models import NewDocument
from ediscovery.database.repositories.base import BaseDocumentRepository
from ediscovery.extraction.extractor import FormatExtractor
from ediscovery.extraction.sanitizer import sanitize_text
from ediscovery.ingestion.content_types import SUPPORTED_EXTENSIONS, default_summary
from ediscovery.ingestion.exceptions import FileTooLargeError, UnsupportedExtensionError
from ediscovery.ingestion.file_store import FileStore
from ediscovery.ingestion.pipeline import PipelineContext, PipelineStep
from ediscovery.logging.logger import Log


class ValidateUploadStep(PipelineStep):
    def __init__(
        self,
        max_bytes: int,
        allowed_extensions: frozenset[str] = SUPPORTED_EXTENSIONS,
    ) -> None:
        self._max_bytes = max_bytes
        self._allowed_extensions = allowed_extensions

    def run(self, context: PipelineContext) -> PipelineContext:
        upload = context.upload
        if upload.size > self._max_bytes:
            raise FileTooLargeError(
                f"File is {upload.size} bytes; the limit is {self._max_bytes} bytes"
            )
        if upload.extension not in self._allowed_extensions:
            raise UnsupportedExtensionError(
                f"Extension '{upload.extension}' is not supported. "
                f"Choose from: {sorted(self._allowed_extensions)}"
            )
        return context


class ExtractTextStep(PipelineStep):
    def __init__(self, extractor: FormatExtractor) -> None:
        self._extractor = extractor

    def run(self, context: PipelineContext) -> PipelineContext:
        upload = context.upload
        # Caller-supplied text replaces extraction.
        if upload.content:
            context.extracted_text = sanitize_text(upload.content)
        if not context.extracted_text.strip():
            context.extracted_text = self._extractor.extract(
                upload.data, upload.extension, upload.display_title
            )
        Log.info(
            f"Extracted {len(context.extracted_text)} chars",
            title=upload.display_title,
            type=upload.extension,
        )
        return context


class StoreFileStep(PipelineStep):
    def __init__(self, file_store: FileStore) -> None:
        self._file_store = file_store

    def run(self, context: PipelineContext) -> PipelineContext:
        context.file_path = self._file_store.save(context.upload.data, context.upload.original_name)
        return context


class PersistDocumentStep(PipelineStep):
    def __init__(self, doc_repo: BaseDocumentRepository, file_store: FileStore) -> None:
        self._doc_repo = doc_repo
        self._file_store = file_store

    def run(self, context: PipelineContext) -> PipelineContext:
        upload = context.upload
        new_document = NewDocument(
            title=upload.display_title,
            content=context.extracted_text,
            file_path=context.file_path,
            file_type=upload.extension,
            file_size=upload.size,
            custodian=upload.custodian or None,
            metadata=dict(upload.metadata),
            ai_summary=default_summary(upload.extension),
        )
        try:
            context.document = self._doc_repo.create(new_document)
        except DocumentEncodingError:
            self._file_store.delete(context.file_path)
            Log.warning(
                "Document text rejected by the store, upload discarded",
                title=upload.display_title,
            )
            raise

        Log.info(f"Document {context.document.id} ingested", title=upload.display_title)
        return context
