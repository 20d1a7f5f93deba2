class IngestionError(Exception):
    """Base exception for all upload and file-store errors."""


class FileTooLargeError(IngestionError):
    """Raised when an upload exceeds the configured size limit."""


class UnsupportedExtensionError(IngestionError):
    """Raised when an upload's extension is not accepted for ingestion."""


class StoredFileNotFoundError(IngestionError):
    """Raised when a document's original file is missing from the file store."""
