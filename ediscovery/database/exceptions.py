ENCODING_ERROR_MESSAGE = (
    "The document contains characters that cannot be processed. "
    "Please try converting it to a different format."
)


class RepositoryError(Exception):
    """Base exception for all persistence errors."""


class DocumentNotFoundError(RepositoryError):
    """Raised when a document cannot be found in the store."""


class DocumentEncodingError(RepositoryError):
    """Raised when the store rejects document text for its character encoding."""

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__(ENCODING_ERROR_MESSAGE)


class DocumentInUseError(RepositoryError):
    """Raised when deleting a document that belongs to a production set."""
