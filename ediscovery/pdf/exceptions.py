class PdfExtractionError(Exception):
    """Raised when a PDF engine fails to read the document."""


class SparsePdfTextError(PdfExtractionError):
    """Raised when text operators are present but carry too little text to use."""
