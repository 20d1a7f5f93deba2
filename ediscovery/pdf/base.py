from abc import ABC, abstractmethod


class BasePdfExtractor(ABC):
    """Contract for all PDF text extraction engines."""

    @abstractmethod
    def extract(self, pdf_bytes: bytes) -> str:
        """Extract plain text from PDF bytes.

        Args:
            pdf_bytes: Raw PDF file content.

        Returns:
            Extracted text, or an empty string when the engine finds no
            usable text (image-only scans, encrypted streams, ...).

        Raises:
            PdfExtractionError: if the engine cannot read the bytes at all.
            SparsePdfTextError: if text operators were found but yielded too
                little text.
        """
