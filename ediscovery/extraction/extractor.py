from collections.abc import Callable

from ediscovery.extraction import placeholders
from ediscovery.extraction.docx_reader import DocxReader
from ediscovery.extraction.exceptions import ExtractionError
from ediscovery.extraction.sanitizer import sanitize_text
from ediscovery.logging.logger import Log
from ediscovery.pdf.base import BasePdfExtractor
from ediscovery.pdf.exceptions import PdfExtractionError, SparsePdfTextError


class FormatExtractor:
    """Turns uploaded file bytes into reviewable plain text.

    ``extract`` never raises: every failure degrades to a placeholder that
    names the file so an upload is never blocked by its content.
    """

    PLAIN_TEXT_TYPES = frozenset({"txt", "csv"})
    SPREADSHEET_TYPES = frozenset({"xlsx", "xls"})
    PRESENTATION_TYPES = frozenset({"pptx", "ppt"})

    def __init__(
        self,
        pdf_extractor: BasePdfExtractor,
        docx_reader: DocxReader | None = None,
    ) -> None:
        self._pdf_extractor = pdf_extractor
        self._docx_reader = docx_reader if docx_reader is not None else DocxReader()

    def extract(self, data: bytes, extension: str, title: str) -> str:
        """Return sanitized, non-empty text for *data*.

        Args:
            data: Raw file content.
            extension: Declared extension, with or without the leading dot.
            title: Display title used in placeholders and the PDF footer.
        """
        ext = extension.lower().lstrip(".")
        try:
            text = self._dispatch(ext)(data, title)
        except Exception as exc:
            Log.warning(f"Extraction failed, storing placeholder: {exc}", title=title, type=ext)
            text = placeholders.unavailable(title)

        text = sanitize_text(text)
        if not text.strip():
            return placeholders.unavailable(title)
        return text

    def _dispatch(self, ext: str) -> Callable[[bytes, str], str]:
        if ext in self.PLAIN_TEXT_TYPES:
            return self._extract_plain_text
        if ext == "pdf":
            return self._extract_pdf
        if ext == "docx":
            return self._extract_docx
        if ext == "doc":
            return lambda data, title: placeholders.legacy_word(title, len(data))
        if ext in self.SPREADSHEET_TYPES:
            return lambda data, title: placeholders.spreadsheet(title, len(data))
        if ext in self.PRESENTATION_TYPES:
            return lambda data, title: placeholders.presentation(title, len(data))
        return lambda data, title: self._extract_unknown(data, title, ext)

    def _extract_plain_text(self, data: bytes, title: str) -> str:
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError:
            Log.warning("Text file is not valid UTF-8", title=title)
            return placeholders.text_decode_failed(title, len(data))

    def _extract_pdf(self, data: bytes, title: str) -> str:
        try:
            text = self._pdf_extractor.extract(data)
        except SparsePdfTextError as exc:
            Log.info(f"Too little PDF text found: {exc}", title=title, size=len(data))
            return placeholders.pdf_limited(title, len(data))
        except PdfExtractionError as exc:
            Log.warning(f"PDF engine failed: {exc}", title=title)
            return placeholders.pdf_failed(title, len(data))

        if not text.strip():
            Log.info("No extractable PDF text found", title=title, size=len(data))
            return placeholders.pdf_unextractable(title, len(data))

        Log.info(f"Extracted {len(text)} chars from PDF", title=title)
        return text + placeholders.pdf_footer(title, len(data))

    def _extract_docx(self, data: bytes, title: str) -> str:
        try:
            text = self._docx_reader.read(data)
        except ExtractionError as exc:
            Log.warning(f"DOCX extraction failed: {exc}", title=title)
            return placeholders.word_failed(title, len(data))

        if not text.strip():
            return placeholders.word_empty(title, len(data))
        Log.info(f"Extracted {len(text)} chars from DOCX", title=title)
        return text

    def _extract_unknown(self, data: bytes, title: str, ext: str) -> str:
        content = data.decode("utf-8", errors="replace")
        if "\x00" in content:
            return placeholders.binary(ext, title, len(data))
        return content
