from ediscovery.config.settings import Settings
from ediscovery.pdf.base import BasePdfExtractor
from ediscovery.pdf.heuristic_adapter import HeuristicPdfAdapter
from ediscovery.pdf.pdfplumber_adapter import PdfPlumberAdapter
from ediscovery.pdf.pymupdf_adapter import PyMuPdfAdapter


class PdfExtractorFactory:
    """Creates the PDF engine named by settings.pdf_engine."""

    ENGINES = ("heuristic", "pdfplumber", "pymupdf")

    @classmethod
    def create(cls, settings: Settings) -> BasePdfExtractor:
        engine = settings.pdf_engine.lower()
        if engine == "heuristic":
            return HeuristicPdfAdapter(scan_bytes=settings.pdf_scan_bytes)
        if engine == "pdfplumber":
            return PdfPlumberAdapter()
        if engine == "pymupdf":
            return PyMuPdfAdapter()
        raise ValueError(f"Unknown PDF engine '{engine}'. Choose from: {list(cls.ENGINES)}")
