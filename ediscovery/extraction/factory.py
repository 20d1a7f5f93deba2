from ediscovery.config.settings import Settings
from ediscovery.extraction.extractor import FormatExtractor
from ediscovery.pdf.factory import PdfExtractorFactory


class FormatExtractorFactory:
    """Creates a FormatExtractor wired to the configured PDF engine."""

    @classmethod
    def create(cls, settings: Settings) -> FormatExtractor:
        return FormatExtractor(pdf_extractor=PdfExtractorFactory.create(settings))
