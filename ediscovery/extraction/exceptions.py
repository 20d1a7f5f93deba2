class ExtractionError(Exception):
    """Raised inside an extraction branch; FormatExtractor turns it into a placeholder."""
