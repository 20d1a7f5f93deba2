"""Per-extension constants for ingestion and download."""

SUPPORTED_EXTENSIONS = frozenset(
    {"pdf", "docx", "doc", "msg", "eml", "txt", "csv", "xlsx", "xls", "pptx", "ppt"}
)

DEFAULT_CONTENT_TYPE = "application/octet-stream"

CONTENT_TYPES = {
    "pdf": "application/pdf",
    "docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    "doc": "application/msword",
    "xlsx": "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    "xls": "application/vnd.ms-excel",
    "pptx": "application/vnd.openxmlformats-officedocument.presentationml.presentation",
    "ppt": "application/vnd.ms-powerpoint",
    "txt": "text/plain",
    "csv": "text/csv",
    "eml": "message/rfc822",
    "msg": "application/vnd.ms-outlook",
}

_DEFAULT_SUMMARY = (
    "This document has been successfully uploaded and is available for review. "
    "The file type may require specialized software to view in its native format."
)

_SUMMARIES = {
    "pdf": (
        "This is a PDF document containing text and potentially images or other "
        "elements. Use the Native View tab to view the original PDF formatting."
    ),
    "docx": (
        "This is a Word document containing formatted text and potentially tables or "
        "other content. Use the Native View tab to download and open the original "
        "file with full formatting."
    ),
    "xlsx": (
        "This is a spreadsheet containing data in tabular format across one or more "
        "sheets. Use the Native View tab to download and open the file with all "
        "formatting and formulas intact."
    ),
    "csv": (
        "This is a CSV file containing comma-separated data, typically used for "
        "tabular information and data exchange between applications."
    ),
    "txt": (
        "This is a plain text document without formatting, containing raw textual content."
    ),
}
_SUMMARIES["doc"] = _SUMMARIES["docx"]
_SUMMARIES["xls"] = _SUMMARIES["xlsx"]


def normalize_extension(extension: str) -> str:
    return extension.lower().lstrip(".")


def content_type_for(extension: str) -> str:
    return CONTENT_TYPES.get(normalize_extension(extension), DEFAULT_CONTENT_TYPE)


def default_summary(extension: str) -> str:
    """Placeholder summary stored at ingestion, before any AI analysis."""
    return _SUMMARIES.get(normalize_extension(extension), _DEFAULT_SUMMARY)
