"""Reviewer-facing text stored when a file's content cannot be extracted."""

NATIVE_VIEW_HINT = "To view the document properly, please use the Native View tab."


def format_size_kb(size_bytes: int) -> str:
    return f"{size_bytes / 1024:.2f}"


def _size_line(size_bytes: int) -> str:
    return f"File size: {format_size_kb(size_bytes)} KB"


def text_decode_failed(title: str, size_bytes: int) -> str:
    return (
        f"The text file \"{title}\" could not be decoded as UTF-8 text.\n\n"
        "It may be empty or saved in an unsupported encoding.\n\n"
        f"{_size_line(size_bytes)}"
    )


def word_empty(title: str, size_bytes: int) -> str:
    return (
        f"Word Document: {title}\n\n"
        "This document appears to be empty or contains no extractable text content.\n\n"
        "To view the document with all formatting, please use the Native View tab.\n\n"
        f"{_size_line(size_bytes)}"
    )


def word_failed(title: str, size_bytes: int) -> str:
    return (
        f"Word Document: {title}\n\n"
        "This document was uploaded in Microsoft Word format but text extraction failed.\n\n"
        "To view the document with all formatting, please use the Native View tab.\n\n"
        f"{_size_line(size_bytes)}"
    )


def legacy_word(title: str, size_bytes: int) -> str:
    return (
        f"Word Document: {title}\n\n"
        "This document was uploaded in the older Microsoft Word DOC format.\n\n"
        f"{NATIVE_VIEW_HINT}\n\n"
        f"{_size_line(size_bytes)}"
    )


def spreadsheet(title: str, size_bytes: int) -> str:
    return (
        f"Excel Spreadsheet: {title}\n\n"
        "This document was uploaded in Microsoft Excel format. Excel files typically "
        "contain tables of data organized in cells, formulas, and multiple worksheets.\n\n"
        "You can view the original Excel file by clicking the \"Native View\" tab above.\n\n"
        f"{_size_line(size_bytes)}"
    )


def presentation(title: str, size_bytes: int) -> str:
    return (
        f"PowerPoint Presentation: {title}\n\n"
        "This document was uploaded in Microsoft PowerPoint format. Presentations "
        "typically contain slides with text, images, charts, and speaker notes.\n\n"
        "You can view the original presentation by clicking the \"Native View\" tab above.\n\n"
        f"{_size_line(size_bytes)}"
    )


def pdf_unextractable(title: str, size_bytes: int) -> str:
    return (
        f"The PDF file \"{title}\" appears to be image-based or contains no extractable text.\n\n"
        f"{NATIVE_VIEW_HINT}\n\n"
        f"{_size_line(size_bytes)}"
    )


def pdf_limited(title: str, size_bytes: int) -> str:
    return (
        f"The PDF file \"{title}\" appears to contain limited extractable text content.\n\n"
        f"{NATIVE_VIEW_HINT}\n\n"
        f"{_size_line(size_bytes)}"
    )


def pdf_failed(title: str, size_bytes: int) -> str:
    return (
        f"Error processing PDF file \"{title}\".\n\n"
        "The file was uploaded successfully but text extraction failed.\n\n"
        "To view the document, please use the Native View tab.\n\n"
        f"{_size_line(size_bytes)}"
    )


def pdf_footer(title: str, size_bytes: int) -> str:
    return f"\n\n--- PDF Document: {title} ---\n{_size_line(size_bytes)}\n"


def binary(extension: str, title: str, size_bytes: int) -> str:
    label = extension.upper() or "Unknown"
    return (
        f"{label} File: {title}\n\n"
        f"This document was uploaded in {label} format.\n\n"
        "This file type cannot be displayed as text in the document viewer.\n\n"
        "You can download the original file by clicking the \"Native View\" tab above.\n\n"
        f"{_size_line(size_bytes)}"
    )


def unavailable(title: str) -> str:
    return (
        f"The content for \"{title}\" could not be extracted. Please use the Native View "
        "tab to download and view the original file."
    )
