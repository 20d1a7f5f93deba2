"""Best-effort PDF text recovery by scanning raw bytes.

This is NOT a PDF parser. It never builds the object model, never inflates
compressed streams and never decodes font encodings. It looks for the literal
string operands that uncompressed content streams carry in plain sight:

1. Parenthesized runs ``(...)`` anywhere in the first ``scan_bytes`` bytes,
   minus runs that look like document structure or metadata.
2. When that yields too little, the string operands of ``[...] TJ``
   show-text arrays. Arrays that are present but carry too little text raise
   ``SparsePdfTextError``.

Compressed, encrypted or image-only PDFs (the majority produced by modern
tools) therefore yield an empty string, and callers must fall back to a
placeholder that sends the reviewer to the native file. Output order follows
byte order, not reading order. Use the ``pdfplumber`` or ``pymupdf`` engines
when fidelity matters.
"""

import re
from typing import ClassVar

from ediscovery.pdf.base import BasePdfExtractor
from ediscovery.pdf.exceptions import SparsePdfTextError


class HeuristicPdfAdapter(BasePdfExtractor):
    """Two-stage byte-stream scan for literal text operands."""

    DEFAULT_SCAN_BYTES: ClassVar[int] = 30000
    MIN_TEXT_LENGTH: ClassVar[int] = 100
    MIN_PAREN_RUNS: ClassVar[int] = 5

    _PAREN_RE: ClassVar[re.Pattern[str]] = re.compile(r"\(([^)]{3,})\)")
    _TJ_ARRAY_RE: ClassVar[re.Pattern[str]] = re.compile(r"\[([^\[\]]*)\]\s*TJ")
    _TJ_STRING_RE: ClassVar[re.Pattern[str]] = re.compile(r"\(([^)]+)\)")
    _NUMERIC_RE: ClassVar[re.Pattern[str]] = re.compile(r"^[0-9.\s]+$")
    _WHITESPACE_RE: ClassVar[re.Pattern[str]] = re.compile(r"\s+")

    _STRUCTURAL_TOKENS: ClassVar[tuple[str, ...]] = ("PDF", "obj", "stream", "Acrobat", "Adobe")

    def __init__(self, scan_bytes: int = DEFAULT_SCAN_BYTES) -> None:
        self._scan_bytes = scan_bytes

    def extract(self, pdf_bytes: bytes) -> str:
        raw = pdf_bytes[: self._scan_bytes].decode("utf-8", errors="replace")
        return self._scan_parenthesized(raw) or self._scan_show_text(raw)

    def _scan_parenthesized(self, raw: str) -> str:
        runs = self._PAREN_RE.findall(raw)
        if len(runs) <= self.MIN_PAREN_RUNS:
            return ""

        joined = " ".join(run for run in runs if self._looks_like_content(run))
        if len(joined) <= self.MIN_TEXT_LENGTH:
            return ""

        return self._WHITESPACE_RE.sub(" ", joined).strip()

    def _scan_show_text(self, raw: str) -> str:
        arrays = self._TJ_ARRAY_RE.findall(raw)
        fragments: list[str] = []
        for array in arrays:
            strings = self._TJ_STRING_RE.findall(array)
            if strings:
                fragments.append(" ".join(strings))

        text = " ".join(fragments)
        if len(text) <= self.MIN_TEXT_LENGTH:
            if arrays:
                raise SparsePdfTextError(
                    f"Show-text operators yielded only {len(text)} chars"
                )
            return ""
        return self._WHITESPACE_RE.sub(" ", text).strip()

    def _looks_like_content(self, run: str) -> bool:
        if len(run) <= 3:
            return False
        if any(token in run for token in self._STRUCTURAL_TOKENS):
            return False
        return not self._NUMERIC_RE.match(run)
