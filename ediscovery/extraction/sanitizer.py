import re

_NUL_RE = re.compile("\x00")
_SURROGATE_RE = re.compile("[\ud800-\udfff]")
# Printable ASCII, LF, CR, Latin-1 Supplement, Latin Extended-A and -B.
# Everything else, tabs and non-Latin scripts included, becomes a space.
_DISALLOWED_RE = re.compile("[^\x20-\x7e\n\r\u00a0-\u024f]")


def sanitize_text(text: str) -> str:
    """Strip NUL bytes and lone surrogates, then blank out disallowed characters."""
    text = _NUL_RE.sub("", text)
    text = _SURROGATE_RE.sub("", text)
    return _DISALLOWED_RE.sub(" ", text)
