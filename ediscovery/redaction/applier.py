from collections.abc import Callable, Iterable

from ediscovery.redaction.models import BoxRegion, RedactionRegion, TextSpanRegion

MASK_CHAR = "█"

Mask = Callable[[TextSpanRegion], str]


def block_mask(region: TextSpanRegion) -> str:
    """Solid block characters of the same length as the redacted text."""
    return MASK_CHAR * len(region.text)


def marker_mask(region: TextSpanRegion) -> str:
    """A bracketed marker naming the redaction reason."""
    return f"[REDACTED: {region.reason}]" if region.reason else "[REDACTED]"


def apply_redactions(
    text: str,
    regions: Iterable[RedactionRegion],
    mask: Mask = block_mask,
) -> str:
    """Return *text* with each text-span region masked, in order.

    Only the first literal occurrence of a span is replaced, so a phrase that
    appears twice needs two regions. Box regions leave the text unchanged.
    """
    for region in regions:
        if isinstance(region, TextSpanRegion):
            text = text.replace(region.text, mask(region), 1)
    return text


def box_overlays(regions: Iterable[RedactionRegion]) -> dict[int, list[BoxRegion]]:
    """Group box regions by page number for a renderer to paint over."""
    pages: dict[int, list[BoxRegion]] = {}
    for region in regions:
        if isinstance(region, BoxRegion):
            pages.setdefault(region.page_number, []).append(region)
    return dict(sorted(pages.items()))
