from typing import Any

from ediscovery.database.models import Document
from ediscovery.database.repositories.base import (
    BaseDocumentRepository,
    BaseRedactionRepository,
)
from ediscovery.logging.logger import Log
from ediscovery.redaction.applier import Mask, apply_redactions, block_mask, box_overlays
from ediscovery.redaction.models import BoxRegion, Redaction, RedactionRegion
from ediscovery.redaction.validator import validate_redaction_payload


class RedactionLedger:
    """Records redaction regions against documents.

    Adding a redaction marks its document as redacted. Removing one never
    clears the mark, even when no redactions remain.
    """

    def __init__(
        self,
        *,
        redactions: BaseRedactionRepository,
        documents: BaseDocumentRepository,
    ) -> None:
        self._redactions = redactions
        self._documents = documents

    def add_redaction(self, document_id: int, region: RedactionRegion) -> int:
        redaction = self._redactions.add(document_id, region)
        Log.info(
            f"Redaction {redaction.id} added",
            document_id=document_id,
            mode=region.mode.value,
        )
        return redaction.id

    def add_from_payload(self, payload: Any) -> int:
        document_id, region = validate_redaction_payload(payload)
        return self.add_redaction(document_id, region)

    def list_redactions(self, document_id: int) -> list[Redaction]:
        # Surfaces DocumentNotFoundError instead of an empty list for unknown ids.
        self._documents.find_by_id(document_id)
        return self._redactions.list_for_document(document_id)

    def remove_redaction(self, redaction_id: int) -> None:
        self._redactions.delete(redaction_id)
        Log.info(f"Redaction {redaction_id} removed")

    def redacted_text(self, document_id: int, mask: Mask = block_mask) -> str:
        """Document content with its text-span redactions applied."""
        return self.redact(self._documents.find_by_id(document_id), mask)

    def redact(self, document: Document, mask: Mask = block_mask) -> str:
        regions = [r.region for r in self._redactions.list_for_document(document.id)]
        return apply_redactions(document.content, regions, mask)

    def box_overlays(self, document_id: int) -> dict[int, list[BoxRegion]]:
        """Box regions of a document grouped by page, for a page renderer."""
        regions = [r.region for r in self.list_redactions(document_id)]
        return box_overlays(regions)
