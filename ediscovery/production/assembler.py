from typing import Any

from ediscovery.database.models import Document
from ediscovery.database.repositories.base import (
    BaseDocumentRepository,
    BaseProductionRepository,
)
from ediscovery.logging.logger import Log
from ediscovery.production.bates import bates_numbers
from ediscovery.production.exceptions import ProductionValidationError
from ediscovery.production.load_file import render_load_file
from ediscovery.production.models import (
    BatesAssignment,
    ProductionResult,
    ProductionSetConfig,
)
from ediscovery.production.validator import validate_production_request
from ediscovery.redaction.ledger import RedactionLedger
from ediscovery.redaction.models import BoxRegion


class ProductionAssembler:
    """Turns a selection of documents into a bates-numbered production set.

    Numbers are assigned in input order. Each run appends to the numbering
    already issued under its prefix, so re-running a request produces a new
    set with a disjoint, higher range instead of reusing numbers.
    """

    def __init__(
        self,
        *,
        productions: BaseProductionRepository,
        documents: BaseDocumentRepository,
        ledger: RedactionLedger,
    ) -> None:
        self._productions = productions
        self._documents = documents
        self._ledger = ledger

    def assemble(self, config: ProductionSetConfig, documents: list[Document]) -> ProductionResult:
        document_ids = [document.id for document in documents]
        if len(set(document_ids)) != len(document_ids):
            raise ProductionValidationError("documentIds", "must not contain duplicates")

        production_set, links = self._productions.save_production(
            config,
            lambda highest: self.plan_assignments(config, document_ids, highest),
        )
        Log.info(
            f"Production set {production_set.id} created with {len(links)} documents",
            name=config.name,
            prefix=config.prefix,
        )

        text_files: dict[str, str] = {}
        if config.include.text:
            for document, link in zip(documents, links, strict=True):
                text_files[link.bates_number] = self._ledger.redact(document)

        box_overlays: dict[str, dict[int, list[BoxRegion]]] = {}
        if config.include.images:
            for document, link in zip(documents, links, strict=True):
                overlays = self._ledger.box_overlays(document.id)
                if overlays:
                    box_overlays[link.bates_number] = overlays

        return ProductionResult(
            production_set=production_set,
            links=links,
            load_file=render_load_file(config.load_file_format, documents, links),
            load_file_name=f"{config.name}.{config.load_file_format.value.lower()}",
            text_files=text_files,
            box_overlays=box_overlays,
            redacted_document_ids=[d.id for d in documents if d.is_redacted],
        )

    def assemble_from_payload(self, payload: Any) -> ProductionResult:
        request = validate_production_request(payload)
        documents = self._documents.find_many(request.document_ids)
        return self.assemble(request.config, documents)

    @staticmethod
    def plan_assignments(
        config: ProductionSetConfig,
        document_ids: list[int],
        highest_issued: int | None,
    ) -> list[BatesAssignment]:
        """Number *document_ids* after anything already issued under the prefix."""
        start = config.start_number
        if highest_issued is not None:
            start = max(start, highest_issued + 1)
        numbers = bates_numbers(config.prefix, start, len(document_ids))
        return [
            BatesAssignment(document_id=document_id, sequence=start + offset, bates_number=number)
            for offset, (document_id, number) in enumerate(zip(document_ids, numbers, strict=True))
        ]
