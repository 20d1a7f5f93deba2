from collections.abc import Callable

import pytest

from ediscovery.database.exceptions import DocumentNotFoundError
from ediscovery.database.models import Document
from ediscovery.database.repositories.document_repository import DocumentRepository
from ediscovery.database.repositories.redaction_repository import RedactionRepository
from ediscovery.redaction.exceptions import RedactionNotFoundError
from ediscovery.redaction.models import BoxRegion, TextSpanRegion

SeedDocument = Callable[..., Document]


@pytest.mark.integration
class TestRedactionRepository:
    def test_add_sets_flag_which_survives_delete(self, seed_document: SeedDocument) -> None:
        document = seed_document()
        repo = RedactionRepository()

        redaction = repo.add(document.id, TextSpanRegion(text="Acme Corp", reason="Party"))
        assert DocumentRepository().find_by_id(document.id).is_redacted is True

        repo.delete(redaction.id)
        assert DocumentRepository().find_by_id(document.id).is_redacted is True

    def test_lists_both_region_kinds_in_creation_order(
        self, seed_document: SeedDocument
    ) -> None:
        document = seed_document()
        repo = RedactionRepository()
        box = BoxRegion(page_number=2, x=10, y=20, width=100, height=15)
        repo.add(document.id, TextSpanRegion(text="Acme"))
        repo.add(document.id, box)

        regions = [r.region for r in repo.list_for_document(document.id)]

        assert regions == [TextSpanRegion(text="Acme"), box]

    def test_add_for_missing_document(self, integration_pool: None) -> None:
        with pytest.raises(DocumentNotFoundError):
            RedactionRepository().add(999999, TextSpanRegion(text="Acme"))

    def test_delete_missing(self, integration_pool: None) -> None:
        with pytest.raises(RedactionNotFoundError):
            RedactionRepository().delete(999999)
