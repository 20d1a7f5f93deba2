"""In-process repositories sharing one store.

Used for local runs without PostgreSQL and in tests. A single re-entrant lock
stands in for the database transactions of the PostgreSQL repositories.
"""

import itertools
import threading
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone

from ediscovery.database.exceptions import DocumentInUseError, DocumentNotFoundError
from ediscovery.database.models import Document, NewDocument
from ediscovery.database.repositories.base import (
    AssignmentPlanner,
    BaseDocumentRepository,
    BaseProductionRepository,
    BaseRedactionRepository,
)
from ediscovery.production.exceptions import ProductionSetNotFoundError
from ediscovery.production.models import (
    ProductionDocumentLink,
    ProductionSet,
    ProductionSetConfig,
)
from ediscovery.redaction.exceptions import RedactionNotFoundError
from ediscovery.redaction.models import Redaction, RedactionRegion


def _now() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


@dataclass
class InMemoryStore:
    lock: threading.RLock = field(default_factory=threading.RLock)
    documents: dict[int, Document] = field(default_factory=dict)
    redactions: dict[int, Redaction] = field(default_factory=dict)
    production_sets: dict[int, ProductionSet] = field(default_factory=dict)
    links: list[tuple[str, int, ProductionDocumentLink]] = field(default_factory=list)
    _ids: dict[str, itertools.count] = field(default_factory=dict)

    def next_id(self, table: str) -> int:
        counter = self._ids.setdefault(table, itertools.count(1))
        return next(counter)


class InMemoryDocumentRepository(BaseDocumentRepository):
    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    def create(self, document: NewDocument) -> Document:
        with self._store.lock:
            created = Document(
                id=self._store.next_id("documents"),
                title=document.title,
                content=document.content,
                file_path=document.file_path,
                file_type=document.file_type,
                file_size=document.file_size,
                custodian=document.custodian,
                metadata=dict(document.metadata),
                ai_summary=document.ai_summary,
                uploaded_at=_now(),
            )
            self._store.documents[created.id] = created
            return replace(created)

    def find_by_id(self, document_id: int) -> Document:
        with self._store.lock:
            return replace(self._get(document_id))

    def find_many(self, document_ids: list[int]) -> list[Document]:
        with self._store.lock:
            return [replace(self._get(document_id)) for document_id in document_ids]

    def update_content(self, document_id: int, content: str) -> None:
        with self._store.lock:
            self._get(document_id).content = content

    def mark_reviewed(self, document_id: int, reviewed: bool = True) -> None:
        with self._store.lock:
            self._get(document_id).is_reviewed = reviewed

    def delete(self, document_id: int) -> None:
        with self._store.lock:
            self._get(document_id)
            if any(link.document_id == document_id for _p, _s, link in self._store.links):
                raise DocumentInUseError(f"Document {document_id} is part of a production set")
            del self._store.documents[document_id]
            for redaction_id, redaction in list(self._store.redactions.items()):
                if redaction.document_id == document_id:
                    del self._store.redactions[redaction_id]

    def _get(self, document_id: int) -> Document:
        document = self._store.documents.get(document_id)
        if document is None:
            raise DocumentNotFoundError(f"Document {document_id} not found")
        return document


class InMemoryRedactionRepository(BaseRedactionRepository):
    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    def add(self, document_id: int, region: RedactionRegion) -> Redaction:
        with self._store.lock:
            document = self._store.documents.get(document_id)
            if document is None:
                raise DocumentNotFoundError(f"Document {document_id} not found")
            redaction = Redaction(
                id=self._store.next_id("redactions"),
                document_id=document_id,
                region=region,
                created_at=_now(),
            )
            self._store.redactions[redaction.id] = redaction
            document.is_redacted = True
            return redaction

    def list_for_document(self, document_id: int) -> list[Redaction]:
        with self._store.lock:
            return sorted(
                (r for r in self._store.redactions.values() if r.document_id == document_id),
                key=lambda r: r.id,
            )

    def delete(self, redaction_id: int) -> None:
        with self._store.lock:
            if self._store.redactions.pop(redaction_id, None) is None:
                raise RedactionNotFoundError(f"Redaction {redaction_id} not found")


class InMemoryProductionRepository(BaseProductionRepository):
    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    def save_production(
        self,
        config: ProductionSetConfig,
        planner: AssignmentPlanner,
    ) -> tuple[ProductionSet, list[ProductionDocumentLink]]:
        with self._store.lock:
            sequences = [
                sequence
                for prefix, sequence, _link in self._store.links
                if prefix == config.prefix
            ]
            assignments = planner(max(sequences) if sequences else None)

            production_set = ProductionSet(
                id=self._store.next_id("production_sets"),
                config=config,
                created_at=_now(),
            )
            self._store.production_sets[production_set.id] = production_set

            links: list[ProductionDocumentLink] = []
            for assignment in assignments:
                link = ProductionDocumentLink(
                    production_set_id=production_set.id,
                    document_id=assignment.document_id,
                    bates_number=assignment.bates_number,
                )
                self._store.links.append((config.prefix, assignment.sequence, link))
                links.append(link)
            return production_set, links

    def find_by_id(self, production_set_id: int) -> ProductionSet:
        with self._store.lock:
            production_set = self._store.production_sets.get(production_set_id)
        if production_set is None:
            raise ProductionSetNotFoundError(f"Production set {production_set_id} not found")
        return production_set

    def list_links(self, production_set_id: int) -> list[ProductionDocumentLink]:
        with self._store.lock:
            entries = [
                (sequence, link)
                for _prefix, sequence, link in self._store.links
                if link.production_set_id == production_set_id
            ]
        return [link for _sequence, link in sorted(entries, key=lambda e: e[0])]
