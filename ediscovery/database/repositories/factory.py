from dataclasses import dataclass

from ediscovery.config.settings import Settings
from ediscovery.database.repositories.base import (
    BaseDocumentRepository,
    BaseProductionRepository,
    BaseRedactionRepository,
)
from ediscovery.database.repositories.document_repository import DocumentRepository
from ediscovery.database.repositories.memory import (
    InMemoryDocumentRepository,
    InMemoryProductionRepository,
    InMemoryRedactionRepository,
    InMemoryStore,
)
from ediscovery.database.repositories.production_repository import ProductionRepository
from ediscovery.database.repositories.redaction_repository import RedactionRepository


@dataclass(frozen=True)
class Repositories:
    documents: BaseDocumentRepository
    redactions: BaseRedactionRepository
    productions: BaseProductionRepository


class RepositoryFactory:
    """Creates the repositories for the configured storage backend."""

    BACKENDS = ("postgres", "memory")

    @classmethod
    def create(cls, settings: Settings) -> Repositories:
        backend = settings.storage_backend.lower()
        if backend == "postgres":
            return Repositories(
                documents=DocumentRepository(),
                redactions=RedactionRepository(),
                productions=ProductionRepository(),
            )
        if backend == "memory":
            store = InMemoryStore()
            return Repositories(
                documents=InMemoryDocumentRepository(store),
                redactions=InMemoryRedactionRepository(store),
                productions=InMemoryProductionRepository(store),
            )
        raise ValueError(
            f"Unknown storage backend '{backend}'. Choose from: {list(cls.BACKENDS)}"
        )
