from abc import ABC, abstractmethod
from collections.abc import Callable

from ediscovery.database.models import Document, NewDocument
from ediscovery.production.models import (
    BatesAssignment,
    ProductionDocumentLink,
    ProductionSet,
    ProductionSetConfig,
)
from ediscovery.redaction.models import Redaction, RedactionRegion

# Receives the highest bates sequence already issued under the config prefix
# (None when the prefix is unused) and returns the assignments to persist.
AssignmentPlanner = Callable[[int | None], list[BatesAssignment]]


class BaseDocumentRepository(ABC):
    """Contract for the document store collaborator."""

    @abstractmethod
    def create(self, document: NewDocument) -> Document:
        """Insert a document and return it with its id and upload timestamp.

        Raises:
            DocumentEncodingError: if the store rejects the text encoding.
        """

    @abstractmethod
    def find_by_id(self, document_id: int) -> Document:
        """Raises DocumentNotFoundError if no document with this id exists."""

    @abstractmethod
    def find_many(self, document_ids: list[int]) -> list[Document]:
        """Return documents in the order of *document_ids*.

        Raises:
            DocumentNotFoundError: naming the first missing id.
        """

    @abstractmethod
    def update_content(self, document_id: int, content: str) -> None:
        """Replace the extracted text of a document."""

    @abstractmethod
    def mark_reviewed(self, document_id: int, reviewed: bool = True) -> None:
        """Set the reviewed flag of a document."""

    @abstractmethod
    def delete(self, document_id: int) -> None:
        """Delete a document and its redactions.

        Raises:
            DocumentInUseError: if the document belongs to a production set.
        """


class BaseRedactionRepository(ABC):
    """Contract for persisting redaction regions."""

    @abstractmethod
    def add(self, document_id: int, region: RedactionRegion) -> Redaction:
        """Insert a redaction and set the owning document's redacted flag.

        Both writes happen atomically.

        Raises:
            DocumentNotFoundError: if the document does not exist.
        """

    @abstractmethod
    def list_for_document(self, document_id: int) -> list[Redaction]:
        """Return the document's redactions in creation order."""

    @abstractmethod
    def delete(self, redaction_id: int) -> None:
        """Raises RedactionNotFoundError if the redaction does not exist."""


class BaseProductionRepository(ABC):
    """Contract for persisting production sets and their bates links."""

    @abstractmethod
    def save_production(
        self,
        config: ProductionSetConfig,
        planner: AssignmentPlanner,
    ) -> tuple[ProductionSet, list[ProductionDocumentLink]]:
        """Persist a production set and the links produced by *planner*.

        The planner runs while the bates prefix is locked, so concurrent
        assemblies under the same prefix never receive overlapping numbers.
        """

    @abstractmethod
    def find_by_id(self, production_set_id: int) -> ProductionSet:
        """Raises ProductionSetNotFoundError if the set does not exist."""

    @abstractmethod
    def list_links(self, production_set_id: int) -> list[ProductionDocumentLink]:
        """Return the set's links in bates order."""
