from typing import Any

import psycopg
from psycopg.errors import ForeignKeyViolation
from psycopg.rows import dict_row
from psycopg.types.json import Jsonb

from ediscovery.database.connection import get_connection
from ediscovery.database.exceptions import (
    DocumentEncodingError,
    DocumentInUseError,
    DocumentNotFoundError,
)
from ediscovery.database.models import Document, NewDocument
from ediscovery.database.repositories.base import BaseDocumentRepository

_COLUMNS = """
    id, title, content, file_path, file_type, file_size, custodian,
    metadata, ai_summary, is_reviewed, is_redacted, uploaded_at
"""

_ENCODING_MARKERS = ("invalid byte sequence", "NUL (0x00)", "character with byte sequence")


class DocumentRepository(BaseDocumentRepository):
    """Database operations for the documents table."""

    def create(self, document: NewDocument) -> Document:
        try:
            with get_connection() as conn:
                with conn.cursor(row_factory=dict_row) as cur:
                    cur.execute(
                        f"""
                        INSERT INTO documents
                        (title, content, file_path, file_type, file_size,
                         custodian, metadata, ai_summary)
                        VALUES (%s, %s, %s, %s, %s, %s, %s, %s)
                        RETURNING {_COLUMNS}
                        """,
                        (
                            document.title,
                            document.content,
                            document.file_path,
                            document.file_type,
                            document.file_size,
                            document.custodian,
                            Jsonb(document.metadata),
                            document.ai_summary,
                        ),
                    )
                    row = cur.fetchone()
                conn.commit()
        except psycopg.DataError as exc:
            if any(marker in str(exc) for marker in _ENCODING_MARKERS):
                raise DocumentEncodingError(str(exc)) from exc
            raise

        if row is None:
            raise RuntimeError("INSERT INTO documents returned no row")
        return _row_to_document(row)

    def find_by_id(self, document_id: int) -> Document:
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    f"SELECT {_COLUMNS} FROM documents WHERE id = %s",
                    (document_id,),
                )
                row = cur.fetchone()

        if row is None:
            raise DocumentNotFoundError(f"Document {document_id} not found")
        return _row_to_document(row)

    def find_many(self, document_ids: list[int]) -> list[Document]:
        if not document_ids:
            return []
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    f"SELECT {_COLUMNS} FROM documents WHERE id = ANY(%s)",
                    (list(document_ids),),
                )
                rows = cur.fetchall()

        by_id = {row["id"]: _row_to_document(row) for row in rows}
        documents: list[Document] = []
        for document_id in document_ids:
            document = by_id.get(document_id)
            if document is None:
                raise DocumentNotFoundError(f"Document {document_id} not found")
            documents.append(document)
        return documents

    def update_content(self, document_id: int, content: str) -> None:
        self._update(document_id, "content = %s", (content,))

    def mark_reviewed(self, document_id: int, reviewed: bool = True) -> None:
        self._update(document_id, "is_reviewed = %s", (reviewed,))

    def delete(self, document_id: int) -> None:
        with get_connection() as conn:
            with conn.cursor() as cur:
                try:
                    cur.execute("DELETE FROM documents WHERE id = %s", (document_id,))
                except ForeignKeyViolation as exc:
                    raise DocumentInUseError(
                        f"Document {document_id} is part of a production set"
                    ) from exc
                if cur.rowcount == 0:
                    raise DocumentNotFoundError(f"Document {document_id} not found")
            conn.commit()

    def _update(self, document_id: int, assignment: str, params: tuple[Any, ...]) -> None:
        with get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    f"UPDATE documents SET {assignment} WHERE id = %s",
                    (*params, document_id),
                )
                if cur.rowcount == 0:
                    raise DocumentNotFoundError(f"Document {document_id} not found")
            conn.commit()


def _row_to_document(row: dict[str, Any]) -> Document:
    return Document(
        id=row["id"],
        title=row["title"],
        content=row["content"],
        file_path=row["file_path"],
        file_type=row["file_type"],
        file_size=row["file_size"],
        custodian=row["custodian"],
        metadata=row["metadata"] or {},
        ai_summary=row["ai_summary"],
        is_reviewed=bool(row["is_reviewed"]),
        is_redacted=bool(row["is_redacted"]),
        uploaded_at=row["uploaded_at"],
    )
