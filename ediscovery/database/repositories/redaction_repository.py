from typing import Any

from psycopg.rows import dict_row

from ediscovery.database.connection import get_connection
from ediscovery.database.exceptions import DocumentNotFoundError
from ediscovery.database.repositories.base import BaseRedactionRepository
from ediscovery.redaction.exceptions import RedactionNotFoundError
from ediscovery.redaction.models import (
    BoxRegion,
    Redaction,
    RedactionMode,
    RedactionRegion,
    TextSpanRegion,
)

_COLUMNS = "id, document_id, mode, text, reason, x, y, width, height, page_number, created_at"


class RedactionRepository(BaseRedactionRepository):
    """Database operations for the redactions table."""

    def add(self, document_id: int, region: RedactionRegion) -> Redaction:
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                # Row lock serializes writers per document for the flag flip.
                cur.execute(
                    "SELECT id FROM documents WHERE id = %s FOR UPDATE",
                    (document_id,),
                )
                if cur.fetchone() is None:
                    raise DocumentNotFoundError(f"Document {document_id} not found")

                cur.execute(
                    f"""
                    INSERT INTO redactions
                    (document_id, mode, text, reason, x, y, width, height, page_number)
                    VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s)
                    RETURNING {_COLUMNS}
                    """,
                    (document_id, *_region_to_columns(region)),
                )
                row = cur.fetchone()

                cur.execute(
                    "UPDATE documents SET is_redacted = TRUE WHERE id = %s",
                    (document_id,),
                )
            conn.commit()

        if row is None:
            raise RuntimeError("INSERT INTO redactions returned no row")
        return _row_to_redaction(row)

    def list_for_document(self, document_id: int) -> list[Redaction]:
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    f"SELECT {_COLUMNS} FROM redactions WHERE document_id = %s ORDER BY id",
                    (document_id,),
                )
                rows = cur.fetchall()
        return [_row_to_redaction(row) for row in rows]

    def delete(self, redaction_id: int) -> None:
        with get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute("DELETE FROM redactions WHERE id = %s", (redaction_id,))
                if cur.rowcount == 0:
                    raise RedactionNotFoundError(f"Redaction {redaction_id} not found")
            conn.commit()


def _region_to_columns(region: RedactionRegion) -> tuple[Any, ...]:
    """Return (mode, text, reason, x, y, width, height, page_number)."""
    if isinstance(region, TextSpanRegion):
        return (region.mode.value, region.text, region.reason, None, None, None, None, None)
    return (
        region.mode.value,
        None,
        region.reason,
        region.x,
        region.y,
        region.width,
        region.height,
        region.page_number,
    )


def _row_to_redaction(row: dict[str, Any]) -> Redaction:
    region: RedactionRegion
    if row["mode"] == RedactionMode.TEXT.value:
        region = TextSpanRegion(text=row["text"], reason=row["reason"])
    else:
        region = BoxRegion(
            page_number=row["page_number"],
            x=row["x"],
            y=row["y"],
            width=row["width"],
            height=row["height"],
            reason=row["reason"],
        )
    return Redaction(
        id=row["id"],
        document_id=row["document_id"],
        region=region,
        created_at=row["created_at"],
    )
