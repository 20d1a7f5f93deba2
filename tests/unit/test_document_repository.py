from datetime import datetime
from unittest.mock import MagicMock, patch

import psycopg
import pytest
from psycopg.errors import ForeignKeyViolation
from psycopg.types.json import Jsonb

from ediscovery.database.exceptions import (
    ENCODING_ERROR_MESSAGE,
    DocumentEncodingError,
    DocumentInUseError,
    DocumentNotFoundError,
)
from ediscovery.database.models import Document, NewDocument
from ediscovery.database.repositories.document_repository import DocumentRepository

_PATCH_TARGET = "ediscovery.database.repositories.document_repository.get_connection"


def _make_row(document_id: int = 1, **overrides: object) -> dict:
    row = {
        "id": document_id,
        "title": "contract.pdf",
        "content": "Body",
        "file_path": "/uploads/abc.pdf",
        "file_type": "pdf",
        "file_size": 2048,
        "custodian": None,
        "metadata": None,
        "ai_summary": "summary",
        "is_reviewed": False,
        "is_redacted": True,
        "uploaded_at": datetime(2024, 1, 2, 3, 4, 5),
    }
    row.update(overrides)
    return row


def _new_document() -> NewDocument:
    return NewDocument(
        title="contract.pdf",
        content="Body",
        file_path="/uploads/abc.pdf",
        file_type="pdf",
        file_size=2048,
        metadata={"batch": 3},
    )


def _mock_connection(mock_get_conn: MagicMock) -> tuple[MagicMock, MagicMock]:
    """Wire up a mock connection + cursor and return (mock_conn, mock_cursor)."""
    mock_cursor = MagicMock()
    mock_conn = MagicMock()
    mock_conn.cursor.return_value.__enter__ = MagicMock(return_value=mock_cursor)
    mock_conn.cursor.return_value.__exit__ = MagicMock(return_value=False)
    mock_get_conn.return_value.__enter__ = MagicMock(return_value=mock_conn)
    mock_get_conn.return_value.__exit__ = MagicMock(return_value=False)
    return mock_conn, mock_cursor


class TestCreate:
    @patch(_PATCH_TARGET)
    def test_inserts_and_returns_document(self, mock_get_conn: MagicMock) -> None:
        mock_conn, mock_cursor = _mock_connection(mock_get_conn)
        mock_cursor.fetchone.return_value = _make_row(5, is_redacted=False)

        document = DocumentRepository().create(_new_document())

        assert isinstance(document, Document)
        assert document.id == 5
        assert document.metadata == {}
        params = mock_cursor.execute.call_args[0][1]
        assert isinstance(params[6], Jsonb)
        mock_conn.commit.assert_called_once()

    @patch(_PATCH_TARGET)
    def test_encoding_rejection_raises_user_facing_error(self, mock_get_conn: MagicMock) -> None:
        _conn, mock_cursor = _mock_connection(mock_get_conn)
        mock_cursor.execute.side_effect = psycopg.DataError(
            'invalid byte sequence for encoding "UTF8": 0x00'
        )

        with pytest.raises(DocumentEncodingError) as excinfo:
            DocumentRepository().create(_new_document())
        assert str(excinfo.value) == ENCODING_ERROR_MESSAGE
        assert "0x00" in excinfo.value.detail

    @patch(_PATCH_TARGET)
    def test_other_data_errors_propagate(self, mock_get_conn: MagicMock) -> None:
        _conn, mock_cursor = _mock_connection(mock_get_conn)
        mock_cursor.execute.side_effect = psycopg.DataError("value too long")

        with pytest.raises(psycopg.DataError):
            DocumentRepository().create(_new_document())


class TestFind:
    @patch(_PATCH_TARGET)
    def test_find_by_id(self, mock_get_conn: MagicMock) -> None:
        _conn, mock_cursor = _mock_connection(mock_get_conn)
        mock_cursor.fetchone.return_value = _make_row(1, metadata={"k": "v"})

        document = DocumentRepository().find_by_id(1)

        assert document.metadata == {"k": "v"}
        assert document.is_redacted is True

    @patch(_PATCH_TARGET)
    def test_find_by_id_missing(self, mock_get_conn: MagicMock) -> None:
        _conn, mock_cursor = _mock_connection(mock_get_conn)
        mock_cursor.fetchone.return_value = None

        with pytest.raises(DocumentNotFoundError, match="Document 999 not found"):
            DocumentRepository().find_by_id(999)

    @patch(_PATCH_TARGET)
    def test_find_many_keeps_requested_order(self, mock_get_conn: MagicMock) -> None:
        _conn, mock_cursor = _mock_connection(mock_get_conn)
        mock_cursor.fetchall.return_value = [_make_row(1), _make_row(2), _make_row(3)]

        documents = DocumentRepository().find_many([3, 1, 2])

        assert [d.id for d in documents] == [3, 1, 2]

    @patch(_PATCH_TARGET)
    def test_find_many_names_missing_id(self, mock_get_conn: MagicMock) -> None:
        _conn, mock_cursor = _mock_connection(mock_get_conn)
        mock_cursor.fetchall.return_value = [_make_row(1)]

        with pytest.raises(DocumentNotFoundError, match="Document 8 not found"):
            DocumentRepository().find_many([1, 8])

    @patch(_PATCH_TARGET)
    def test_find_many_empty_skips_query(self, mock_get_conn: MagicMock) -> None:
        assert DocumentRepository().find_many([]) == []
        mock_get_conn.assert_not_called()


class TestUpdates:
    @patch(_PATCH_TARGET)
    def test_mark_reviewed(self, mock_get_conn: MagicMock) -> None:
        mock_conn, mock_cursor = _mock_connection(mock_get_conn)
        mock_cursor.rowcount = 1

        DocumentRepository().mark_reviewed(4)

        sql, params = mock_cursor.execute.call_args[0]
        assert "is_reviewed = %s" in sql
        assert params == (True, 4)
        mock_conn.commit.assert_called_once()

    @patch(_PATCH_TARGET)
    def test_update_missing_document(self, mock_get_conn: MagicMock) -> None:
        _conn, mock_cursor = _mock_connection(mock_get_conn)
        mock_cursor.rowcount = 0

        with pytest.raises(DocumentNotFoundError):
            DocumentRepository().update_content(4, "new text")

    @patch(_PATCH_TARGET)
    def test_delete_missing_document(self, mock_get_conn: MagicMock) -> None:
        _conn, mock_cursor = _mock_connection(mock_get_conn)
        mock_cursor.rowcount = 0

        with pytest.raises(DocumentNotFoundError):
            DocumentRepository().delete(4)

    @patch(_PATCH_TARGET)
    def test_delete_produced_document(self, mock_get_conn: MagicMock) -> None:
        mock_conn, mock_cursor = _mock_connection(mock_get_conn)
        mock_cursor.execute.side_effect = ForeignKeyViolation(
            'update or delete on table "documents" violates foreign key constraint'
        )

        with pytest.raises(DocumentInUseError, match="Document 4 is part of a production set"):
            DocumentRepository().delete(4)
        mock_conn.commit.assert_not_called()
