import os
from collections.abc import Callable, Generator
from typing import Any

import psycopg
import pytest

from ediscovery.config.settings import Settings
from ediscovery.database.connection import (
    apply_schema,
    build_conninfo,
    close_pool,
    get_connection,
    init_pool,
)
from ediscovery.database.models import Document, NewDocument
from ediscovery.database.repositories.document_repository import DocumentRepository


def _test_settings() -> Settings:
    os.environ.setdefault("DB_DATABASE", "ediscovery_test")
    return Settings()


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    return _test_settings()


@pytest.fixture(scope="session")
def integration_pool(test_settings: Settings) -> Generator[None, None, None]:
    try:
        psycopg.connect(build_conninfo(test_settings), connect_timeout=2).close()
    except psycopg.OperationalError as e:
        pytest.skip(f"PostgreSQL test DB not available: {e}. Set DB_* env to run.")
    init_pool(test_settings)
    try:
        apply_schema()
        yield
    finally:
        close_pool()


@pytest.fixture
def db_conn(integration_pool: None) -> Generator[psycopg.Connection[Any], None, None]:
    with get_connection() as conn:
        yield conn


@pytest.fixture
def integration_cleanup(
    integration_pool: None,
) -> Generator[list[tuple[str, int]], None, None]:
    cleanup: list[tuple[str, int]] = []
    yield cleanup
    if not cleanup:
        return
    with get_connection() as conn:
        with conn.cursor() as cur:
            # Production links reference documents, so sets go first.
            for table in ("production_sets", "documents"):
                for cleanup_table, row_id in cleanup:
                    if cleanup_table == table:
                        cur.execute(f"DELETE FROM {table} WHERE id = %s", (row_id,))
        conn.commit()


@pytest.fixture
def seed_document(
    integration_cleanup: list[tuple[str, int]],
    new_document: Callable[..., NewDocument],
) -> Callable[..., Document]:
    """Insert a document through the repository and register it for cleanup."""

    def _seed(**overrides: Any) -> Document:
        document = DocumentRepository().create(new_document(**overrides))
        integration_cleanup.append(("documents", document.id))
        return document

    return _seed
