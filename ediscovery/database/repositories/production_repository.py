from typing import Any

from psycopg.rows import dict_row

from ediscovery.database.connection import get_connection
from ediscovery.database.repositories.base import AssignmentPlanner, BaseProductionRepository
from ediscovery.production.exceptions import ProductionSetNotFoundError
from ediscovery.production.models import (
    ArtifactFormat,
    IncludeFlags,
    LoadFileFormat,
    ProductionDocumentLink,
    ProductionSet,
    ProductionSetConfig,
)

_SET_COLUMNS = """
    id, name, prefix, start_number, format, include_text, include_images,
    include_metadata, include_native, load_file_format, created_at
"""


class ProductionRepository(BaseProductionRepository):
    """Database operations for the production_sets and production_documents tables."""

    def save_production(
        self,
        config: ProductionSetConfig,
        planner: AssignmentPlanner,
    ) -> tuple[ProductionSet, list[ProductionDocumentLink]]:
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                # Held until commit; serializes assemblies sharing a prefix.
                cur.execute("SELECT pg_advisory_xact_lock(hashtext(%s))", (config.prefix,))
                cur.execute(
                    """
                    SELECT MAX(bates_sequence) AS highest
                    FROM production_documents
                    WHERE bates_prefix = %s
                    """,
                    (config.prefix,),
                )
                row = cur.fetchone()
                highest = row["highest"] if row is not None else None
                assignments = planner(highest)

                cur.execute(
                    f"""
                    INSERT INTO production_sets
                    (name, prefix, start_number, format, include_text, include_images,
                     include_metadata, include_native, load_file_format)
                    VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s)
                    RETURNING {_SET_COLUMNS}
                    """,
                    (
                        config.name,
                        config.prefix,
                        config.start_number,
                        config.format.value,
                        config.include.text,
                        config.include.images,
                        config.include.metadata,
                        config.include.native,
                        config.load_file_format.value,
                    ),
                )
                set_row = cur.fetchone()
                if set_row is None:
                    raise RuntimeError("INSERT INTO production_sets returned no row")
                production_set = _row_to_production_set(set_row)

                if assignments:
                    cur.executemany(
                        """
                        INSERT INTO production_documents
                        (production_set_id, document_id, bates_prefix,
                         bates_sequence, bates_number)
                        VALUES (%s, %s, %s, %s, %s)
                        """,
                        [
                            (
                                production_set.id,
                                a.document_id,
                                config.prefix,
                                a.sequence,
                                a.bates_number,
                            )
                            for a in assignments
                        ],
                    )
            conn.commit()

        links = [
            ProductionDocumentLink(
                production_set_id=production_set.id,
                document_id=a.document_id,
                bates_number=a.bates_number,
            )
            for a in assignments
        ]
        return production_set, links

    def find_by_id(self, production_set_id: int) -> ProductionSet:
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    f"SELECT {_SET_COLUMNS} FROM production_sets WHERE id = %s",
                    (production_set_id,),
                )
                row = cur.fetchone()

        if row is None:
            raise ProductionSetNotFoundError(
                f"Production set {production_set_id} not found"
            )
        return _row_to_production_set(row)

    def list_links(self, production_set_id: int) -> list[ProductionDocumentLink]:
        with get_connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                cur.execute(
                    """
                    SELECT production_set_id, document_id, bates_number
                    FROM production_documents
                    WHERE production_set_id = %s
                    ORDER BY bates_sequence
                    """,
                    (production_set_id,),
                )
                rows = cur.fetchall()
        return [
            ProductionDocumentLink(
                production_set_id=row["production_set_id"],
                document_id=row["document_id"],
                bates_number=row["bates_number"],
            )
            for row in rows
        ]


def _row_to_production_set(row: dict[str, Any]) -> ProductionSet:
    config = ProductionSetConfig(
        name=row["name"],
        prefix=row["prefix"],
        start_number=row["start_number"],
        format=ArtifactFormat(row["format"]),
        include=IncludeFlags(
            text=bool(row["include_text"]),
            images=bool(row["include_images"]),
            metadata=bool(row["include_metadata"]),
            native=bool(row["include_native"]),
        ),
        load_file_format=LoadFileFormat(row["load_file_format"]),
    )
    return ProductionSet(id=row["id"], config=config, created_at=row["created_at"])
