"""Load-file writers describing a production to review platforms.

Every writer emits one line per document, in production order, and returns
UTF-8 bytes with ``\\n`` line endings. Line breaks inside field values are
flattened to spaces so each document stays on one line.
"""

import csv
import io
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar

from ediscovery.database.models import Document
from ediscovery.production.models import LoadFileFormat, ProductionDocumentLink


@dataclass(frozen=True)
class LoadFileRow:
    document_id: int
    bates_number: str
    title: str
    custodian: str
    file_type: str
    file_path: str


def build_rows(
    documents: list[Document],
    links: list[ProductionDocumentLink],
) -> list[LoadFileRow]:
    """Pair documents with their links by position; both lists share one order."""
    return [
        LoadFileRow(
            document_id=document.id,
            bates_number=link.bates_number,
            title=_flatten(document.title),
            custodian=_flatten(document.custodian or ""),
            file_type=_flatten(document.file_type),
            file_path=_flatten(document.file_path),
        )
        for document, link in zip(documents, links, strict=True)
    ]


def _flatten(value: str) -> str:
    return " ".join(value.splitlines()) if value else value


class LoadFileWriter(ABC):
    @abstractmethod
    def render(self, rows: list[LoadFileRow]) -> bytes: ...


class ConcordanceWriter(LoadFileWriter):
    """Concordance DAT: every field wrapped in the thorn quote character."""

    QUOTE: ClassVar[str] = "þ"
    HEADER: ClassVar[tuple[str, ...]] = ("DOCID", "BATES", "TITLE", "CUSTODIAN", "FILETYPE")

    def render(self, rows: list[LoadFileRow]) -> bytes:
        lines = [self._line(self.HEADER)]
        for row in rows:
            lines.append(
                self._line(
                    (str(row.document_id), row.bates_number, row.title, row.custodian, row.file_type)
                )
            )
        return "".join(lines).encode("utf-8")

    def _line(self, fields: tuple[str, ...]) -> str:
        # The quote character has no escape form, so it is dropped from values.
        return "".join(
            f"{self.QUOTE}{value.replace(self.QUOTE, '')}{self.QUOTE}" for value in fields
        ) + "\n"


class OpticonWriter(LoadFileWriter):
    """Opticon OPT image cross-reference; no header row."""

    def render(self, rows: list[LoadFileRow]) -> bytes:
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        for row in rows:
            writer.writerow([row.bates_number, row.file_path, "Y", "", "", "", "", ""])
        return buffer.getvalue().encode("utf-8")


class CsvWriter(LoadFileWriter):
    HEADER: ClassVar[tuple[str, ...]] = ("ID", "BATES", "TITLE", "CUSTODIAN", "FILETYPE")

    def render(self, rows: list[LoadFileRow]) -> bytes:
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        writer.writerow(self.HEADER)
        for row in rows:
            writer.writerow(
                [row.document_id, row.bates_number, row.title, row.custodian, row.file_type]
            )
        return buffer.getvalue().encode("utf-8")


class LoadFileWriterFactory:
    """Picks the writer for a load-file format; DII and XML use the CSV layout."""

    WRITERS: ClassVar[dict[LoadFileFormat, type[LoadFileWriter]]] = {
        LoadFileFormat.DAT: ConcordanceWriter,
        LoadFileFormat.OPT: OpticonWriter,
        LoadFileFormat.CSV: CsvWriter,
        LoadFileFormat.DII: CsvWriter,
        LoadFileFormat.XML: CsvWriter,
    }

    @classmethod
    def create(cls, load_file_format: LoadFileFormat) -> LoadFileWriter:
        return cls.WRITERS[load_file_format]()


def render_load_file(
    load_file_format: LoadFileFormat,
    documents: list[Document],
    links: list[ProductionDocumentLink],
) -> bytes:
    return LoadFileWriterFactory.create(load_file_format).render(build_rows(documents, links))
