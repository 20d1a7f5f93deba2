import io
from collections.abc import Callable

import docx
import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from ediscovery.database.models import NewDocument
from ediscovery.database.repositories.factory import Repositories
from ediscovery.database.repositories.memory import (
    InMemoryDocumentRepository,
    InMemoryProductionRepository,
    InMemoryRedactionRepository,
    InMemoryStore,
)

CONTRACT_LINES = [
    "This Services Agreement is entered into by Acme Corp",
    "and Globex Holdings for consulting work in Springfield.",
    "Payment terms are net thirty days from the invoice date.",
    "Either party may terminate with sixty days written notice.",
    "Confidential information must not be disclosed to others.",
    "Disputes are resolved by arbitration in the state of Ohio.",
    "This agreement is governed by the laws of that state.",
    "Signed by both parties on the date written below.",
]


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Hello discovery world")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Page one content")
    c.showPage()
    c.drawString(72, 720, "Page two content")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Generate a valid PDF with no text content (blank page)."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def uncompressed_pdf_bytes() -> bytes:
    """A PDF whose content stream carries its text operands in plain bytes."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter, pageCompression=0)
    y = 720
    for line in CONTRACT_LINES:
        c.drawString(72, y, line)
        y -= 18
    c.save()
    return buf.getvalue()


@pytest.fixture()
def sample_docx_bytes() -> bytes:
    """A DOCX with two paragraphs and a two-row table."""
    document = docx.Document()
    document.add_paragraph("Memorandum to the board")
    document.add_paragraph("Quarterly results are attached.")
    table = document.add_table(rows=2, cols=2)
    table.cell(0, 0).text = "Region"
    table.cell(0, 1).text = "Revenue"
    table.cell(1, 0).text = "North"
    table.cell(1, 1).text = "1200"
    buf = io.BytesIO()
    document.save(buf)
    return buf.getvalue()


@pytest.fixture()
def memory_repositories() -> Repositories:
    store = InMemoryStore()
    return Repositories(
        documents=InMemoryDocumentRepository(store),
        redactions=InMemoryRedactionRepository(store),
        productions=InMemoryProductionRepository(store),
    )


def make_new_document(
    title: str = "contract.pdf",
    content: str = "Acme Corp agrees to pay Acme Corp affiliates.",
    custodian: str | None = "Jane Roe",
    file_type: str = "pdf",
) -> NewDocument:
    return NewDocument(
        title=title,
        content=content,
        file_path=f"/uploads/{title}",
        file_type=file_type,
        file_size=2048,
        custodian=custodian,
        metadata={"source": "test"},
    )


@pytest.fixture()
def new_document() -> Callable[..., NewDocument]:
    """Factory for NewDocument values with overridable fields."""
    return make_new_document
