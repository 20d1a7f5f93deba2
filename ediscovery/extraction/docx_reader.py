import io

import docx

from ediscovery.extraction.exceptions import ExtractionError


class DocxReader:
    """Reads the plain text of an OOXML word-processing document."""

    def read(self, data: bytes) -> str:
        """Return body paragraphs followed by table cell text, one block per line.

        Raises:
            ExtractionError: if python-docx cannot open the package.
        """
        try:
            document = docx.Document(io.BytesIO(data))
        except Exception as exc:
            raise ExtractionError(f"python-docx could not open document: {exc}") from exc

        blocks = [p.text for p in document.paragraphs if p.text.strip()]
        for table in document.tables:
            for row in table.rows:
                cells = [cell.text.strip() for cell in row.cells if cell.text.strip()]
                if cells:
                    blocks.append(" | ".join(cells))
        return "\n".join(blocks)
