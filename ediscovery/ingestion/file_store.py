import uuid
from pathlib import Path, PurePosixPath

from ediscovery.database.models import Document
from ediscovery.ingestion.content_types import content_type_for
from ediscovery.ingestion.exceptions import StoredFileNotFoundError
from ediscovery.ingestion.models import DownloadedFile
from ediscovery.logging.logger import Log


class FileStore:
    """Keeps original upload bytes on the local filesystem.

    Files are written under ``root`` with a random name; documents reference
    them as ``/uploads/<name>``, and only the final path component is used to
    resolve a reference back to disk.
    """

    PUBLIC_PREFIX = "/uploads"

    def __init__(self, root: Path) -> None:
        self._root = root

    def save(self, data: bytes, original_name: str) -> str:
        """Write *data* and return the document file reference."""
        self._root.mkdir(parents=True, exist_ok=True)
        name = f"{uuid.uuid4().hex}{PurePosixPath(original_name).suffix.lower()}"
        (self._root / name).write_bytes(data)
        Log.info(f"Stored {len(data)} bytes", file=name)
        return f"{self.PUBLIC_PREFIX}/{name}"

    def load(self, file_path: str) -> bytes:
        path = self._resolve(file_path)
        if not path.is_file():
            raise StoredFileNotFoundError(f"File not found: {path}")
        return path.read_bytes()

    def delete(self, file_path: str) -> bool:
        """Remove a stored file. Returns True if it existed."""
        path = self._resolve(file_path)
        if not path.is_file():
            return False
        path.unlink()
        return True

    def open(self, document: Document) -> DownloadedFile:
        """Original bytes of *document* with a content type for its extension."""
        content = self.load(document.file_path)
        extension = document.file_type.lower().lstrip(".")
        filename = document.title
        if extension and not filename.lower().endswith(f".{extension}"):
            filename = f"{filename}.{extension}"
        return DownloadedFile(
            content=content,
            content_type=content_type_for(extension),
            filename=filename,
        )

    def _resolve(self, file_path: str) -> Path:
        return self._root / PurePosixPath(file_path).name
