import argparse
import json
import sys
from dataclasses import asdict, dataclass
from pathlib import Path, PurePosixPath
from typing import Any

from ediscovery.ai.analyzer import DocumentAnalyzer
from ediscovery.ai.exceptions import AIError
from ediscovery.ai.factory import AIClientFactory
from ediscovery.config.settings import Settings
from ediscovery.database.connection import apply_schema, close_pool, init_pool
from ediscovery.database.exceptions import RepositoryError
from ediscovery.database.repositories.factory import Repositories, RepositoryFactory
from ediscovery.detection.detector import PiiDetector
from ediscovery.detection.factory import PiiDetectorFactory
from ediscovery.ingestion.exceptions import IngestionError
from ediscovery.ingestion.file_store import FileStore
from ediscovery.ingestion.ingestor import Ingestor, build_ingestor
from ediscovery.ingestion.models import UploadedFile
from ediscovery.logging.logger import Log
from ediscovery.production.assembler import ProductionAssembler
from ediscovery.production.exceptions import ProductionError
from ediscovery.redaction.applier import block_mask, marker_mask
from ediscovery.redaction.exceptions import RedactionError
from ediscovery.redaction.ledger import RedactionLedger
from ediscovery.redaction.models import BoxRegion, Redaction

EXIT_OK = 0
EXIT_FAILURE = 1

_HANDLED_ERRORS = (
    AIError,
    OSError,
    IngestionError,
    ProductionError,
    RedactionError,
    RepositoryError,
    ValueError,
)


@dataclass(frozen=True)
class Services:
    repositories: Repositories
    file_store: FileStore
    ingestor: Ingestor
    ledger: RedactionLedger
    assembler: ProductionAssembler
    detector: PiiDetector
    analyzer: DocumentAnalyzer


def build_services(settings: Settings) -> Services:
    """Wire every collaborator from settings."""
    repositories = RepositoryFactory.create(settings)
    file_store = FileStore(Path(settings.files_root))
    ledger = RedactionLedger(
        redactions=repositories.redactions,
        documents=repositories.documents,
    )
    client, binding = AIClientFactory.create(settings)
    return Services(
        repositories=repositories,
        file_store=file_store,
        ingestor=build_ingestor(settings, repositories.documents, file_store),
        ledger=ledger,
        assembler=ProductionAssembler(
            productions=repositories.productions,
            documents=repositories.documents,
            ledger=ledger,
        ),
        detector=PiiDetectorFactory.create(settings),
        analyzer=DocumentAnalyzer(client=client, binding=binding),
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ediscovery",
        description="Ingest, redact and produce documents for legal discovery.",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("init-db", help="Create the database tables")

    ingest = commands.add_parser("ingest", help="Ingest a file as a new document")
    ingest.add_argument("file", type=Path)
    ingest.add_argument("--title")
    ingest.add_argument("--custodian")
    ingest.add_argument("--metadata", type=json.loads, default={}, help="JSON object")

    detect = commands.add_parser("detect-pii", help="Propose redactions for a document")
    detect.add_argument("document_id", type=int)
    detect.add_argument("--timeout", type=float, default=None, help="AI timeout in seconds")

    for name, help_text in (
        ("summarize", "Summarize a document with the AI provider"),
        ("tags", "Suggest category tags for a document"),
        ("entities", "Extract named entities from a document"),
    ):
        analysis = commands.add_parser(name, help=help_text)
        analysis.add_argument("document_id", type=int)

    redact = commands.add_parser("redact", help="Manage document redactions")
    redact_commands = redact.add_subparsers(dest="redact_command", required=True)
    redact_add = redact_commands.add_parser("add", help="Add a redaction from a JSON payload")
    redact_add.add_argument("payload", type=json.loads)
    redact_list = redact_commands.add_parser("list", help="List a document's redactions")
    redact_list.add_argument("document_id", type=int)
    redact_remove = redact_commands.add_parser("remove", help="Remove a redaction")
    redact_remove.add_argument("redaction_id", type=int)
    redact_show = redact_commands.add_parser("show", help="Print redacted document text")
    redact_show.add_argument("document_id", type=int)
    redact_show.add_argument("--markers", action="store_true", help="Use [REDACTED] markers")

    produce = commands.add_parser("produce", help="Assemble a production set")
    produce.add_argument("payload", type=json.loads)
    produce.add_argument("--output-dir", type=Path, default=Path("productions"))

    download = commands.add_parser("download", help="Write a document's original file")
    download.add_argument("document_id", type=int)
    download.add_argument("--output-dir", type=Path, default=Path("."))

    return parser


def run_command(args: argparse.Namespace, services: Services) -> Any:
    """Execute one parsed command and return its JSON-serializable result."""
    documents = services.repositories.documents

    if args.command == "ingest":
        upload = UploadedFile(
            data=args.file.read_bytes(),
            original_name=args.file.name,
            title=args.title,
            custodian=args.custodian,
            metadata=args.metadata,
        )
        document = services.ingestor.ingest(upload)
        return {"id": document.id, "title": document.title, "fileType": document.file_type}

    if args.command == "detect-pii":
        content = documents.find_by_id(args.document_id).content
        candidates = services.detector.detect(content, timeout_seconds=args.timeout)
        return [
            {"text": c.text, "reason": c.reason, "source": c.source.value} for c in candidates
        ]

    if args.command == "summarize":
        content = documents.find_by_id(args.document_id).content
        return {"summary": services.analyzer.summarize(content)}

    if args.command == "tags":
        tags = services.analyzer.suggest_tags(documents.find_by_id(args.document_id).content)
        return [asdict(tag) for tag in tags]

    if args.command == "entities":
        return services.analyzer.extract_entities(documents.find_by_id(args.document_id).content)

    if args.command == "redact":
        return _run_redact_command(args, services.ledger)

    if args.command == "produce":
        return _run_produce_command(args, services.assembler)

    if args.command == "download":
        downloaded = services.file_store.open(documents.find_by_id(args.document_id))
        args.output_dir.mkdir(parents=True, exist_ok=True)
        filename = _safe_filename(downloaded.filename, f"document-{args.document_id}")
        target = args.output_dir / filename
        target.write_bytes(downloaded.content)
        return {"path": str(target), "contentType": downloaded.content_type}

    raise ValueError(f"Unknown command '{args.command}'")


def _run_redact_command(args: argparse.Namespace, ledger: RedactionLedger) -> Any:
    if args.redact_command == "add":
        return {"id": ledger.add_from_payload(args.payload)}
    if args.redact_command == "list":
        return [_redaction_to_dict(r) for r in ledger.list_redactions(args.document_id)]
    if args.redact_command == "remove":
        ledger.remove_redaction(args.redaction_id)
        return {"removed": args.redaction_id}
    mask = marker_mask if args.markers else block_mask
    return {
        "content": ledger.redacted_text(args.document_id, mask),
        "boxes": _overlays_to_dict(ledger.box_overlays(args.document_id)),
    }


def _run_produce_command(args: argparse.Namespace, assembler: ProductionAssembler) -> Any:
    result = assembler.assemble_from_payload(args.payload)
    output_dir = args.output_dir / str(result.production_set.id)
    output_dir.mkdir(parents=True, exist_ok=True)
    load_file_path = output_dir / _safe_filename(result.load_file_name, "load_file")
    load_file_path.write_bytes(result.load_file)
    for bates_number, text in result.text_files.items():
        text_path = output_dir / _safe_filename(f"{bates_number}.txt", "document.txt")
        text_path.write_text(text, encoding="utf-8")
    return {
        "productionSetId": result.production_set.id,
        "batesNumbers": result.bates_numbers,
        "loadFile": str(load_file_path),
        "redactedDocumentIds": result.redacted_document_ids,
        "boxOverlays": {
            bates_number: _overlays_to_dict(overlays)
            for bates_number, overlays in result.box_overlays.items()
        },
    }


def _safe_filename(name: str, fallback: str) -> str:
    """Final path component of *name*, so a written file stays in its directory."""
    candidate = PurePosixPath(name.replace("\\", "/")).name
    if candidate in ("", ".", ".."):
        return fallback
    return candidate


def _overlays_to_dict(overlays: dict[int, list[BoxRegion]]) -> dict[int, list[dict[str, Any]]]:
    return {page: [asdict(box) for box in boxes] for page, boxes in overlays.items()}


def _redaction_to_dict(redaction: Redaction) -> dict[str, Any]:
    return {
        "id": redaction.id,
        "documentId": redaction.document_id,
        "mode": redaction.region.mode.value,
        **asdict(redaction.region),
        "createdAt": redaction.created_at,
    }


def main(argv: list[str] | None = None) -> int:
    """Entry point: parse -> configure -> open pool -> run one command."""
    args = build_parser().parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level)

    uses_postgres = settings.storage_backend.lower() == "postgres"
    if uses_postgres:
        init_pool(settings)
    try:
        if args.command == "init-db":
            if not uses_postgres:
                raise ValueError("init-db requires storage_backend=postgres")
            apply_schema()
            result: Any = {"schema": "applied"}
        else:
            result = run_command(args, build_services(settings))
    except _HANDLED_ERRORS as exc:
        Log.error(f"{type(exc).__name__}: {exc}", command=args.command)
        return EXIT_FAILURE
    finally:
        if uses_postgres:
            close_pool()

    sys.stdout.write(json.dumps(result, indent=2, default=str) + "\n")
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
