import json
import logging
from collections.abc import Generator
from pathlib import Path

import pytest

from ediscovery.config.settings import Settings
from ediscovery.main import (
    EXIT_FAILURE,
    EXIT_OK,
    Services,
    build_parser,
    build_services,
    main,
    run_command,
)
from ediscovery.production.exceptions import (
    ProductionSetNotFoundError,
    ProductionValidationError,
)
from ediscovery.redaction.applier import MASK_CHAR

MEMO = "Acme Corp owes Jane Roe. Call 555-123-4567 before Friday."


@pytest.fixture()
def services(tmp_path: Path) -> Services:
    settings = Settings(
        storage_backend="memory",
        ai_provider="disabled",
        files_root=str(tmp_path / "uploads"),
    )
    return build_services(settings)


@pytest.fixture()
def memo_file(tmp_path: Path) -> Path:
    path = tmp_path / "memo.txt"
    path.write_text(MEMO, encoding="utf-8")
    return path


def _run(services: Services, *argv: str) -> object:
    return run_command(build_parser().parse_args(list(argv)), services)


class TestRunCommand:
    def test_ingest(self, services: Services, memo_file: Path) -> None:
        result = _run(services, "ingest", str(memo_file), "--custodian", "Jane Roe")

        assert result == {"id": 1, "title": "memo.txt", "fileType": "txt"}
        assert services.repositories.documents.find_by_id(1).custodian == "Jane Roe"

    def test_detect_pii_falls_back_to_patterns(
        self, services: Services, memo_file: Path
    ) -> None:
        _run(services, "ingest", str(memo_file))

        result = _run(services, "detect-pii", "1")

        assert {"text": "555-123-4567", "reason": "Phone Number", "source": "regex"} in result

    def test_redact_flow(self, services: Services, memo_file: Path) -> None:
        _run(services, "ingest", str(memo_file))
        payload = json.dumps({"documentId": 1, "text": "Acme Corp", "reason": "Party"})

        added = _run(services, "redact", "add", payload)
        listed = _run(services, "redact", "list", "1")
        shown = _run(services, "redact", "show", "1")
        markers = _run(services, "redact", "show", "1", "--markers")

        assert added == {"id": 1}
        assert listed[0]["mode"] == "text"
        assert listed[0]["text"] == "Acme Corp"
        assert shown["content"].startswith(MASK_CHAR * len("Acme Corp") + " owes")
        assert markers["content"].startswith("[REDACTED: Party] owes")

        assert _run(services, "redact", "remove", "1") == {"removed": 1}
        assert _run(services, "redact", "list", "1") == []

    def test_produce_writes_load_file_and_text(
        self, services: Services, memo_file: Path, tmp_path: Path
    ) -> None:
        _run(services, "ingest", str(memo_file))
        _run(services, "redact", "add", json.dumps({"documentId": 1, "text": "Jane Roe"}))
        payload = json.dumps(
            {"name": "vol1", "prefix": "ACME", "loadFileFormat": "CSV", "documentIds": [1]}
        )

        result = _run(services, "produce", payload, "--output-dir", str(tmp_path / "out"))

        assert result["batesNumbers"] == ["ACME000001"]
        assert result["redactedDocumentIds"] == [1]
        out_dir = tmp_path / "out" / str(result["productionSetId"])
        assert (out_dir / "vol1.csv").read_text(encoding="utf-8").startswith("ID,BATES")
        assert "Jane Roe" not in (out_dir / "ACME000001.txt").read_text(encoding="utf-8")

    def test_download(self, services: Services, memo_file: Path, tmp_path: Path) -> None:
        _run(services, "ingest", str(memo_file), "--title", "Memo")

        result = _run(services, "download", "1", "--output-dir", str(tmp_path / "dl"))

        target = tmp_path / "dl" / "Memo.txt"
        assert result == {"path": str(target), "contentType": "text/plain"}
        assert target.read_text(encoding="utf-8") == MEMO

    def test_redact_show_returns_box_overlays(self, services: Services, memo_file: Path) -> None:
        _run(services, "ingest", str(memo_file))
        box = {"documentId": 1, "mode": "box", "x": 4, "y": 8, "width": 50, "height": 12}
        _run(services, "redact", "add", json.dumps({**box, "pageNumber": 2}))

        shown = _run(services, "redact", "show", "1")

        assert shown["content"] == MEMO
        assert shown["boxes"] == {
            2: [{"page_number": 2, "x": 4, "y": 8, "width": 50, "height": 12, "reason": None}]
        }

    def test_produce_keeps_files_inside_output_dir(
        self, services: Services, memo_file: Path, tmp_path: Path
    ) -> None:
        _run(services, "ingest", str(memo_file))
        payload = json.dumps(
            {"name": "../../escaped", "loadFileFormat": "CSV", "documentIds": [1]}
        )

        result = _run(services, "produce", payload, "--output-dir", str(tmp_path / "out"))

        out_dir = tmp_path / "out" / str(result["productionSetId"])
        assert result["loadFile"] == str(out_dir / "escaped.csv")
        assert (out_dir / "escaped.csv").is_file()
        assert not (tmp_path / "escaped.csv").exists()

    def test_produce_rejects_prefix_with_separator_before_saving(
        self, services: Services, memo_file: Path, tmp_path: Path
    ) -> None:
        _run(services, "ingest", str(memo_file))
        payload = json.dumps({"name": "vol1", "prefix": "VOL1/X_", "documentIds": [1]})

        with pytest.raises(ProductionValidationError) as excinfo:
            _run(services, "produce", payload, "--output-dir", str(tmp_path / "out"))

        assert excinfo.value.field == "prefix"
        with pytest.raises(ProductionSetNotFoundError):
            services.repositories.productions.find_by_id(1)
        assert not (tmp_path / "out").exists()

    def test_produce_reports_box_overlays(
        self, services: Services, memo_file: Path, tmp_path: Path
    ) -> None:
        _run(services, "ingest", str(memo_file))
        box = {"documentId": 1, "mode": "box", "x": 1, "y": 1, "width": 9, "height": 9}
        _run(services, "redact", "add", json.dumps(box))
        payload = json.dumps({"name": "vol1", "prefix": "B", "documentIds": [1]})

        result = _run(services, "produce", payload, "--output-dir", str(tmp_path / "out"))

        assert list(result["boxOverlays"]) == ["B000001"]
        assert result["boxOverlays"]["B000001"][1][0]["width"] == 9

    def test_download_keeps_file_inside_output_dir(
        self, services: Services, memo_file: Path, tmp_path: Path
    ) -> None:
        _run(services, "ingest", str(memo_file), "--title", "../../evil.txt")

        result = _run(services, "download", "1", "--output-dir", str(tmp_path / "dl"))

        assert result["path"] == str(tmp_path / "dl" / "evil.txt")
        assert not (tmp_path.parent / "evil.txt").exists()


class TestMain:
    @pytest.fixture(autouse=True)
    def _memory_env(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> Generator[None, None, None]:
        monkeypatch.setenv("STORAGE_BACKEND", "memory")
        monkeypatch.setenv("AI_PROVIDER", "example")
        monkeypatch.setenv("FILES_ROOT", str(tmp_path / "uploads"))
        logger = logging.getLogger("ediscovery")
        previous_level, previous_handlers = logger.level, list(logger.handlers)
        yield
        logger.setLevel(previous_level)
        logger.handlers = previous_handlers

    def test_prints_json_result(
        self, memo_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main(["ingest", str(memo_file)]) == EXIT_OK

        assert json.loads(capsys.readouterr().out)["fileType"] == "txt"

    def test_handled_error_returns_failure(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["summarize", "7"]) == EXIT_FAILURE
        assert capsys.readouterr().out == ""

    def test_init_db_requires_postgres(self) -> None:
        assert main(["init-db"]) == EXIT_FAILURE

    def test_invalid_production_payload(self) -> None:
        assert main(["produce", json.dumps({"name": "", "documentIds": [1]})]) == EXIT_FAILURE
