import pytest

from ediscovery.production.exceptions import ProductionValidationError
from ediscovery.production.models import ArtifactFormat, IncludeFlags, LoadFileFormat
from ediscovery.production.validator import validate_production_request


def _field_error(payload: object) -> str:
    with pytest.raises(ProductionValidationError) as excinfo:
        validate_production_request(payload)
    return excinfo.value.field


class TestDefaults:
    def test_minimal_request(self) -> None:
        request = validate_production_request({"name": "Vol 1", "documentIds": [3, 1]})
        config = request.config
        assert request.document_ids == [3, 1]
        assert config.name == "Vol 1"
        assert config.prefix == "PROD"
        assert config.start_number == 1
        assert config.format is ArtifactFormat.PDF
        assert config.load_file_format is LoadFileFormat.DAT
        assert config.include == IncludeFlags()

    def test_full_request(self) -> None:
        request = validate_production_request(
            {
                "name": "Vol 2",
                "prefix": "ABC_",
                "startNumber": 0,
                "format": "tiff",
                "loadFileFormat": "opt",
                "includeFlags": {"text": False, "native": True},
                "documentIds": [5],
            }
        )
        config = request.config
        assert config.prefix == "ABC_"
        assert config.start_number == 0
        assert config.format is ArtifactFormat.TIFF
        assert config.load_file_format is LoadFileFormat.OPT
        assert config.include == IncludeFlags(text=False, images=True, metadata=True, native=True)


class TestFieldErrors:
    def test_body_must_be_object(self) -> None:
        assert _field_error("nope") == "body"

    @pytest.mark.parametrize("name", [None, "", "   ", 5])
    def test_name_required(self, name: object) -> None:
        assert _field_error({"name": name, "documentIds": [1]}) == "name"

    def test_prefix_must_be_string(self) -> None:
        assert _field_error({"name": "n", "prefix": 7, "documentIds": [1]}) == "prefix"

    @pytest.mark.parametrize("prefix", ["VOL1/X_", "..\\X_", "/"])
    def test_prefix_rejects_path_separators(self, prefix: str) -> None:
        assert _field_error({"name": "n", "prefix": prefix, "documentIds": [1]}) == "prefix"

    @pytest.mark.parametrize("start", [-1, "1", 1.5, False])
    def test_start_number(self, start: object) -> None:
        assert _field_error({"name": "n", "startNumber": start, "documentIds": [1]}) == "startNumber"

    def test_unknown_format(self) -> None:
        assert _field_error({"name": "n", "format": "gif", "documentIds": [1]}) == "format"

    def test_unknown_load_file_format(self) -> None:
        payload = {"name": "n", "loadFileFormat": "zip", "documentIds": [1]}
        assert _field_error(payload) == "loadFileFormat"

    def test_include_flag_must_be_boolean(self) -> None:
        payload = {"name": "n", "includeFlags": {"text": "yes"}, "documentIds": [1]}
        assert _field_error(payload) == "includeFlags.text"

    @pytest.mark.parametrize("ids", [None, [], [1, "2"], [1, 1], "1,2"])
    def test_document_ids(self, ids: object) -> None:
        assert _field_error({"name": "n", "documentIds": ids}) == "documentIds"
