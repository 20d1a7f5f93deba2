import json
from pathlib import Path

from ediscovery.ai.exceptions import AIError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_system_prompt(name: str, prompt_dir: Path | None = None) -> str:
    """Load the bundled ``<name>_system.txt`` prompt.

    Raises:
        AIError: if the file cannot be read.
    """
    path = (prompt_dir or _DEFAULT_PROMPT_DIR) / f"{name}_system.txt"
    try:
        return path.read_text(encoding="utf-8").strip()
    except OSError as exc:
        raise AIError(f"Failed to load system prompt '{name}': {exc}") from exc


def load_json_schema(name: str, prompt_dir: Path | None = None) -> dict[str, object]:
    """Load and parse the bundled ``<name>_schema.json`` response schema.

    Raises:
        AIError: if the file cannot be read or is not a JSON object.
    """
    path = (prompt_dir or _DEFAULT_PROMPT_DIR) / f"{name}_schema.json"
    try:
        schema = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise AIError(f"Failed to load JSON schema '{name}': {exc}") from exc
    if not isinstance(schema, dict):
        raise AIError(f"JSON schema '{name}' must be an object")
    return schema
