import json
from pathlib import Path

from intake.documents.exceptions import PromptLoadError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_prompt_template(name: str, prompt_dir: Path | None = None) -> str:
    """Load the ``{name}_prompt.txt`` template.

    Raises:
        PromptLoadError: if the file cannot be read.
    """
    path = (prompt_dir or _DEFAULT_PROMPT_DIR) / f"{name}_prompt.txt"
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise PromptLoadError(f"Failed to load prompt template: {exc}") from exc


def load_json_schema(name: str, prompt_dir: Path | None = None) -> dict[str, object]:
    """Load and parse the ``{name}_schema.json`` response schema.

    Raises:
        PromptLoadError: if the file cannot be read or is not a JSON object.
    """
    path = (prompt_dir or _DEFAULT_PROMPT_DIR) / f"{name}_schema.json"
    try:
        schema = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise PromptLoadError(f"Failed to load JSON schema: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise PromptLoadError(f"Invalid JSON schema {path.name}: {exc}") from exc
    if not isinstance(schema, dict):
        raise PromptLoadError(f"JSON schema {path.name} must be an object")
    return schema
