from pathlib import Path

from app.extraction.exceptions import ExtractionError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_system_prompt(path: Path | None = None) -> str:
    """Load the system instruction describing the extraction task.

    Args:
        path: Path to the prompt file.
              Defaults to the bundled system_prompt.txt.

    Returns:
        The prompt text with surrounding whitespace removed.

    Raises:
        ExtractionError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "system_prompt.txt"
    try:
        return path.read_text(encoding="utf-8").strip()
    except OSError as exc:
        raise ExtractionError(f"Failed to load system prompt: {exc}") from exc


def load_user_prompt(path: Path | None = None) -> str:
    """Load the user instruction sent alongside the page images.

    Raises:
        ExtractionError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "user_prompt.txt"
    try:
        return path.read_text(encoding="utf-8").strip()
    except OSError as exc:
        raise ExtractionError(f"Failed to load user prompt: {exc}") from exc
