from pathlib import Path

from fairreview.review.exceptions import PromptTemplateError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_system_prompt(path: Path | None = None) -> str:
    """Load the review rubric template.

    Args:
        path: Path to the rubric file.
              Defaults to the bundled system_prompt.txt.

    Returns:
        The raw template with an ``{output_template}`` placeholder.

    Raises:
        PromptTemplateError: if the file cannot be read.
    """
    return _read_template(path or _DEFAULT_PROMPT_DIR / "system_prompt.txt", "system prompt")


def load_user_prompt(path: Path | None = None) -> str:
    """Load the user request template.

    Args:
        path: Path to the request file.
              Defaults to the bundled user_prompt.txt.

    Returns:
        The raw template with a ``{document_text}`` placeholder.

    Raises:
        PromptTemplateError: if the file cannot be read.
    """
    return _read_template(path or _DEFAULT_PROMPT_DIR / "user_prompt.txt", "user prompt")


def _read_template(path: Path, description: str) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise PromptTemplateError(f"Failed to load {description} template: {exc}") from exc
