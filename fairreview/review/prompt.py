from pathlib import Path

from fairreview.review.models import ReviewPrompt
from fairreview.review.prompt_loader import load_system_prompt, load_user_prompt
from fairreview.review.template import OUTPUT_TEMPLATE


class ReviewPromptBuilder:
    """Combines the fixed review rubric with a document's text.

    Templates are read once at construction, so ``build`` itself cannot fail.
    """

    def __init__(
        self,
        *,
        system_prompt_path: Path | None = None,
        user_prompt_path: Path | None = None,
    ) -> None:
        self._system_instruction = load_system_prompt(system_prompt_path).replace(
            "{output_template}", OUTPUT_TEMPLATE
        ).strip()
        self._user_template = load_user_prompt(user_prompt_path)

    @property
    def system_instruction(self) -> str:
        return self._system_instruction

    def build(self, text: str) -> ReviewPrompt:
        return ReviewPrompt(
            system_instruction=self._system_instruction,
            user_query=self._user_template.replace("{document_text}", text).strip(),
        )
