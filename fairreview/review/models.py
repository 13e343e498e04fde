from dataclasses import dataclass, field
from enum import Enum


@dataclass(frozen=True)
class ReviewPrompt:
    """System and user messages for one review request."""

    system_instruction: str
    user_query: str


@dataclass(frozen=True)
class Issue:
    """One fair-competition finding extracted from a model reply."""

    sequence_id: int
    title: str
    description: str = ""
    quoted_text: str = ""
    violated_provision: str = ""
    suggestion: str = ""

    def has_body(self) -> bool:
        return any(
            (self.description, self.quoted_text, self.violated_provision, self.suggestion)
        )


class ReviewOutcome(str, Enum):
    """How the issue list of a review should be read."""

    ISSUES_FOUND = "issues_found"
    NO_ISSUES = "no_issues"
    UNSTRUCTURED = "unstructured"


@dataclass(frozen=True)
class ReviewResult:
    """Everything returned to the caller for one reviewed document."""

    file_name: str
    file_size: int
    issues: tuple[Issue, ...] = field(default_factory=tuple)
    raw_response: str = ""
    reasoning_trace: str | None = None
    model: str = ""
    unstructured: bool = False

    @property
    def total_issues(self) -> int:
        return len(self.issues)

    @property
    def outcome(self) -> ReviewOutcome:
        if not self.issues:
            return ReviewOutcome.NO_ISSUES
        if self.unstructured:
            return ReviewOutcome.UNSTRUCTURED
        return ReviewOutcome.ISSUES_FOUND
