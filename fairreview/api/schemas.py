"""Wire format of the HTTP API.

Keys follow the JSON contract of the browser client (camelCase, with the
short issue field names ``quote`` and ``violation``).
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from fairreview.review.models import Issue, ReviewResult


class IssuePayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: int | None = None
    title: str = ""
    description: str = ""
    quote: str = ""
    violation: str = ""
    suggestion: str = ""

    def to_issue(self, position: int) -> Issue:
        return Issue(
            sequence_id=position,
            title=self.title or f"Issue {position}",
            description=self.description,
            quoted_text=self.quote,
            violated_provision=self.violation,
            suggestion=self.suggestion,
        )


class ReviewResultsPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    issues: list[IssuePayload] | None = None


class ReportRequest(BaseModel):
    """Body of ``POST /api/generate-report``.

    Issues may be sent at the top level or nested in ``reviewResults`` as
    returned by ``POST /api/review``.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    file_name: str = Field(default="", alias="fileName")
    issues: list[IssuePayload] | None = None
    review_results: ReviewResultsPayload | None = Field(default=None, alias="reviewResults")

    def resolved_issues(self) -> list[IssuePayload] | None:
        if self.issues is not None:
            return self.issues
        if self.review_results is not None:
            return self.review_results.issues
        return None


def issue_to_dict(issue: Issue) -> dict[str, Any]:
    return {
        "id": issue.sequence_id,
        "title": issue.title,
        "description": issue.description,
        "quote": issue.quoted_text,
        "violation": issue.violated_provision,
        "suggestion": issue.suggestion,
    }


def review_result_to_dict(result: ReviewResult) -> dict[str, Any]:
    return {
        "fileName": result.file_name,
        "fileSize": result.file_size,
        "totalIssues": result.total_issues,
        "issues": [issue_to_dict(issue) for issue in result.issues],
        "outcome": result.outcome.value,
        "model": result.model,
        "rawResponse": result.raw_response,
        "reasoningContent": result.reasoning_trace,
    }
