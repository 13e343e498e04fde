import dataclasses

import pytest

from fairreview.extraction.models import DocumentKind, UploadedDocument
from fairreview.llm.models import RawModelReply
from fairreview.review.models import Issue, ReviewOutcome, ReviewResult


def _issue(sequence_id: int = 1, **fields: str) -> Issue:
    return Issue(sequence_id=sequence_id, title="Local registration requirement", **fields)


class TestIssue:
    def test_title_only_issue_has_no_body(self) -> None:
        assert not _issue().has_body()

    @pytest.mark.parametrize(
        "field", ["description", "quoted_text", "violated_provision", "suggestion"]
    )
    def test_any_body_field_counts(self, field: str) -> None:
        assert _issue(**{field: "text"}).has_body()

    def test_is_immutable(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            _issue().title = "changed"  # type: ignore[misc]


class TestReviewResult:
    def test_total_issues_matches_issue_count(self) -> None:
        result = ReviewResult(
            file_name="notice.txt",
            file_size=10,
            issues=(_issue(1, description="a"), _issue(2, description="b")),
        )
        assert result.total_issues == 2

    def test_outcome_no_issues(self) -> None:
        result = ReviewResult(file_name="notice.txt", file_size=10)
        assert result.total_issues == 0
        assert result.outcome is ReviewOutcome.NO_ISSUES

    def test_outcome_issues_found(self) -> None:
        result = ReviewResult(file_name="n", file_size=1, issues=(_issue(description="a"),))
        assert result.outcome is ReviewOutcome.ISSUES_FOUND

    def test_outcome_unstructured(self) -> None:
        result = ReviewResult(
            file_name="n", file_size=1, issues=(_issue(suggestion="raw"),), unstructured=True
        )
        assert result.outcome is ReviewOutcome.UNSTRUCTURED


class TestSupportingModels:
    def test_reply_without_reasoning_trace(self) -> None:
        assert not RawModelReply(text="answer").has_reasoning_trace

    def test_document_kind_values_are_mime_types(self) -> None:
        assert DocumentKind("application/pdf") is DocumentKind.PDF

    def test_uploaded_document_is_immutable(self) -> None:
        document = UploadedDocument(
            raw_bytes=b"x", declared_name="n.txt", declared_size=1, kind=DocumentKind.PLAIN_TEXT
        )
        with pytest.raises(dataclasses.FrozenInstanceError):
            document.declared_size = 2  # type: ignore[misc]
