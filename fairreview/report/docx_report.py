import io
import re
from collections.abc import Sequence
from datetime import date, datetime

from docx import Document
from docx.document import Document as WordDocument
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.shared import Pt

from fairreview.logging.logger import Log
from fairreview.review.models import Issue

REPORT_TITLE = "Fair Competition Review Report"
UNNAMED_FILE = "Unnamed file"

NO_ISSUES_PLACEHOLDER = Issue(
    sequence_id=1,
    title="No issues found",
    description="The review did not identify any fair-competition problems in this document.",
)

_UNSAFE_FILENAME_CHARS = re.compile(r'[/?<>\\:*|"]')


def sanitize_file_name(file_name: str | None) -> str:
    cleaned = _UNSAFE_FILENAME_CHARS.sub("_", (file_name or "").strip())
    return cleaned or UNNAMED_FILE


def report_filename(day: date | None = None) -> str:
    day = day or date.today()
    return f"fair-competition-review-report_{day.isoformat()}.docx"


class DocxReportBuilder:
    """Renders review issues as a downloadable Word document."""

    def build(
        self,
        file_name: str | None,
        issues: Sequence[Issue],
        reviewed_at: datetime | None = None,
    ) -> bytes:
        """Return the .docx bytes; an empty issue list gets a placeholder entry."""
        reviewed_at = reviewed_at or datetime.now()
        entries = list(issues) or [NO_ISSUES_PLACEHOLDER]

        document = Document()
        heading = document.add_heading(REPORT_TITLE, level=1)
        heading.alignment = WD_ALIGN_PARAGRAPH.CENTER

        document.add_heading("Basic information", level=2)
        self._add_field(document, "Reviewed file: ", sanitize_file_name(file_name))
        self._add_field(document, "Review time: ", reviewed_at.strftime("%Y-%m-%d %H:%M:%S"))
        self._add_field(document, "Number of issues: ", str(len(issues)))

        document.add_heading("Review results", level=2)
        for position, issue in enumerate(entries, start=1):
            self._add_issue(document, position, issue)

        document.add_heading("Conclusion", level=2)
        document.add_paragraph(
            f"The review found {len(issues)} potential fair-competition issue(s) in this "
            "document. Revise it according to the suggestions above so that it complies "
            "with the fair competition review system."
        )

        buffer = io.BytesIO()
        document.save(buffer)
        Log.info(f"Built review report with {len(issues)} issues")
        return buffer.getvalue()

    def _add_issue(self, document: WordDocument, position: int, issue: Issue) -> None:
        document.add_heading(f"Issue {position}: {issue.title}", level=3)
        self._add_field(document, "Description: ", issue.description)
        if issue.quoted_text:
            document.add_paragraph().add_run("Quoted passage:").bold = True
            quote = document.add_paragraph(issue.quoted_text)
            quote.paragraph_format.left_indent = Pt(30)
        if issue.violated_provision:
            self._add_field(document, "Violated provision: ", issue.violated_provision)
        if issue.suggestion:
            self._add_field(document, "Suggested revision: ", issue.suggestion)

    @staticmethod
    def _add_field(document: WordDocument, label: str, value: str) -> None:
        paragraph = document.add_paragraph()
        paragraph.add_run(label).bold = True
        paragraph.add_run(value)
