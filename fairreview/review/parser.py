"""Turns a free-text model reply into structured review issues.

Parsing runs in two stages. ``extract_issues`` segments the reply on the
template separator and reads the labelled sections of each block; blocks
with no body text are dropped. ``apply_fallback`` then covers replies that
produced no issues at all: a substantive reply becomes a single free-form
issue carrying the whole text, so the model's answer is never lost.

Parsing never raises.
"""

from dataclasses import dataclass

from fairreview.llm.models import RawModelReply
from fairreview.logging.logger import Log
from fairreview.review.models import Issue
from fairreview.review.template import (
    HEADING_PATTERN,
    ISSUE_SEPARATOR,
    QUOTE_CHARACTERS,
    REQUIRED_LABELS,
    SECTIONS,
    SUGGESTION_TERMINATOR,
    Section,
)

FALLBACK_MIN_LENGTH = 100
FALLBACK_TITLE = "Review result (free-form output)"
FALLBACK_DESCRIPTION = (
    "No issues in the standard format were detected; the original review output follows."
)


@dataclass(frozen=True)
class ParsedReply:
    """Issues read from one reply, and whether they came from the fallback."""

    issues: tuple[Issue, ...]
    used_fallback: bool = False


class ReviewParser:
    """Parses replies written in the review output template."""

    def __init__(self, fallback_min_length: int = FALLBACK_MIN_LENGTH) -> None:
        self._fallback_min_length = fallback_min_length

    def parse(self, reply: RawModelReply) -> list[Issue]:
        return list(self.parse_reply(reply).issues)

    def parse_reply(self, reply: RawModelReply) -> ParsedReply:
        issues = self.extract_issues(reply.text)
        if issues:
            Log.info(f"Parsed {len(issues)} issues from model reply")
            return ParsedReply(issues=issues)
        fallback = self.apply_fallback(reply.text)
        return ParsedReply(issues=fallback, used_fallback=bool(fallback))

    def extract_issues(self, text: str) -> tuple[Issue, ...]:
        """Stage one: zero or more issues from a template-shaped reply."""
        if not all(label in text for label in REQUIRED_LABELS):
            Log.info("Model reply is missing template section labels")
            return ()

        issues: list[Issue] = []
        for block in text.split(ISSUE_SEPARATOR):
            if not block.strip():
                continue
            issue = self._read_block(block, sequence_id=len(issues) + 1)
            if issue.has_body():
                issues.append(issue)
        return tuple(issues)

    def apply_fallback(self, text: str) -> tuple[Issue, ...]:
        """Stage two: one free-form issue for a substantive unparsed reply."""
        if len(text) <= self._fallback_min_length:
            return ()
        Log.warning("No structured issues found; returning the raw reply as one issue")
        return (
            Issue(
                sequence_id=1,
                title=FALLBACK_TITLE,
                description=FALLBACK_DESCRIPTION,
                quoted_text="",
                violated_provision="",
                suggestion=text,
            ),
        )

    def _read_block(self, block: str, sequence_id: int) -> Issue:
        heading = HEADING_PATTERN.search(block)
        title = heading.group("title").strip() if heading else ""
        fields = {
            section.field: self._read_section(block, index)
            for index, section in enumerate(SECTIONS)
        }
        fields["quoted_text"] = _strip_quotes(fields["quoted_text"])
        return Issue(
            sequence_id=sequence_id,
            title=title or f"Issue {sequence_id}",
            **fields,
        )

    @staticmethod
    def _read_section(block: str, index: int) -> str:
        match = SECTIONS[index].pattern.search(block)
        if match is None:
            return ""
        start = match.end()
        end = _section_end(block, start, SECTIONS[index + 1 :])
        return block[start:end].strip()


def _section_end(block: str, start: int, following: tuple[Section, ...]) -> int:
    if not following:
        terminator = block.find(SUGGESTION_TERMINATOR, start)
        return terminator if terminator != -1 else len(block)
    positions = [
        match.start()
        for match in (section.pattern.search(block, start) for section in following)
        if match is not None
    ]
    return min(positions, default=len(block))


def _strip_quotes(text: str) -> str:
    if text[:1] and text[0] in QUOTE_CHARACTERS:
        text = text[1:]
    if text[-1:] and text[-1] in QUOTE_CHARACTERS:
        text = text[:-1]
    return text.strip()
