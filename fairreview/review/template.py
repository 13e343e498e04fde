"""Output template shared by the review prompt and the reply parser.

The system prompt asks the model to answer in ``OUTPUT_TEMPLATE`` and the
parser splits replies with exactly the same heading, labels and separator.
Changing a label here changes both sides.
"""

import re
from dataclasses import dataclass

TEMPLATE_VERSION = "1"

ISSUE_SEPARATOR = "-" * 45
SUGGESTION_TERMINATOR = "---"
QUOTE_CHARACTERS = "\"“”"

HEADING_PATTERN = re.compile(
    r"^[ \t]*#{1,6}[ \t]*Issue[ \t]*\d+[ \t]*[:：][ \t]*(?P<title>.*?)[ \t]*$",
    re.MULTILINE | re.IGNORECASE,
)


@dataclass(frozen=True)
class Section:
    """One labelled body section of an issue block."""

    field: str
    label: str
    placeholder: str

    @property
    def marker(self) -> str:
        return f"**{self.label}:**"

    @property
    def pattern(self) -> re.Pattern[str]:
        return re.compile(rf"\*\*[ \t]*{re.escape(self.label)}[ \t]*[:：][ \t]*\*\*")


SECTIONS: tuple[Section, ...] = (
    Section("description", "Description", "<detailed description of the problem>"),
    Section(
        "quoted_text",
        "Quoted passage",
        '"<exact passage quoted verbatim from the document>"',
    ),
    Section(
        "violated_provision",
        "Violated provision",
        'Violates Article <N> of <regulation name>: "<provision text>".',
    ),
    Section("suggestion", "Suggested revision", "<concrete revision>"),
)

# Labels that must all appear before a reply is treated as structured.
REQUIRED_LABELS: tuple[str, ...] = tuple(section.label for section in SECTIONS[:3])


def render_output_template() -> str:
    lines = ["# Issue 1: <issue title>"]
    for section in SECTIONS:
        lines.append(section.marker)
        lines.append(section.placeholder)
        lines.append("")
    lines.append(ISSUE_SEPARATOR)
    return "\n".join(lines)


OUTPUT_TEMPLATE = render_output_template()
