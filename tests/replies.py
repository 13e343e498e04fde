"""Builders for model replies written in the review output template."""

from fairreview.review.template import ISSUE_SEPARATOR


def make_issue_block(
    number: int,
    title: str = "Local registration requirement",
    description: str = "Restricts bidders to local firms.",
    quote: str = '"Only local enterprises may bid."',
    provision: str = "Violates the market access standards.",
    suggestion: str = "Open bidding to all qualified firms.",
) -> str:
    return "\n".join(
        [
            f"# Issue {number}: {title}",
            "**Description:**",
            description,
            "",
            "**Quoted passage:**",
            quote,
            "",
            "**Violated provision:**",
            provision,
            "",
            "**Suggested revision:**",
            suggestion,
            "",
        ]
    )


def make_reply(*blocks: str) -> str:
    return "".join(f"{block}\n{ISSUE_SEPARATOR}\n\n" for block in blocks)
