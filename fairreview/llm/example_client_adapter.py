"""Offline chat client.

Answers every request with the same template-conformant review, so the
service can run end to end without provider credentials.
"""

from typing import ClassVar

from fairreview.llm.client_base import BaseChatClient
from fairreview.llm.models import RawModelReply
from fairreview.review.template import ISSUE_SEPARATOR


class ExampleClientAdapter(BaseChatClient):
    """Returns a fixed single-issue review without any network calls."""

    DEFAULT_REPLY: ClassVar[str] = "\n".join(
        [
            "# Issue 1: Registration restricted to local enterprises",
            "**Description:**",
            "The document limits eligibility to enterprises registered in the region,",
            "which excludes out-of-region competitors from the market.",
            "",
            "**Quoted passage:**",
            '"Only enterprises registered in this city may apply."',
            "",
            "**Violated provision:**",
            "Violates the market access and exit standards of the fair competition",
            "review rules.",
            "",
            "**Suggested revision:**",
            "Remove the registration requirement and open the programme to all",
            "qualified enterprises.",
            "",
            ISSUE_SEPARATOR,
        ]
    )

    def create_chat_completion(
        self,
        *,
        model: str,
        system_prompt: str,
        user_prompt: str,
        temperature: float,
        top_p: float,
        max_tokens: int,
    ) -> RawModelReply:
        _ = system_prompt, user_prompt, temperature, top_p, max_tokens
        return RawModelReply(text=self.DEFAULT_REPLY, model=model)
