from abc import ABC, abstractmethod

from fairreview.llm.models import RawModelReply


class BaseChatClient(ABC):
    """Contract for provider-specific chat completion clients."""

    @abstractmethod
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
        """Send one non-streaming request and return the validated reply.

        Raises:
            ModelInvocationError: a subclass naming the failure kind.
        """
