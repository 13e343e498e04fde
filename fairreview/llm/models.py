from dataclasses import dataclass


@dataclass(frozen=True)
class RawModelReply:
    """Validated text of one successful chat completion."""

    text: str
    model: str = ""
    reasoning_text: str | None = None

    @property
    def has_reasoning_trace(self) -> bool:
        return bool(self.reasoning_text)
