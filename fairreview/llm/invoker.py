"""Resilient access to the chat completion endpoint."""

import time
from collections.abc import Callable, Sequence

from fairreview.llm.client_base import BaseChatClient
from fairreview.llm.exceptions import ModelInvocationError, ModelTransportError
from fairreview.llm.models import RawModelReply
from fairreview.llm.preference import ModelPreference
from fairreview.llm.retry import retry_once
from fairreview.logging.logger import Log, preview
from fairreview.review.models import ReviewPrompt

PROBE_SYSTEM_PROMPT = "You are a helpful assistant."
PROBE_USER_PROMPT = "Test: please reply 'API connection OK'."
PROBE_MAX_TOKENS = 50


class ModelInvoker:
    """Sends review prompts to the provider and remembers the working model.

    Each call issues one request to the preferred model (or the first
    candidate), retried once after a fixed delay on transport failures only.
    Status and shape failures are raised by the client as typed errors.
    """

    def __init__(
        self,
        *,
        client: BaseChatClient,
        candidates: Sequence[str],
        preference: ModelPreference | None = None,
        temperature: float = 0.5,
        top_p: float = 0.95,
        max_tokens: int = 4000,
        retry_delay_seconds: float = 2.0,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._client = client
        self._candidates = tuple(candidates)
        self._preference = preference if preference is not None else ModelPreference()
        self._temperature = max(0.0, min(1.0, temperature))
        self._top_p = max(0.01, min(1.0, top_p))
        self._max_tokens = max_tokens
        self._retry_delay_seconds = retry_delay_seconds
        self._sleep = sleep

    @property
    def candidates(self) -> tuple[str, ...]:
        return self._candidates

    @property
    def preference(self) -> ModelPreference:
        return self._preference

    def select_model(self, candidates: Sequence[str] | None = None) -> str:
        preferred = self._preference.get()
        if preferred:
            return preferred
        pool = tuple(candidates) if candidates is not None else self._candidates
        if not pool:
            raise ValueError("No model candidates configured")
        return pool[0]

    def invoke(
        self,
        prompt: ReviewPrompt,
        candidates: Sequence[str] | None = None,
    ) -> RawModelReply:
        """Run one review completion.

        Raises:
            ModelTimeoutError, ModelNetworkError: transport failed twice.
            ModelAuthError, ModelRateLimitError, UpstreamError: non-2xx reply.
            MalformedResponseError: 2xx reply without usable content.
        """
        model = self.select_model(candidates)
        Log.info(f"Invoking model {model}")
        Log.debug(f"Review user prompt:\n{prompt.user_query}")

        started = time.monotonic()
        reply = retry_once(
            lambda: self._client.create_chat_completion(
                model=model,
                system_prompt=prompt.system_instruction,
                user_prompt=prompt.user_query,
                temperature=self._temperature,
                top_p=self._top_p,
                max_tokens=self._max_tokens,
            ),
            retry_on=(ModelTransportError,),
            delay_seconds=self._retry_delay_seconds,
            sleep=self._sleep,
        )
        elapsed = time.monotonic() - started

        self._preference.record(model)
        Log.info(
            f"Model {model} answered in {elapsed:.1f}s with {len(reply.text)} chars "
            f"(reasoning trace: {'yes' if reply.has_reasoning_trace else 'no'})"
        )
        Log.debug(f"Model reply preview: {preview(reply.text)}")
        return reply

    def probe(self, candidates: Sequence[str] | None = None) -> str | None:
        """Find the first candidate that answers a short test prompt.

        The winner becomes the preferred model. Failures are logged and the
        next candidate is tried; ``None`` means no candidate answered.
        """
        pool = tuple(candidates) if candidates is not None else self._candidates
        for model in pool:
            Log.info(f"Probing model {model}")
            try:
                self._client.create_chat_completion(
                    model=model,
                    system_prompt=PROBE_SYSTEM_PROMPT,
                    user_prompt=PROBE_USER_PROMPT,
                    temperature=self._temperature,
                    top_p=self._top_p,
                    max_tokens=PROBE_MAX_TOKENS,
                )
            except ModelInvocationError as exc:
                Log.warning(f"Model {model} probe failed: {exc}")
                continue
            self._preference.record(model)
            Log.info(f"Model {model} is available and now preferred")
            return model
        Log.error("No candidate model answered the probe")
        return None
