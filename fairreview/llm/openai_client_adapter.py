from typing import Any

import httpx
import openai

from fairreview.llm.client_base import BaseChatClient
from fairreview.llm.exceptions import (
    MalformedResponseError,
    ModelAuthError,
    ModelNetworkError,
    ModelRateLimitError,
    ModelTimeoutError,
    UpstreamError,
)
from fairreview.llm.models import RawModelReply

_BODY_PREVIEW_CHARS = 200


class OpenAIClientAdapter(BaseChatClient):
    """Chat client for OpenAI-compatible completion APIs.

    SDK-level retries are disabled; the invoker owns the retry policy.
    """

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: float,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
            max_retries=0,
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
        try:
            raw = self._client.chat.completions.with_raw_response.create(
                model=model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
                temperature=temperature,
                top_p=top_p,
                max_tokens=max_tokens,
                stream=False,
            )
        except (openai.APITimeoutError, httpx.TimeoutException) as exc:
            raise ModelTimeoutError(f"AI provider timed out: {exc}") from exc
        except (openai.APIConnectionError, httpx.TransportError) as exc:
            raise ModelNetworkError(f"AI provider network error: {exc}") from exc
        except openai.AuthenticationError as exc:
            raise ModelAuthError(f"AI provider rejected credentials: {exc}") from exc
        except openai.RateLimitError as exc:
            raise ModelRateLimitError(f"AI provider rate limit hit: {exc}") from exc
        except openai.APIStatusError as exc:
            raise UpstreamError(exc.status_code, _body_preview(exc.response)) from exc
        except openai.APIError as exc:
            raise MalformedResponseError(f"AI provider returned an invalid reply: {exc}") from exc

        return _read_reply(raw, model)


def _read_reply(raw: Any, model: str) -> RawModelReply:
    content_type = str(raw.headers.get("content-type", ""))
    if "json" not in content_type.lower():
        raise MalformedResponseError(f"Unexpected content type '{content_type}'")
    try:
        completion = raw.parse()
    except (ValueError, openai.APIError) as exc:
        raise MalformedResponseError(f"Reply body is not a chat completion: {exc}") from exc

    choices = getattr(completion, "choices", None) or []
    if not choices:
        raise MalformedResponseError("AI returned no choices")
    message = getattr(choices[0], "message", None)
    content = getattr(message, "content", None)
    if not isinstance(content, str) or not content.strip():
        raise MalformedResponseError("AI returned empty response")

    reasoning = getattr(message, "reasoning_content", None)
    return RawModelReply(
        text=content,
        model=model,
        reasoning_text=reasoning if isinstance(reasoning, str) and reasoning else None,
    )


def _body_preview(response: httpx.Response) -> str:
    try:
        body = response.text
    except httpx.ResponseNotRead:
        return ""
    return body[:_BODY_PREVIEW_CHARS]
