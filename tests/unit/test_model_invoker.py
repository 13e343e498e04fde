from typing import Any
from unittest.mock import MagicMock

import pytest

from fairreview.llm.exceptions import (
    MalformedResponseError,
    ModelAuthError,
    ModelNetworkError,
    ModelRateLimitError,
    ModelTimeoutError,
    UpstreamError,
)
from fairreview.llm.invoker import PROBE_MAX_TOKENS, ModelInvoker
from fairreview.llm.models import RawModelReply
from fairreview.llm.preference import ModelPreference
from fairreview.llm.retry import retry_once
from fairreview.review.models import ReviewPrompt

_PROMPT = ReviewPrompt(system_instruction="rubric", user_query="document")


def _make_invoker(
    client: MagicMock,
    candidates: tuple[str, ...] = ("model-a", "model-b"),
    **kwargs: Any,
) -> tuple[ModelInvoker, MagicMock]:
    sleep = MagicMock()
    invoker = ModelInvoker(client=client, candidates=candidates, sleep=sleep, **kwargs)
    return invoker, sleep


class TestRetryOnce:
    def test_returns_first_success_without_sleeping(self) -> None:
        sleep = MagicMock()
        assert retry_once(lambda: 1, retry_on=(ValueError,), delay_seconds=2, sleep=sleep) == 1
        sleep.assert_not_called()

    def test_retries_once_after_delay(self) -> None:
        call = MagicMock(side_effect=[ValueError("flaky"), "ok"])
        sleep = MagicMock()
        assert retry_once(call, retry_on=(ValueError,), delay_seconds=2, sleep=sleep) == "ok"
        sleep.assert_called_once_with(2)
        assert call.call_count == 2

    def test_second_failure_propagates(self) -> None:
        call = MagicMock(side_effect=[ValueError("one"), ValueError("two")])
        with pytest.raises(ValueError, match="two"):
            retry_once(call, retry_on=(ValueError,), delay_seconds=0, sleep=MagicMock())
        assert call.call_count == 2

    def test_other_errors_are_not_retried(self) -> None:
        call = MagicMock(side_effect=KeyError("nope"))
        sleep = MagicMock()
        with pytest.raises(KeyError):
            retry_once(call, retry_on=(ValueError,), delay_seconds=2, sleep=sleep)
        assert call.call_count == 1
        sleep.assert_not_called()


class TestModelInvoker:
    def test_invokes_first_candidate_without_preference(self) -> None:
        client = MagicMock()
        client.create_chat_completion.return_value = RawModelReply(text="reply", model="model-a")
        invoker, _ = _make_invoker(client)
        reply = invoker.invoke(_PROMPT)
        assert reply.text == "reply"
        kwargs = client.create_chat_completion.call_args.kwargs
        assert kwargs["model"] == "model-a"
        assert kwargs["system_prompt"] == "rubric"
        assert kwargs["user_prompt"] == "document"
        assert kwargs["temperature"] == 0.5
        assert kwargs["top_p"] == 0.95
        assert kwargs["max_tokens"] == 4000

    def test_records_preference_on_success(self) -> None:
        client = MagicMock()
        client.create_chat_completion.return_value = RawModelReply(text="reply")
        invoker, _ = _make_invoker(client)
        invoker.invoke(_PROMPT)
        assert invoker.preference.get() == "model-a"

    def test_uses_preferred_model(self) -> None:
        client = MagicMock()
        client.create_chat_completion.return_value = RawModelReply(text="reply")
        invoker, _ = _make_invoker(client, preference=ModelPreference("model-b"))
        invoker.invoke(_PROMPT)
        assert client.create_chat_completion.call_args.kwargs["model"] == "model-b"

    def test_explicit_candidates_override_configured_ones(self) -> None:
        client = MagicMock()
        client.create_chat_completion.return_value = RawModelReply(text="reply")
        invoker, _ = _make_invoker(client)
        invoker.invoke(_PROMPT, candidates=["model-z"])
        assert client.create_chat_completion.call_args.kwargs["model"] == "model-z"

    def test_retries_once_on_network_error(self) -> None:
        client = MagicMock()
        client.create_chat_completion.side_effect = [
            ModelNetworkError("reset"),
            RawModelReply(text="reply"),
        ]
        invoker, sleep = _make_invoker(client, retry_delay_seconds=2.0)
        assert invoker.invoke(_PROMPT).text == "reply"
        assert client.create_chat_completion.call_count == 2
        sleep.assert_called_once_with(2.0)

    def test_two_network_errors_propagate(self) -> None:
        client = MagicMock()
        client.create_chat_completion.side_effect = [
            ModelNetworkError("reset"),
            ModelNetworkError("reset again"),
        ]
        invoker, _ = _make_invoker(client)
        with pytest.raises(ModelNetworkError):
            invoker.invoke(_PROMPT)
        assert client.create_chat_completion.call_count == 2
        assert invoker.preference.get() is None

    def test_two_timeouts_propagate(self) -> None:
        client = MagicMock()
        client.create_chat_completion.side_effect = ModelTimeoutError("slow")
        invoker, _ = _make_invoker(client)
        with pytest.raises(ModelTimeoutError):
            invoker.invoke(_PROMPT)
        assert client.create_chat_completion.call_count == 2

    @pytest.mark.parametrize(
        "error",
        [
            ModelAuthError("401"),
            ModelRateLimitError("429"),
            UpstreamError(500, "boom"),
            MalformedResponseError("empty"),
        ],
    )
    def test_non_transport_errors_are_not_retried(self, error: Exception) -> None:
        client = MagicMock()
        client.create_chat_completion.side_effect = error
        invoker, sleep = _make_invoker(client)
        with pytest.raises(type(error)):
            invoker.invoke(_PROMPT)
        assert client.create_chat_completion.call_count == 1
        sleep.assert_not_called()

    def test_clamps_sampling_parameters(self) -> None:
        client = MagicMock()
        client.create_chat_completion.return_value = RawModelReply(text="reply")
        invoker, _ = _make_invoker(client, temperature=3.0, top_p=0.0)
        invoker.invoke(_PROMPT)
        kwargs = client.create_chat_completion.call_args.kwargs
        assert kwargs["temperature"] == 1.0
        assert kwargs["top_p"] == 0.01

    def test_select_model_without_candidates_raises(self) -> None:
        invoker, _ = _make_invoker(MagicMock(), candidates=())
        with pytest.raises(ValueError, match="No model candidates"):
            invoker.select_model()


class TestModelProbe:
    def test_first_answering_candidate_becomes_preferred(self) -> None:
        client = MagicMock()
        client.create_chat_completion.side_effect = [
            UpstreamError(404, "model not found"),
            RawModelReply(text="API connection OK"),
        ]
        invoker, _ = _make_invoker(client)
        assert invoker.probe() == "model-b"
        assert invoker.preference.get() == "model-b"
        assert client.create_chat_completion.call_args.kwargs["max_tokens"] == PROBE_MAX_TOKENS

    def test_returns_none_when_no_candidate_answers(self) -> None:
        client = MagicMock()
        client.create_chat_completion.side_effect = ModelAuthError("401")
        invoker, _ = _make_invoker(client)
        assert invoker.probe() is None
        assert invoker.preference.get() is None
        assert client.create_chat_completion.call_count == 2

    def test_probe_does_not_retry(self) -> None:
        client = MagicMock()
        client.create_chat_completion.side_effect = [
            ModelNetworkError("reset"),
            RawModelReply(text="ok"),
        ]
        invoker, sleep = _make_invoker(client)
        assert invoker.probe() == "model-b"
        sleep.assert_not_called()


class TestModelPreference:
    def test_starts_empty(self) -> None:
        assert ModelPreference().get() is None

    def test_record_and_reset(self) -> None:
        preference = ModelPreference()
        preference.record("model-a")
        assert preference.get() == "model-a"
        preference.reset()
        assert preference.get() is None
