from typing import ClassVar

from fairreview.config.settings import Settings
from fairreview.llm.client_base import BaseChatClient
from fairreview.llm.example_client_adapter import ExampleClientAdapter
from fairreview.llm.invoker import ModelInvoker
from fairreview.llm.openai_client_adapter import OpenAIClientAdapter
from fairreview.llm.preference import ModelPreference


class ModelInvokerFactory:
    """Creates the model invoker for the configured provider."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "siliconflow": "https://api.siliconflow.cn/v1",
        "deepseek": "https://api.deepseek.com/v1",
        "openrouter": "https://openrouter.ai/api/v1",
        "ollama": "http://localhost:11434/v1",
    }

    @classmethod
    def create(
        cls,
        settings: Settings,
        preference: ModelPreference | None = None,
    ) -> ModelInvoker:
        """Create an invoker from application settings."""
        return ModelInvoker(
            client=cls.create_client(settings),
            candidates=settings.llm_model_candidates,
            preference=preference,
            temperature=settings.llm_temperature,
            top_p=settings.llm_top_p,
            max_tokens=settings.llm_max_tokens,
            retry_delay_seconds=settings.llm_retry_delay_seconds,
        )

    @classmethod
    def create_client(cls, settings: Settings) -> BaseChatClient:
        provider = settings.llm_provider.strip().lower()
        if provider == "example":
            return ExampleClientAdapter()
        return OpenAIClientAdapter(
            api_key=settings.llm_api_key,
            timeout_seconds=settings.llm_timeout_seconds,
            base_url=cls._resolve_base_url(provider, settings),
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        override = settings.llm_base_url.strip()
        if provider == "openai":
            return override or None
        if provider == "openai_compatible":
            if not override:
                raise ValueError(
                    "llm_base_url is required for llm_provider=openai_compatible"
                )
            return override
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return override or default_base_url
        supported = [
            "example",
            "openai",
            "openai_compatible",
            *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS),
        ]
        raise ValueError(f"Unknown LLM provider '{provider}'. Choose from: {supported}")
