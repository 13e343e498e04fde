from typing import Annotated

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

DEFAULT_MODEL_CANDIDATES = [
    "Pro/deepseek-ai/DeepSeek-R1",
    "Pro/Qwen/Qwen2.5-7B-Instruct",
    "Pro/Qwen/Qwen2.5-32B-Instruct",
    "Pro/Qwen/Qwen2.5-72B-Instruct",
]


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    host: str = "0.0.0.0"
    port: int = 3000

    max_upload_bytes: int = Field(default=10 * 1024 * 1024, gt=0)

    pdf_engine: str = "pdfplumber"

    llm_provider: str = "siliconflow"
    llm_api_key: str = Field(
        default="",
        validation_alias=AliasChoices("llm_api_key", "siliconflow_api_key"),
    )
    llm_base_url: str = ""
    llm_model_candidates: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: list(DEFAULT_MODEL_CANDIDATES)
    )
    llm_timeout_seconds: float = Field(default=180.0, gt=0)
    llm_retry_delay_seconds: float = Field(default=2.0, ge=0)
    llm_temperature: float = 0.5
    llm_top_p: float = 0.95
    llm_max_tokens: int = Field(default=4000, gt=0)
    llm_probe_on_startup: bool = False

    @field_validator("llm_model_candidates", mode="before")
    @classmethod
    def _split_candidates(cls, value: object) -> object:
        if isinstance(value, str):
            return [item.strip() for item in value.split(",") if item.strip()]
        return value

    @field_validator("llm_model_candidates")
    @classmethod
    def _require_candidates(cls, value: list[str]) -> list[str]:
        if not value:
            raise ValueError("llm_model_candidates must name at least one model")
        return value
