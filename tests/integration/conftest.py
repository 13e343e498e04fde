from unittest.mock import MagicMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from fairreview.api.app_factory import create_app
from fairreview.config.settings import Settings
from fairreview.extraction.extractor import TextExtractor
from fairreview.extraction.intake import UploadIntake
from fairreview.llm.invoker import ModelInvoker
from fairreview.pdf.pdfplumber_adapter import PdfPlumberAdapter
from fairreview.review.parser import ReviewParser
from fairreview.review.prompt import ReviewPromptBuilder
from fairreview.review.service import ReviewService, build_review_service


def _test_settings(**overrides: object) -> Settings:
    values: dict[str, object] = {
        "app_env": "test",
        "llm_provider": "example",
        "llm_api_key": "",
        "llm_model_candidates": ["model-a", "model-b"],
        "llm_retry_delay_seconds": 0.0,
        "max_upload_bytes": 64 * 1024,
    }
    values.update(overrides)
    return Settings(**values)  # type: ignore[arg-type]


def make_app(settings: Settings, review_service: ReviewService | None = None) -> FastAPI:
    return create_app(
        review_service=review_service or build_review_service(settings),
        intake=UploadIntake(settings.max_upload_bytes),
        settings=settings,
    )


def make_service_with_client(chat_client: MagicMock) -> ReviewService:
    """Review service whose model calls go to ``chat_client``."""
    return ReviewService(
        extractor=TextExtractor(PdfPlumberAdapter()),
        prompt_builder=ReviewPromptBuilder(),
        invoker=ModelInvoker(
            client=chat_client,
            candidates=["model-a"],
            sleep=MagicMock(),
        ),
        parser=ReviewParser(),
    )


@pytest.fixture()
def test_settings() -> Settings:
    return _test_settings()


@pytest.fixture()
def client(test_settings: Settings) -> TestClient:
    return TestClient(make_app(test_settings))


@pytest.fixture()
def settings_factory():  # type: ignore[no-untyped-def]
    return _test_settings


@pytest.fixture()
def app_factory():  # type: ignore[no-untyped-def]
    return make_app


@pytest.fixture()
def service_factory():  # type: ignore[no-untyped-def]
    return make_service_with_client
