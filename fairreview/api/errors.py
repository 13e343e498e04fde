from dataclasses import dataclass

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from fairreview.extraction.exceptions import (
    EmptyUploadError,
    ExtractionError,
    OversizeInputError,
    TextExtractionError,
    UnsupportedFormatError,
)
from fairreview.llm.exceptions import (
    MalformedResponseError,
    ModelAuthError,
    ModelInvocationError,
    ModelNetworkError,
    ModelRateLimitError,
    ModelTimeoutError,
    UpstreamError,
)
from fairreview.logging.logger import Log


@dataclass(frozen=True)
class ErrorResponse:
    status_code: int
    code: str
    message: str


ERROR_RESPONSES: dict[type[Exception], ErrorResponse] = {
    EmptyUploadError: ErrorResponse(400, "no_file", "No file was uploaded. Choose a document to review."),
    UnsupportedFormatError: ErrorResponse(
        415,
        "unsupported_format",
        "This file type is not supported. Upload a .txt, .docx or .pdf document.",
    ),
    OversizeInputError: ErrorResponse(
        413,
        "oversize_input",
        "The file is larger than the upload limit. Split the document into smaller "
        "files and review them separately.",
    ),
    TextExtractionError: ErrorResponse(
        422,
        "extraction_failed",
        "The document could not be read. Check that the file is not damaged or "
        "password-protected, or save it again and retry.",
    ),
    ModelTimeoutError: ErrorResponse(
        504,
        "model_timeout",
        "The review model took too long to answer. Try again, or review a shorter document.",
    ),
    ModelNetworkError: ErrorResponse(
        502,
        "model_unreachable",
        "The review model could not be reached. Check the server's network connection "
        "and try again.",
    ),
    ModelAuthError: ErrorResponse(
        502,
        "model_auth_failed",
        "The review model rejected the configured API key. Ask the administrator to "
        "check the key.",
    ),
    ModelRateLimitError: ErrorResponse(
        429,
        "model_rate_limited",
        "The review model is handling too many requests. Wait a minute and try again.",
    ),
    MalformedResponseError: ErrorResponse(
        502,
        "model_malformed_response",
        "The review model returned an unreadable answer. Try again.",
    ),
    UpstreamError: ErrorResponse(
        502,
        "model_upstream_error",
        "The review model reported an error. Try again later.",
    ),
}

_FALLBACK_RESPONSE = ErrorResponse(500, "internal_error", "The review could not be completed.")


def resolve_error_response(exc: Exception) -> ErrorResponse:
    for cls in type(exc).__mro__:
        response = ERROR_RESPONSES.get(cls)
        if response is not None:
            return response
    return _FALLBACK_RESPONSE


def error_body(response: ErrorResponse) -> dict[str, str]:
    return {"error": response.code, "message": response.message}


async def _handle_review_error(request: Request, exc: Exception) -> JSONResponse:
    response = resolve_error_response(exc)
    Log.error(f"{request.method} {request.url.path} failed ({response.code}): {exc}")
    return JSONResponse(status_code=response.status_code, content=error_body(response))


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ExtractionError, _handle_review_error)
    app.add_exception_handler(ModelInvocationError, _handle_review_error)
