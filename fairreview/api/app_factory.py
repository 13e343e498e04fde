from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, File, UploadFile
from fastapi.responses import JSONResponse, Response
from starlette.concurrency import run_in_threadpool

from fairreview import __version__
from fairreview.api.errors import register_error_handlers
from fairreview.api.schemas import ReportRequest, review_result_to_dict
from fairreview.config.settings import Settings
from fairreview.extraction.exceptions import EmptyUploadError
from fairreview.extraction.intake import UploadIntake
from fairreview.extraction.models import DocumentKind
from fairreview.logging.logger import Log
from fairreview.report.docx_report import DocxReportBuilder, report_filename
from fairreview.review.service import ReviewService, build_review_service


def create_app(
    *,
    review_service: ReviewService,
    intake: UploadIntake,
    settings: Settings,
    report_builder: DocxReportBuilder | None = None,
) -> FastAPI:
    report_builder = report_builder or DocxReportBuilder()

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        if settings.llm_probe_on_startup:
            model = await run_in_threadpool(review_service.probe_models)
            if model is None:
                Log.warning("Model probe failed; requests will use the first candidate")
        yield

    app = FastAPI(title="Fair Competition Review API", version=__version__, lifespan=lifespan)
    register_error_handlers(app)

    @app.get("/health")
    async def health_check():
        return {
            "status": "ok",
            "serverTime": datetime.now(timezone.utc).isoformat(),
            "env": settings.app_env,
            "apiKeyConfigured": bool(settings.llm_api_key),
            "preferredModel": review_service.invoker.preference.get(),
            "version": __version__,
        }

    @app.post("/api/review")
    async def review_document(file: UploadFile | None = File(default=None)):
        if file is None:
            raise EmptyUploadError("Request has no 'file' part")
        intake.check_size(file.size)
        data = await file.read()
        document = intake.accept(file.filename or "", file.content_type, data)
        Log.info(f"Received upload '{document.declared_name}'")
        result = await run_in_threadpool(review_service.review, document)
        return review_result_to_dict(result)

    @app.post("/api/generate-report")
    async def generate_report(request: ReportRequest):
        payloads = request.resolved_issues()
        if payloads is None:
            return JSONResponse(
                status_code=400,
                content={
                    "error": "missing_issues",
                    "message": "The request does not contain review results to export.",
                },
            )
        issues = [payload.to_issue(position) for position, payload in enumerate(payloads, start=1)]
        content = await run_in_threadpool(report_builder.build, request.file_name, issues)
        return Response(
            content=content,
            media_type=DocumentKind.WORD_PACKAGE.value,
            headers={"Content-Disposition": f'attachment; filename="{report_filename()}"'},
        )

    @app.post("/api/models/probe")
    async def probe_models():
        model = await run_in_threadpool(review_service.probe_models)
        return {"model": model}

    return app


def build_app(settings: Settings) -> FastAPI:
    """Build the application with the configured adapters."""
    return create_app(
        review_service=build_review_service(settings),
        intake=UploadIntake(settings.max_upload_bytes),
        settings=settings,
    )
