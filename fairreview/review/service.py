from fairreview.config.settings import Settings
from fairreview.extraction.extractor import TextExtractor
from fairreview.extraction.models import UploadedDocument
from fairreview.llm.factory import ModelInvokerFactory
from fairreview.llm.invoker import ModelInvoker
from fairreview.llm.preference import ModelPreference
from fairreview.logging.logger import Log, preview
from fairreview.pdf.factory import PdfExtractorFactory
from fairreview.review.models import ReviewResult
from fairreview.review.parser import ReviewParser
from fairreview.review.prompt import ReviewPromptBuilder


class ReviewService:
    """Orchestrates the review of one uploaded document.

    Pipeline: extract -> build prompt -> invoke model -> parse -> result.
    Extraction and invocation errors propagate to the caller unchanged.
    """

    def __init__(
        self,
        *,
        extractor: TextExtractor,
        prompt_builder: ReviewPromptBuilder,
        invoker: ModelInvoker,
        parser: ReviewParser,
    ) -> None:
        self._extractor = extractor
        self._prompt_builder = prompt_builder
        self._invoker = invoker
        self._parser = parser

    @property
    def invoker(self) -> ModelInvoker:
        return self._invoker

    def review(self, document: UploadedDocument) -> ReviewResult:
        Log.info(
            f"Reviewing '{document.declared_name}' "
            f"({document.declared_size} bytes, {document.kind.name})"
        )

        # Step 1: Extract text
        extracted = self._extractor.extract(document)
        Log.debug(f"Document preview: {preview(extracted.content)}")

        # Step 2: Build prompt
        prompt = self._prompt_builder.build(extracted.content)

        # Step 3: Invoke model
        reply = self._invoker.invoke(prompt)

        # Step 4: Parse issues
        parsed = self._parser.parse_reply(reply)
        Log.info(
            f"Review of '{document.declared_name}' finished: {len(parsed.issues)} issues"
            + (" (free-form fallback)" if parsed.used_fallback else "")
        )

        return ReviewResult(
            file_name=document.declared_name,
            file_size=document.declared_size,
            issues=parsed.issues,
            raw_response=reply.text,
            reasoning_trace=reply.reasoning_text,
            model=reply.model,
            unstructured=parsed.used_fallback,
        )

    def probe_models(self) -> str | None:
        return self._invoker.probe()


def build_review_service(
    settings: Settings,
    preference: ModelPreference | None = None,
) -> ReviewService:
    """Build a ReviewService with the configured adapters."""
    extractor = TextExtractor(PdfExtractorFactory.create(settings))
    invoker = ModelInvokerFactory.create(settings, preference=preference)
    return ReviewService(
        extractor=extractor,
        prompt_builder=ReviewPromptBuilder(),
        invoker=invoker,
        parser=ReviewParser(),
    )
