from fairreview.extraction.exceptions import TextExtractionError


class PdfExtractionError(TextExtractionError):
    """Raised when a PDF stream cannot be read."""
