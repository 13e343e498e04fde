class ExtractionError(Exception):
    """Base exception for upload intake and text extraction failures."""


class EmptyUploadError(ExtractionError):
    """Raised when a review request carries no file content."""


class UnsupportedFormatError(ExtractionError):
    """Raised when a document is not plain text, DOCX or PDF."""


class OversizeInputError(ExtractionError):
    """Raised when an upload exceeds the configured byte ceiling."""

    def __init__(self, size: int, limit: int) -> None:
        super().__init__(f"Upload of {size} bytes exceeds the {limit} byte limit")
        self.size = size
        self.limit = limit


class TextExtractionError(ExtractionError):
    """Raised when a decoder fails on a supported document."""
