from abc import ABC, abstractmethod


class BasePdfExtractor(ABC):
    """Contract for PDF text extraction adapters."""

    @abstractmethod
    def extract(self, pdf_bytes: bytes) -> str:
        """Extract the text of every page, in page order.

        Args:
            pdf_bytes: Raw PDF file content from the upload.

        Returns:
            Page texts joined by newlines. Layout and columns are not preserved.

        Raises:
            PdfExtractionError: if the stream cannot be decoded.
        """
