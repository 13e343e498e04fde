import pymupdf

from fairreview.pdf.base import BasePdfExtractor
from fairreview.pdf.exceptions import PdfExtractionError


class PyMuPdfAdapter(BasePdfExtractor):
    """Reads policy PDFs page by page with PyMuPDF."""

    def extract(self, pdf_bytes: bytes) -> str:
        try:
            with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                pages = [page.get_text() for page in doc]
        except Exception as exc:
            raise PdfExtractionError(f"PyMuPDF could not read the PDF: {exc}") from exc
        return "\n".join(pages).strip()
