from collections.abc import Callable

from fairreview.extraction.docx_reader import extract_docx_text
from fairreview.extraction.exceptions import TextExtractionError, UnsupportedFormatError
from fairreview.extraction.models import DocumentKind, ExtractedText, UploadedDocument
from fairreview.logging.logger import Log
from fairreview.pdf.base import BasePdfExtractor


def decode_plain_text(data: bytes) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise TextExtractionError(f"Text file is not valid UTF-8: {exc}") from exc


class TextExtractor:
    """Turns an uploaded document into one logical text string."""

    def __init__(self, pdf_extractor: BasePdfExtractor) -> None:
        self._decoders: dict[DocumentKind, Callable[[bytes], str]] = {
            DocumentKind.PLAIN_TEXT: decode_plain_text,
            DocumentKind.WORD_PACKAGE: extract_docx_text,
            DocumentKind.PDF: pdf_extractor.extract,
        }

    def extract(self, document: UploadedDocument) -> ExtractedText:
        """Decode the whole document; no chunking is applied.

        Raises:
            UnsupportedFormatError: if the document kind has no decoder.
            TextExtractionError: if the decoder rejects the content.
        """
        decoder = self._decoders.get(document.kind)
        if decoder is None:
            raise UnsupportedFormatError(
                f"Unsupported document kind for '{document.declared_name}': {document.kind!r}"
            )
        content = decoder(document.raw_bytes)
        Log.info(
            f"Extracted {len(content)} chars from '{document.declared_name}' "
            f"({document.kind.name})"
        )
        return ExtractedText(content=content, source_length=len(document.raw_bytes))
