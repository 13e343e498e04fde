from pathlib import PurePath

from fairreview.extraction.exceptions import (
    EmptyUploadError,
    OversizeInputError,
    UnsupportedFormatError,
)
from fairreview.extraction.models import DocumentKind, UploadedDocument

_GENERIC_CONTENT_TYPES = frozenset({"", "application/octet-stream"})

_EXTENSION_KINDS: dict[str, DocumentKind] = {
    ".txt": DocumentKind.PLAIN_TEXT,
    ".docx": DocumentKind.WORD_PACKAGE,
    ".pdf": DocumentKind.PDF,
}


def resolve_kind(file_name: str, content_type: str | None) -> DocumentKind:
    """Map a declared MIME type (or, for generic types, the extension) to a kind.

    Raises:
        UnsupportedFormatError: for anything other than text, DOCX or PDF.
    """
    mime = (content_type or "").split(";", 1)[0].strip().lower()
    if mime not in _GENERIC_CONTENT_TYPES:
        try:
            return DocumentKind(mime)
        except ValueError:
            raise UnsupportedFormatError(f"Unsupported content type '{mime}'") from None
    suffix = PurePath(file_name).suffix.lower()
    kind = _EXTENSION_KINDS.get(suffix)
    if kind is None:
        raise UnsupportedFormatError(f"Unsupported file extension '{suffix or file_name}'")
    return kind


class UploadIntake:
    """Validates an upload and wraps it as an UploadedDocument."""

    def __init__(self, max_upload_bytes: int) -> None:
        self._max_upload_bytes = max_upload_bytes

    @property
    def max_upload_bytes(self) -> int:
        return self._max_upload_bytes

    def check_size(self, size: int | None) -> None:
        """Reject a declared size above the ceiling before the body is decoded."""
        if size is not None and size > self._max_upload_bytes:
            raise OversizeInputError(size, self._max_upload_bytes)

    def accept(
        self,
        file_name: str,
        content_type: str | None,
        data: bytes,
    ) -> UploadedDocument:
        """Build the document for one review request.

        Raises:
            EmptyUploadError: if no bytes were uploaded.
            OversizeInputError: if the upload exceeds ``max_upload_bytes``.
            UnsupportedFormatError: if the format is not accepted.
        """
        if not data:
            raise EmptyUploadError("No file content was uploaded")
        self.check_size(len(data))
        kind = resolve_kind(file_name, content_type)
        return UploadedDocument(
            raw_bytes=data,
            declared_name=file_name,
            declared_size=len(data),
            kind=kind,
        )
