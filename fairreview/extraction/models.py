from dataclasses import dataclass
from enum import Enum


class DocumentKind(str, Enum):
    """Document formats accepted for review."""

    PLAIN_TEXT = "text/plain"
    WORD_PACKAGE = (
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
    )
    PDF = "application/pdf"


@dataclass(frozen=True)
class UploadedDocument:
    """A single uploaded file, as received at request ingress."""

    raw_bytes: bytes
    declared_name: str
    declared_size: int
    kind: DocumentKind


@dataclass(frozen=True)
class ExtractedText:
    """Text pulled from an uploaded document."""

    content: str
    source_length: int
