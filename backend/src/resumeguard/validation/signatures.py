"""File magic numbers (signatures) for the supported kinds."""

from dataclasses import dataclass

from resumeguard.models.validation import SupportedKind

PDF_MIME_TYPE = "application/pdf"
DOCX_MIME_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
MSWORD_MIME_TYPE = "application/msword"

# ZIP local-file header, also the DOCX magic number
ZIP_LOCAL_HEADER = b"PK\x03\x04"


@dataclass(frozen=True)
class Signature:
    """Leading bytes and accepted declared MIME types of one kind."""

    magic: bytes
    mime_types: frozenset[str]


SIGNATURES: dict[SupportedKind, Signature] = {
    SupportedKind.PDF: Signature(
        magic=b"%PDF",
        mime_types=frozenset({PDF_MIME_TYPE}),
    ),
    SupportedKind.DOCX: Signature(
        magic=ZIP_LOCAL_HEADER,
        mime_types=frozenset({DOCX_MIME_TYPE, MSWORD_MIME_TYPE}),
    ),
}


def kind_for_mime_type(mime_type: str) -> SupportedKind | None:
    """Resolve a declared MIME type to its kind (exact match only)."""
    for kind, signature in SIGNATURES.items():
        if mime_type in signature.mime_types:
            return kind
    return None


def matches_signature(buffer: bytes, kind: SupportedKind) -> bool:
    """Check that the buffer starts with the magic number of ``kind``."""
    return buffer.startswith(SIGNATURES[kind].magic)
