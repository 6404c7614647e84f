"""Format-specific structural checks run after the magic-number gate.

Each check returns ``(error, warnings)``: a non-None ``error`` is a rejection
reason, otherwise ``warnings`` lists soft issues to accumulate.

Known limitations of the DOCX checks:
- They are substring tests over the raw ZIP byte stream, not a ZIP parse.
  A crafted archive can carry fake marker names, and a marker that appears
  only inside compressed data is still counted.
- Bomb detection counts local-file headers as a proxy for entry count; it
  does not look at compression ratios. Header bytes inside stored entry data
  also count.
A streaming ZIP reader can replace these heuristics without changing
``FileValidator.validate``.
"""

from resumeguard.validation.signatures import ZIP_LOCAL_HEADER

PDF_HEADER = b"%PDF-"
PDF_EOF_MARKER = b"%%EOF"
PDF_TRAILER_WINDOW = 1024

DOCX_CONTENT_TYPES_MARKER = b"[Content_Types].xml"
DOCX_DOCUMENT_MARKER = b"word/document.xml"
DOCX_MACRO_MARKERS = (b"vbaProject.bin", b"macroEnabled")

ENTRY_COUNT_WARNING_THRESHOLD = 100
ZIP_BOMB_MAX_BUFFER_SIZE = 50_000
ZIP_BOMB_ENTRY_THRESHOLD = 50

StructureCheck = tuple[str | None, list[str]]


def check_pdf_structure(buffer: bytes) -> StructureCheck:
    """Require the ``%PDF-`` header and warn when the trailer lacks ``%%EOF``."""
    if not buffer.startswith(PDF_HEADER):
        return "Invalid PDF file format", []

    # Some generators omit a clean trailer, so this is only a warning
    if PDF_EOF_MARKER not in buffer[-PDF_TRAILER_WINDOW:]:
        return None, ["PDF may be truncated or corrupted"]

    return None, []


def count_zip_entries(buffer: bytes) -> int:
    """Estimate the number of archive entries from local-file headers."""
    return buffer.count(ZIP_LOCAL_HEADER)


def check_docx_structure(buffer: bytes) -> StructureCheck:
    """Check OOXML package markers, reject macros and likely ZIP bombs."""
    # DOCX is a ZIP file - verify ZIP structure
    if not buffer.startswith(ZIP_LOCAL_HEADER):
        return "Invalid DOCX file format", []

    # The markers are ASCII, so a byte search equals a Latin-1 string search
    if DOCX_CONTENT_TYPES_MARKER not in buffer:
        return "Invalid DOCX structure - missing Content Types", []

    if DOCX_DOCUMENT_MARKER not in buffer:
        return "Invalid DOCX structure - missing document content", []

    # Macro-bearing documents are refused whatever the strictness setting
    if any(marker in buffer for marker in DOCX_MACRO_MARKERS):
        return "Macro-enabled documents are not supported for security reasons", []

    warnings: list[str] = []
    entry_count = count_zip_entries(buffer)
    if entry_count > ENTRY_COUNT_WARNING_THRESHOLD:
        warnings.append("Document has unusually high number of entries")

    # Small container with implausibly many entries
    if len(buffer) < ZIP_BOMB_MAX_BUFFER_SIZE and entry_count > ZIP_BOMB_ENTRY_THRESHOLD:
        return "File structure suggests potential ZIP bomb", []

    return None, warnings
