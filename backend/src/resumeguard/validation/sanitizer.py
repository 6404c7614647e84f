"""Filename sanitization for untrusted uploads."""

import re
from pathlib import PurePosixPath

from resumeguard.validation.signatures import DOCX_MIME_TYPE, MSWORD_MIME_TYPE, PDF_MIME_TYPE

MAX_FILENAME_LENGTH = 255

UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]")

EXPECTED_EXTENSIONS = {
    PDF_MIME_TYPE: ".pdf",
    DOCX_MIME_TYPE: ".docx",
    MSWORD_MIME_TYPE: ".doc",
}


def sanitize_filename(filename: str) -> str:
    """
    Sanitize filename to prevent path traversal attacks.

    Keeps only the final path segment, replaces everything outside
    ``[A-Za-z0-9._-]`` with ``_`` and limits the result to 255 characters.
    Applying it twice gives the same result as applying it once.

    Args:
        filename: Original filename

    Returns:
        Sanitized filename
    """
    # Remove path components (keep only basename)
    basename = PurePosixPath(filename).name

    return UNSAFE_CHARS.sub("_", basename)[:MAX_FILENAME_LENGTH]


def validate_file_extension(filename: str, mime_type: str) -> bool:
    """Check that the filename extension agrees with the declared MIME type."""
    expected = EXPECTED_EXTENSIONS.get(mime_type)
    if expected is None:
        return False
    return PurePosixPath(filename).suffix.lower() == expected
