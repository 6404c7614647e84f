"""File validation service for untrusted résumé uploads."""

import math

from resumeguard.models.validation import MIB, SupportedKind, ValidationOptions, ValidationResult
from resumeguard.validation.sanitizer import sanitize_filename
from resumeguard.validation.scanner import scan_for_suspicious_content
from resumeguard.validation.signatures import (
    DOCX_MIME_TYPE,
    MSWORD_MIME_TYPE,
    PDF_MIME_TYPE,
    kind_for_mime_type,
    matches_signature,
)
from resumeguard.validation.structure import check_docx_structure, check_pdf_structure


class FileValidator:
    """Validate uploads for size, type, signature and structure.

    Checks run in a fixed order and the first failing one decides the
    verdict. Cheap checks (size, MIME, magic number) come before the content
    scan and the format-specific inspection.
    """

    # Allowed declared MIME types
    ALLOWED_MIME_TYPES = {PDF_MIME_TYPE, DOCX_MIME_TYPE, MSWORD_MIME_TYPE}

    # ZIP-based uploads get a tighter cap: 2MB
    DOCX_MAX_FILE_SIZE = 2 * MIB

    @staticmethod
    def effective_max_size(mime_type: str, max_size: int) -> int:
        """Size cap for a declared MIME type, never looser than ``max_size``."""
        if mime_type in (DOCX_MIME_TYPE, MSWORD_MIME_TYPE):
            return min(max_size, FileValidator.DOCX_MAX_FILE_SIZE)
        return max_size

    @staticmethod
    def validate_size(size: int, max_size: int) -> str | None:
        """Return a rejection reason for an empty or oversized file."""
        if size == 0:
            return "File is empty"

        if size > max_size:
            # Half-up rounding to whole megabytes
            max_mb = math.floor(max_size / MIB + 0.5)
            return f"File too large. Maximum size is {max_mb}MB"

        return None

    @staticmethod
    def validate(
        buffer: bytes,
        mime_type: str,
        filename: str,
        options: ValidationOptions | None = None,
    ) -> ValidationResult:
        """
        Validate an uploaded file.

        Args:
            buffer: Raw file content
            mime_type: Client-declared MIME type
            filename: Client-declared filename
            options: Validation policy (defaults to 10MB cap, strict signatures)

        Returns:
            Accepting result with optional warnings, or rejecting result
            with the reason of the first failed check
        """
        options = options or ValidationOptions()
        warnings: list[str] = []

        # 1. File size (stricter for DOCX)
        max_size = FileValidator.effective_max_size(mime_type, options.max_size)
        size_error = FileValidator.validate_size(len(buffer), max_size)
        if size_error:
            return ValidationResult.reject(size_error)

        # 2. Declared MIME type must be supported
        kind = kind_for_mime_type(mime_type)
        if kind is None:
            return ValidationResult.reject(
                "Unsupported file format. Only PDF and DOCX files are allowed"
            )

        # 3. Magic number must match the declared type
        if not matches_signature(buffer, kind):
            if options.strict_validation:
                return ValidationResult.reject(
                    "File signature does not match extension. File may be corrupted or malicious"
                )
            warnings.append("File signature mismatch - proceeding with caution")

        # 4. Filename
        if sanitize_filename(filename) != filename:
            warnings.append("Filename was sanitized to remove potentially unsafe characters")

        # 5. Embedded script/markup
        warnings.extend(scan_for_suspicious_content(buffer))

        # 6. Format-specific structure
        if kind is SupportedKind.PDF:
            error, structure_warnings = check_pdf_structure(buffer)
        else:
            error, structure_warnings = check_docx_structure(buffer)
        if error:
            return ValidationResult.reject(error)
        warnings.extend(structure_warnings)

        return ValidationResult.accept(warnings)
