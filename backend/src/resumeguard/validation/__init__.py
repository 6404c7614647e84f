"""Upload validation for Resume Guard."""

from resumeguard.validation.file_validator import FileValidator
from resumeguard.validation.sanitizer import sanitize_filename, validate_file_extension
from resumeguard.validation.scanner import scan_for_suspicious_content
from resumeguard.validation.signatures import SIGNATURES, Signature, kind_for_mime_type

__all__ = [
    "FileValidator",
    "SIGNATURES",
    "Signature",
    "kind_for_mime_type",
    "sanitize_filename",
    "scan_for_suspicious_content",
    "validate_file_extension",
]
