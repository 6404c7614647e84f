"""Service that turns an uploaded résumé file into plain text."""

import logging
from dataclasses import dataclass, field

from resumeguard.extraction.adapter import ExtractionAdapter
from resumeguard.models.validation import SupportedKind, ValidationOptions
from resumeguard.validation.file_validator import FileValidator
from resumeguard.validation.sanitizer import sanitize_filename, validate_file_extension
from resumeguard.validation.signatures import kind_for_mime_type

logger = logging.getLogger(__name__)


class IntakeError(Exception):
    """Upload refused; ``message`` is safe to show to the uploader."""

    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


@dataclass
class IntakeResult:
    """Accepted upload with its extracted text."""

    kind: SupportedKind
    filename: str
    text: str
    warnings: list[str] = field(default_factory=list)


class IntakeService:
    """Service for validating uploads and extracting their text."""

    def __init__(self, options: ValidationOptions, extraction_adapter: ExtractionAdapter):
        self.options = options
        self.extraction_adapter = extraction_adapter

    async def process(self, content: bytes, mime_type: str, filename: str) -> IntakeResult:
        """
        Validate a file, then extract its text.

        Args:
            content: File content as bytes.
            mime_type: Client-declared MIME type.
            filename: Client-declared filename.

        Returns:
            IntakeResult with the sanitized filename and extracted text.

        Raises:
            IntakeError: If validation rejects the file or extraction fails.
        """
        safe_name = sanitize_filename(filename)

        result = FileValidator.validate(content, mime_type, filename, self.options)
        if not result.valid:
            logger.info(f"Rejected upload {safe_name} ({mime_type}): {result.error}")
            raise IntakeError(result.error)

        warnings = result.warnings or []
        for warning in warnings:
            logger.warning(f"Upload {safe_name}: {warning}")

        if not validate_file_extension(filename, mime_type):
            logger.warning(f"Upload {safe_name}: extension does not match {mime_type}")

        # validate() only accepts MIME types that resolve to a kind
        kind = kind_for_mime_type(mime_type)

        outcome = await self.extraction_adapter.extract(content, kind)
        if not outcome.ok:
            logger.warning(f"Extraction failed for {safe_name}: {outcome.detail}")
            raise IntakeError(outcome.failure.user_message)

        logger.info(
            f"Accepted upload {safe_name}: {kind.value}, {len(content)} bytes, "
            f"{len(outcome.text)} chars extracted, {len(warnings)} warnings"
        )
        return IntakeResult(kind=kind, filename=safe_name, text=outcome.text, warnings=warnings)
