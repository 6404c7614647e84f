"""Timeout-bounded text extraction."""

import asyncio
import logging
from collections.abc import Callable, Mapping

from resumeguard.extraction.extractors import extract_docx_text, extract_pdf_text
from resumeguard.models.extraction import ExtractionOutcome
from resumeguard.models.validation import SupportedKind

logger = logging.getLogger(__name__)

DEFAULT_EXTRACTION_TIMEOUT_SECONDS = 10.0

Extractor = Callable[[bytes], str]

DEFAULT_EXTRACTORS: dict[SupportedKind, Extractor] = {
    SupportedKind.PDF: extract_pdf_text,
    SupportedKind.DOCX: extract_docx_text,
}


def _run_extractor(extractor: Extractor, content: bytes) -> tuple[str | None, Exception | None]:
    # Errors are caught in the worker so only the wait itself can time out
    try:
        return extractor(content), None
    except Exception as e:
        return None, e


class ExtractionAdapter:
    """
    Runs the extraction routine for a kind under a hard timeout.

    A file can pass validation and still hang or crash the extraction
    library. The routine runs in a worker thread; on timeout the adapter
    stops waiting and reports a timeout, while the thread itself is left to
    finish in the background. Errors are returned as ``ExtractionOutcome``
    values and never raised.
    """

    def __init__(
        self,
        timeout_seconds: float = DEFAULT_EXTRACTION_TIMEOUT_SECONDS,
        extractors: Mapping[SupportedKind, Extractor] | None = None,
    ):
        """
        Initialize extraction adapter.

        Args:
            timeout_seconds: Upper bound on a single extraction.
            extractors: Routine per kind (defaults to pypdf / python-docx).
        """
        self.timeout_seconds = timeout_seconds
        self.extractors = dict(DEFAULT_EXTRACTORS)
        if extractors:
            self.extractors.update(extractors)

    @classmethod
    def from_settings(cls, settings) -> "ExtractionAdapter":
        return cls(timeout_seconds=settings.extraction_timeout_seconds)

    async def extract(self, content: bytes, kind: SupportedKind) -> ExtractionOutcome:
        """
        Extract plain text from a validated file.

        Args:
            content: File content that passed validation.
            kind: Kind the file was validated as.

        Returns:
            Outcome with the text, or a timeout / parse-error failure.
        """
        extractor = self.extractors[kind]

        try:
            text, error = await asyncio.wait_for(
                asyncio.to_thread(_run_extractor, extractor, content),
                timeout=self.timeout_seconds,
            )
        except asyncio.TimeoutError:
            logger.warning(
                f"{kind.value} extraction timed out after {self.timeout_seconds}s "
                f"({len(content)} bytes)"
            )
            return ExtractionOutcome.timed_out(self.timeout_seconds)

        if error is not None:
            logger.warning(f"{kind.value} extraction failed: {type(error).__name__}: {error}")
            return ExtractionOutcome.parse_error(f"{type(error).__name__}: {error}")

        return ExtractionOutcome.success(text)
