"""Tests for the intake service."""

import logging

import pytest

from resumeguard.extraction.adapter import ExtractionAdapter
from resumeguard.models.validation import SupportedKind, ValidationOptions
from resumeguard.services.intake_service import IntakeError, IntakeService
from resumeguard.validation.signatures import DOCX_MIME_TYPE, PDF_MIME_TYPE


@pytest.fixture
def service():
    return IntakeService(options=ValidationOptions(), extraction_adapter=ExtractionAdapter())


class TestIntakeService:
    """Tests for IntakeService.process."""

    async def test_accepts_pdf(self, service, pdf_bytes):
        result = await service.process(pdf_bytes, PDF_MIME_TYPE, "resume.pdf")
        assert result.kind is SupportedKind.PDF
        assert result.filename == "resume.pdf"
        assert "Jane Doe" in result.text
        assert result.warnings == []

    async def test_accepts_docx(self, service, make_real_docx):
        buffer = make_real_docx(["Jane Doe", "Backend Engineer"])
        result = await service.process(buffer, DOCX_MIME_TYPE, "cv.docx")
        assert result.kind is SupportedKind.DOCX
        assert result.text == "Jane Doe\n\nBackend Engineer"

    async def test_returns_sanitized_filename_and_warnings(self, service, pdf_bytes):
        result = await service.process(pdf_bytes, PDF_MIME_TYPE, "../My CV.pdf")
        assert result.filename == "My_CV.pdf"
        assert result.warnings == [
            "Filename was sanitized to remove potentially unsafe characters"
        ]

    async def test_rejection_raises_with_reason(self, service):
        with pytest.raises(IntakeError) as exc_info:
            await service.process(b"", PDF_MIME_TYPE, "resume.pdf")
        assert exc_info.value.message == "File is empty"
        assert exc_info.value.status_code == 400

    async def test_rejection_skips_extraction(self, pdf_bytes):
        calls = []
        adapter = ExtractionAdapter(extractors={SupportedKind.PDF: calls.append})
        service = IntakeService(options=ValidationOptions(), extraction_adapter=adapter)

        with pytest.raises(IntakeError):
            await service.process(pdf_bytes, "image/png", "resume.png")
        assert calls == []

    async def test_extraction_failure_uses_canned_message(self, service, docx_zip_bytes):
        with pytest.raises(IntakeError) as exc_info:
            await service.process(docx_zip_bytes, DOCX_MIME_TYPE, "cv.docx")
        assert exc_info.value.message == (
            "Failed to parse resume file. Please ensure it's a valid PDF or DOCX."
        )

    async def test_logs_extension_mismatch(self, service, pdf_bytes, caplog):
        with caplog.at_level(logging.WARNING, logger="resumeguard.services.intake_service"):
            await service.process(pdf_bytes, PDF_MIME_TYPE, "resume.docx")
        assert "extension does not match application/pdf" in caplog.text
