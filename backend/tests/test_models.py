"""Tests for data models."""

import pytest
from pydantic import ValidationError

from resumeguard.models.extraction import ExtractionFailure, ExtractionOutcome
from resumeguard.models.validation import (
    DEFAULT_MAX_SIZE,
    SupportedKind,
    ValidationOptions,
    ValidationResult,
)


class TestValidationModels:
    """Tests for validation-related models."""

    def test_supported_kind_enum(self):
        """Test SupportedKind enum values."""
        assert SupportedKind.PDF.value == "pdf"
        assert SupportedKind.DOCX.value == "docx"
        assert len(SupportedKind) == 2

    def test_options_defaults(self):
        """Test ValidationOptions defaults to a 10MB strict policy."""
        options = ValidationOptions()
        assert options.max_size == DEFAULT_MAX_SIZE == 10 * 1024 * 1024
        assert options.strict_validation is True

    def test_options_reject_non_positive_size(self):
        with pytest.raises(ValidationError):
            ValidationOptions(max_size=0)

    def test_accept_drops_empty_warnings(self):
        """An accepting result without soft issues has no warnings field."""
        result = ValidationResult.accept([])
        assert result.valid is True
        assert result.error is None
        assert result.warnings is None

    def test_accept_keeps_warnings(self):
        result = ValidationResult.accept(["PDF may be truncated or corrupted"])
        assert result.warnings == ["PDF may be truncated or corrupted"]

    def test_reject_carries_no_warnings(self):
        """A rejecting result never carries warnings."""
        result = ValidationResult.reject("File is empty")
        assert result.valid is False
        assert result.error == "File is empty"
        assert result.warnings is None

    def test_result_serialization_omits_absent_fields(self):
        data = ValidationResult.reject("File is empty").model_dump(exclude_none=True)
        assert data == {"valid": False, "error": "File is empty"}

    @pytest.mark.parametrize(
        "fields",
        [
            {"valid": False},
            {"valid": False, "warnings": ["PDF may be truncated or corrupted"]},
            {"valid": False, "error": "File is empty", "warnings": []},
            {"valid": True, "error": "File is empty"},
        ],
    )
    def test_result_rejects_inconsistent_verdicts(self, fields):
        """Errors belong to rejections and warnings to acceptances."""
        with pytest.raises(ValidationError):
            ValidationResult(**fields)


class TestExtractionModels:
    """Tests for extraction outcome models."""

    def test_success(self):
        outcome = ExtractionOutcome.success("Jane Doe")
        assert outcome.ok
        assert outcome.text == "Jane Doe"
        assert outcome.failure is None

    def test_timed_out(self):
        outcome = ExtractionOutcome.timed_out(10.0)
        assert not outcome.ok
        assert outcome.failure is ExtractionFailure.TIMEOUT
        assert outcome.text is None
        assert "10.0s" in outcome.detail

    def test_parse_error(self):
        outcome = ExtractionOutcome.parse_error("PdfReadError: EOF marker not found")
        assert outcome.failure is ExtractionFailure.PARSE_ERROR
        assert outcome.detail == "PdfReadError: EOF marker not found"

    def test_user_messages(self):
        """Failure messages are distinct and safe to display."""
        assert "corrupted or too complex" in ExtractionFailure.TIMEOUT.user_message
        assert "valid PDF or DOCX" in ExtractionFailure.PARSE_ERROR.user_message
