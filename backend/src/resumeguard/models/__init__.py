"""Data models for Resume Guard."""

from resumeguard.models.api import HealthResponse, ResumeExtractionResponse
from resumeguard.models.extraction import ExtractionFailure, ExtractionOutcome
from resumeguard.models.validation import (
    DEFAULT_MAX_SIZE,
    MIB,
    SupportedKind,
    ValidationOptions,
    ValidationResult,
)

__all__ = [
    # Validation
    "DEFAULT_MAX_SIZE",
    "MIB",
    "SupportedKind",
    "ValidationOptions",
    "ValidationResult",
    # Extraction
    "ExtractionFailure",
    "ExtractionOutcome",
    # API
    "HealthResponse",
    "ResumeExtractionResponse",
]
