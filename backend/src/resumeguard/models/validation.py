"""Validation models: supported kinds, options and verdicts."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

MIB = 1024 * 1024

# Default upload ceiling for every kind
DEFAULT_MAX_SIZE = 10 * MIB


class SupportedKind(str, Enum):
    """File kinds the pipeline accepts."""

    PDF = "pdf"
    DOCX = "docx"


class ValidationOptions(BaseModel):
    """Caller-supplied validation policy."""

    model_config = ConfigDict(frozen=True)

    max_size: int = Field(default=DEFAULT_MAX_SIZE, gt=0, description="Size cap in bytes")
    strict_validation: bool = Field(
        default=True,
        description="Reject on magic-number mismatch (warn instead when False)",
    )


class ValidationResult(BaseModel):
    """Accept/reject verdict for one upload.

    ``error`` is set only on rejection and ``warnings`` only on acceptance,
    and only when there is at least one.
    """

    model_config = ConfigDict(frozen=True)

    valid: bool
    error: str | None = None
    warnings: list[str] | None = None

    @model_validator(mode="after")
    def check_verdict_shape(self) -> "ValidationResult":
        if self.valid and self.error is not None:
            raise ValueError("an accepting result cannot carry an error")
        if not self.valid:
            if not self.error:
                raise ValueError("a rejecting result needs an error")
            if self.warnings is not None:
                raise ValueError("a rejecting result cannot carry warnings")
        return self

    @classmethod
    def accept(cls, warnings: list[str] | None = None) -> "ValidationResult":
        """Build an accepting verdict, dropping an empty warning list."""
        return cls(valid=True, warnings=list(warnings) if warnings else None)

    @classmethod
    def reject(cls, error: str) -> "ValidationResult":
        """Build a rejecting verdict carrying a single displayable reason."""
        return cls(valid=False, error=error)
