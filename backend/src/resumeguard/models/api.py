"""API request and response schemas."""

from typing import Literal

from pydantic import BaseModel, Field

from resumeguard.models.validation import SupportedKind


class ResumeExtractionResponse(BaseModel):
    """Response model for an accepted résumé."""

    source: Literal["file", "text"]
    filename: str | None = Field(None, description="Sanitized upload filename")
    kind: SupportedKind | None = None
    text: str
    warnings: list[str] = Field(default_factory=list)


class HealthResponse(BaseModel):
    """Response model for the health check."""

    status: str = "healthy"
