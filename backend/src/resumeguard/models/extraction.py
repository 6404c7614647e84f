"""Text extraction outcome models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class ExtractionFailure(str, Enum):
    """Why text extraction did not produce text."""

    TIMEOUT = "timeout"
    PARSE_ERROR = "parse_error"

    @property
    def user_message(self) -> str:
        """Canned message safe to show to the uploader."""
        if self is ExtractionFailure.TIMEOUT:
            return "File processing timed out. The file may be corrupted or too complex."
        return "Failed to parse resume file. Please ensure it's a valid PDF or DOCX."


class ExtractionOutcome(BaseModel):
    """Either extracted plain text or a typed failure."""

    model_config = ConfigDict(frozen=True)

    text: str | None = None
    failure: ExtractionFailure | None = None
    # Internal diagnostic for logs; never shown to the uploader
    detail: str | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    @classmethod
    def success(cls, text: str) -> "ExtractionOutcome":
        return cls(text=text)

    @classmethod
    def timed_out(cls, timeout_seconds: float) -> "ExtractionOutcome":
        return cls(
            failure=ExtractionFailure.TIMEOUT,
            detail=f"Extraction exceeded {timeout_seconds}s",
        )

    @classmethod
    def parse_error(cls, detail: str) -> "ExtractionOutcome":
        return cls(failure=ExtractionFailure.PARSE_ERROR, detail=detail)
