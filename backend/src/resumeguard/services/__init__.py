"""Services for Resume Guard."""

from resumeguard.services.intake_service import IntakeError, IntakeResult, IntakeService

__all__ = [
    "IntakeError",
    "IntakeResult",
    "IntakeService",
]
