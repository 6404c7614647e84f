"""Dependency injection for FastAPI."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from resumeguard.config import Settings, get_settings
from resumeguard.extraction.adapter import ExtractionAdapter
from resumeguard.models.validation import ValidationOptions
from resumeguard.services.intake_service import IntakeService


@lru_cache
def get_extraction_adapter() -> ExtractionAdapter:
    """Get cached extraction adapter."""
    return ExtractionAdapter.from_settings(get_settings())


def get_validation_options(
    settings: Annotated[Settings, Depends(get_settings)],
) -> ValidationOptions:
    """Get the upload validation policy."""
    return settings.validation_options()


def get_intake_service(
    options: Annotated[ValidationOptions, Depends(get_validation_options)],
    adapter: Annotated[ExtractionAdapter, Depends(get_extraction_adapter)],
) -> IntakeService:
    """Get IntakeService instance."""
    return IntakeService(options=options, extraction_adapter=adapter)


# Type aliases for dependency injection
SettingsDep = Annotated[Settings, Depends(get_settings)]
ValidationOptionsDep = Annotated[ValidationOptions, Depends(get_validation_options)]
IntakeServiceDep = Annotated[IntakeService, Depends(get_intake_service)]
