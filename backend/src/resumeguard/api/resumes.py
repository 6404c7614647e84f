"""Résumé upload API endpoints."""

import logging

from fastapi import APIRouter, File, Form, HTTPException, Request, UploadFile

from resumeguard.config import get_settings
from resumeguard.dependencies import IntakeServiceDep, SettingsDep, ValidationOptionsDep
from resumeguard.middleware.rate_limit import limiter
from resumeguard.models.api import ResumeExtractionResponse
from resumeguard.models.validation import ValidationResult
from resumeguard.services.intake_service import IntakeError
from resumeguard.validation.file_validator import FileValidator

logger = logging.getLogger(__name__)

router = APIRouter()

UPLOAD_RATE_LIMIT = get_settings().upload_rate_limit


async def _read_capped(file: UploadFile, max_size: int) -> bytes:
    """Load at most one byte past the cap into memory.

    Starlette has already received and spooled the whole multipart body by
    the time the handler runs, so this bounds memory use, not bytes received.
    The extra byte lets an oversized upload fail the size check.
    """
    return await file.read(max_size + 1)


@router.post("/resumes/extract", response_model=ResumeExtractionResponse)
@limiter.limit(UPLOAD_RATE_LIMIT)
async def extract_resume(
    request: Request,
    intake_service: IntakeServiceDep,
    settings: SettingsDep,
    file: UploadFile | None = File(None),
    resume_text: str | None = Form(None),
):
    """Validate an uploaded résumé and return its plain text.

    Pasted text is accepted as-is instead of a file.
    """
    if resume_text:
        return ResumeExtractionResponse(source="text", text=resume_text)

    if file is None:
        raise HTTPException(status_code=400, detail="No resume provided")

    content = await _read_capped(file, settings.max_upload_size_bytes)

    try:
        result = await intake_service.process(
            content=content,
            mime_type=file.content_type or "application/octet-stream",
            filename=file.filename or "unnamed",
        )
    except IntakeError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)

    return ResumeExtractionResponse(
        source="file",
        filename=result.filename,
        kind=result.kind,
        text=result.text,
        warnings=result.warnings,
    )


@router.post(
    "/resumes/validate",
    response_model=ValidationResult,
    response_model_exclude_none=True,
)
@limiter.limit(UPLOAD_RATE_LIMIT)
async def validate_resume(
    request: Request,
    options: ValidationOptionsDep,
    file: UploadFile = File(...),
):
    """Validate an uploaded résumé without extracting it.

    The verdict is the payload, so a rejection still returns 200.
    """
    content = await _read_capped(file, options.max_size)
    result = FileValidator.validate(
        content,
        file.content_type or "application/octet-stream",
        file.filename or "unnamed",
        options,
    )
    if not result.valid:
        logger.info(f"Validation rejected {file.filename}: {result.error}")
    return result
