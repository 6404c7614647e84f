"""API router aggregation."""

from fastapi import APIRouter

from resumeguard.api.resumes import router as resumes_router

# Public API router
api_router = APIRouter()
api_router.include_router(resumes_router, tags=["resumes"])
