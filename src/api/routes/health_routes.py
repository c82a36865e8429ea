"""
Health check routes for monitoring.
"""
from fastapi import APIRouter
from src.core import config
from src.models.dto.stats_dto import HealthResponse

router = APIRouter(prefix="/api", tags=["Health"])


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint for monitoring."""
    return HealthResponse(
        status="healthy",
        service=config.settings.api_title,
        version=config.settings.api_version
    )
