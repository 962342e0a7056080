"""Health check endpoints.

Public endpoints for service health monitoring.
"""

from datetime import datetime, timezone

from fastapi import APIRouter

from api.models import HealthResponse


SERVICE_VERSION = "1.0.0"

router = APIRouter(tags=["Health"])


@router.get("/")
async def root():
    """Health check endpoint."""
    return {"status": "healthy", "service": "Breach Check API"}


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Detailed health check."""
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc).isoformat(),
        version=SERVICE_VERSION,
    )
