"""
Health check router.

Liveness/readiness check. Also the simplest route to confirm that
successful responses pass through the error handlers untouched.
"""

from fastapi import APIRouter

from app.core.config import settings
from app.interfaces.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns service name, status and version.",
)
def health_check() -> HealthResponse:
    return HealthResponse(
        status="ok", service=settings.project_name, version=settings.version
    )
