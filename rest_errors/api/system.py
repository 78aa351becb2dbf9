"""Health endpoints"""

from fastapi import APIRouter

from rest_errors import __version__
from rest_errors.core.config import get_settings
from rest_errors.shared.schemas import HealthResponse

router = APIRouter(prefix="/observability", tags=["System"])


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Health check endpoint for load balancer."""
    return HealthResponse.healthy(version=__version__, environment=get_settings().app.environment)


@router.get("/ready")
async def readiness_check() -> dict[str, bool]:
    """Readiness check endpoint."""
    return {"ready": True}


@router.get("/live")
async def liveness_check() -> dict[str, bool]:
    """Liveness check endpoint."""
    return {"alive": True}
