"""
Health check endpoints.

Liveness and readiness probes for monitoring.
"""

from fastapi import APIRouter

from mockapi import __version__
from mockapi.api.v1.health.models import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Liveness probe.

    Returns:
        Service status and version
    """
    return HealthResponse(status="ok", version=__version__)


@router.get("/health/ready", response_model=HealthResponse)
async def readiness_check() -> HealthResponse:
    """
    Readiness probe.

    The service has no backing resources, so it is ready as soon as it
    accepts requests.
    """
    return HealthResponse(status="ready", version=__version__)
