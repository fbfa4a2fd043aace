"""Health Probe — liveness endpoint with process uptime.

Invariants:
    - GET /api/health always returns 200 if the process is up
"""

from fastapi import APIRouter, status

from api_starter.core.health_status import build_health_envelope

router = APIRouter(prefix="/api", tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
async def health_check():
    """Liveness probe: status, ISO timestamp, uptime in seconds."""
    return build_health_envelope()
