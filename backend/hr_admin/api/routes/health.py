import time

from fastapi import APIRouter

from hr_admin.core import clock
from hr_admin.core.config import settings

router = APIRouter(prefix="/api/health", tags=["health"])

STARTED_AT = time.monotonic()


@router.get("", summary="Liveness probe")
def healthcheck() -> dict[str, str | float]:
    return {
        "status": "healthy",
        "timestamp": clock.utcnow().isoformat() + "Z",
        "uptime": round(time.monotonic() - STARTED_AT, 3),
        "environment": settings.env,
    }
