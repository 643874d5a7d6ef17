"""
Health check endpoint.

Provides a lightweight liveness check for load balancers, uptime monitors,
and deployment readiness checks. Always answers 200.
"""

from fastapi import APIRouter, Depends

from devops_demo.api.dependencies import get_app_settings, get_boot_record, get_clock
from devops_demo.clock import BootRecord, Clock, isoformat_utc
from devops_demo.config import Settings
from devops_demo.models.responses import HealthResponse

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health Check",
    description="Returns liveness status, process uptime, boot time and version.",
)
async def health_check(
    settings: Settings = Depends(get_app_settings),
    clock: Clock = Depends(get_clock),
    boot: BootRecord = Depends(get_boot_record),
) -> HealthResponse:
    """Return service status, uptime, current time, boot time and version."""
    return HealthResponse(
        uptime=clock.uptime(),
        timestamp=isoformat_utc(clock.now()),
        boot_time=boot.isoformat,
        version=settings.app_version,
    )
