"""Root informational endpoint."""

from fastapi import APIRouter

from devops_demo.models.responses import InfoResponse

router = APIRouter(tags=["Info"])


@router.get(
    "/",
    response_model=InfoResponse,
    summary="Service info",
)
async def service_info() -> InfoResponse:
    return InfoResponse()
