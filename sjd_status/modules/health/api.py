from __future__ import annotations

from fastapi import APIRouter, Depends

from sjd_status.dependencies import HealthContext, get_health_context
from sjd_status.modules.health.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/", response_model=HealthResponse)
async def get_health(
    context: HealthContext = Depends(get_health_context),
) -> HealthResponse:
    return await context.service.check()
