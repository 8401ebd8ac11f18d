"""
Health check endpoint. Public: no API key required.
"""
from fastapi import APIRouter, Depends

from shared.schemas.base import DataEnvelope, HealthStatus

from ..context import AppContext
from ..dependencies import get_context

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    response_model=DataEnvelope[HealthStatus],
    summary="Health check",
    description="Returns server health status, uptime, and build version.",
)
async def health_check(context: AppContext = Depends(get_context)):
    return DataEnvelope(
        data=HealthStatus(
            status="ok",
            uptime_seconds=context.uptime_seconds,
            build_version=context.config.build_version,
        )
    )
