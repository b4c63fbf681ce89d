"""Liveness endpoint. Does not touch the index, broker or database."""

from fastapi import APIRouter, Request

from digit_services.config.settings import get_settings

router = APIRouter()


@router.get("/health")
async def health(request: Request):
    settings = get_settings()
    return {
        "status": "ok",
        "service": settings.app_name,
        "version": settings.version,
        "environment": settings.environment,
        "tenant_id": request.state.tenant_id,
        "correlation_id": request.state.correlation_id,
    }
