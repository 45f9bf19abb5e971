from __future__ import annotations

from fastapi import APIRouter

from src.schemas import HealthCheckResponse
from src.services.records import utc_now_iso

router = APIRouter()


@router.get("/health", response_model=HealthCheckResponse)
async def health_check() -> HealthCheckResponse:
    """Liveness probe. Never touches the store."""
    return HealthCheckResponse(status="OK", timestamp=utc_now_iso())
