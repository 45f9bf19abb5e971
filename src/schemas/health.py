from __future__ import annotations

from pydantic import BaseModel


class HealthCheckResponse(BaseModel):
    status: str
    timestamp: str
