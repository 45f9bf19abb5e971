from __future__ import annotations

from typing import Any

from fastapi import APIRouter

from src.api.routes import activities, contacts, deals, tasks
from src.schemas import ErrorResponse

ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorResponse, "description": "Missing required fields or malformed body"},
    404: {"model": ErrorResponse, "description": "Record not found"},
    500: {"model": ErrorResponse, "description": "Store error, message passed through"},
}

api_router = APIRouter(responses=ERROR_RESPONSES)

api_router.include_router(contacts.router, prefix="/contacts", tags=["Contacts"])
api_router.include_router(deals.router, prefix="/deals", tags=["Deals"])
api_router.include_router(tasks.router, prefix="/tasks", tags=["Tasks"])
api_router.include_router(
    activities.router, prefix="/activities", tags=["Activities"]
)
