from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from src.api.deps import get_store
from src.integrations.store.base import StoreProvider
from src.schemas import ActivityRead

router = APIRouter()

FEED_LIMIT = 100


@router.get("", response_model=list[ActivityRead])
async def list_activities(
    store: StoreProvider = Depends(get_store),
) -> list[dict[str, Any]]:
    """Latest activities, newest first."""
    return await store.select(
        "activities", order_by="createdAt", ascending=False, limit=FEED_LIMIT
    )
