from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status

from src.api.deps import get_store
from src.integrations.store.base import StoreProvider
from src.schemas import (
    DEFAULT_DEAL_PROBABILITY,
    DEFAULT_DEAL_STAGE,
    DealCreate,
    DealRead,
    DealStageUpdate,
)
from src.services.records import new_record_id, utc_now_iso

router = APIRouter()

TABLE = "deals"


@router.get("", response_model=list[DealRead])
async def list_deals(
    store: StoreProvider = Depends(get_store),
) -> list[dict[str, Any]]:
    """List all deals, newest first."""
    return await store.select(TABLE, order_by="createdAt", ascending=False)


@router.post("", response_model=DealRead, status_code=status.HTTP_201_CREATED)
async def create_deal(
    body: DealCreate,
    store: StoreProvider = Depends(get_store),
) -> dict[str, Any]:
    """Create a new deal in the pipeline."""
    if not body.title or not body.contact_id:
        raise HTTPException(status_code=400, detail="Title and contactId are required")

    now = utc_now_iso()
    record = {
        "id": new_record_id(),
        "title": body.title,
        "value": body.value if body.value is not None else 0,
        "stage": body.stage or DEFAULT_DEAL_STAGE,
        "contactId": body.contact_id,
        "probability": (
            body.probability if body.probability is not None else DEFAULT_DEAL_PROBABILITY
        ),
        "expectedCloseDate": body.expected_close_date or now,
        "createdAt": now,
        "updatedAt": now,
    }
    rows = await store.insert(TABLE, [record])
    return rows[0] if rows else record


@router.put("/{deal_id}/stage", response_model=DealRead)
async def update_deal_stage(
    deal_id: str,
    body: DealStageUpdate,
    store: StoreProvider = Depends(get_store),
) -> dict[str, Any]:
    """Move a deal to another pipeline stage."""
    if not body.stage:
        raise HTTPException(status_code=400, detail="Stage is required")

    rows = await store.update(
        TABLE,
        {"stage": body.stage, "updatedAt": utc_now_iso()},
        filters={"id": deal_id},
    )
    if not rows:
        raise HTTPException(status_code=404, detail="Deal not found")
    return rows[0]
