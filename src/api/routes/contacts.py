from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status

from src.api.deps import get_store
from src.core.errors import StoreError
from src.integrations.store.base import StoreProvider
from src.schemas import ContactCreate, ContactRead, ContactUpdate, MessageResponse
from src.services.records import new_record_id, utc_now_iso

logger = logging.getLogger(__name__)
router = APIRouter()

TABLE = "contacts"
NOT_FOUND = "Contact not found"


async def _fetch_one(store: StoreProvider, column: str, value: str) -> dict[str, Any]:
    # A failed lookup and a missing row both answer 404.
    try:
        return await store.select_single(TABLE, filters={column: value})
    except StoreError as e:
        logger.info("Contact lookup by %s=%r failed: %s", column, value, e.message)
        raise HTTPException(status_code=404, detail=NOT_FOUND) from e


@router.get("", response_model=list[ContactRead])
async def list_contacts(
    store: StoreProvider = Depends(get_store),
) -> list[dict[str, Any]]:
    """List all contacts, newest first."""
    return await store.select(TABLE, order_by="createdAt", ascending=False)


@router.get("/phone/{phone}", response_model=ContactRead)
async def get_contact_by_phone(
    phone: str,
    store: StoreProvider = Depends(get_store),
) -> dict[str, Any]:
    """Look up a contact by phone number."""
    return await _fetch_one(store, "phone", phone)


@router.get("/{contact_id}", response_model=ContactRead)
async def get_contact(
    contact_id: str,
    store: StoreProvider = Depends(get_store),
) -> dict[str, Any]:
    return await _fetch_one(store, "id", contact_id)


@router.post("", response_model=ContactRead, status_code=status.HTTP_201_CREATED)
async def create_contact(
    body: ContactCreate,
    store: StoreProvider = Depends(get_store),
) -> dict[str, Any]:
    """Create a new contact."""
    if not body.name or not body.phone:
        raise HTTPException(status_code=400, detail="Name and phone are required")

    now = utc_now_iso()
    record = {
        "id": new_record_id(),
        "name": body.name,
        "email": body.email or "",
        "phone": body.phone,
        "company": body.company or "",
        "position": body.position or "",
        "createdAt": now,
        "updatedAt": now,
    }
    rows = await store.insert(TABLE, [record])
    logger.info("Created contact %s", record["id"])
    return rows[0] if rows else record


@router.put("/{contact_id}", response_model=ContactRead)
async def update_contact(
    contact_id: str,
    body: ContactUpdate | None = None,
    store: StoreProvider = Depends(get_store),
) -> dict[str, Any]:
    """Merge the given fields into a contact. A missing body only bumps updatedAt."""
    values = body.model_dump(exclude_unset=True, by_alias=True) if body is not None else {}
    values["updatedAt"] = utc_now_iso()

    rows = await store.update(TABLE, values, filters={"id": contact_id})
    if not rows:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return rows[0]


@router.delete("/{contact_id}", response_model=MessageResponse)
async def delete_contact(
    contact_id: str,
    store: StoreProvider = Depends(get_store),
) -> MessageResponse:
    """Delete a contact. Succeeds whether or not the row existed."""
    await store.delete(TABLE, filters={"id": contact_id})
    return MessageResponse(message="Contact deleted")
