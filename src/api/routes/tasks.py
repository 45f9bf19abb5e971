from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status

from src.api.deps import get_store
from src.core.errors import RecordNotFoundError
from src.integrations.store.base import StoreProvider
from src.schemas import DEFAULT_TASK_PRIORITY, TaskCreate, TaskRead
from src.services.records import new_record_id, utc_now_iso

router = APIRouter()

TABLE = "tasks"
NOT_FOUND = "Task not found"


@router.get("", response_model=list[TaskRead])
async def list_tasks(
    store: StoreProvider = Depends(get_store),
) -> list[dict[str, Any]]:
    """List all tasks, soonest due first."""
    return await store.select(TABLE, order_by="dueDate", ascending=True)


@router.post("", response_model=TaskRead, status_code=status.HTTP_201_CREATED)
async def create_task(
    body: TaskCreate,
    store: StoreProvider = Depends(get_store),
) -> dict[str, Any]:
    """Create a new open task."""
    if not body.title or not body.due_date:
        raise HTTPException(status_code=400, detail="Title and dueDate are required")

    record = {
        "id": new_record_id(),
        "title": body.title,
        "description": body.description or "",
        "dueDate": body.due_date,
        "priority": body.priority or DEFAULT_TASK_PRIORITY,
        "completed": False,
        "contactId": body.contact_id or None,
        "dealId": body.deal_id or None,
        "createdAt": utc_now_iso(),
    }
    rows = await store.insert(TABLE, [record])
    return rows[0] if rows else record


@router.put("/{task_id}/toggle", response_model=TaskRead)
async def toggle_task(
    task_id: str,
    store: StoreProvider = Depends(get_store),
) -> dict[str, Any]:
    """Flip a task's completion flag.

    Read and write are two separate store calls with no isolation between
    them: concurrent toggles of the same task race and the last write wins.
    """
    try:
        current = await store.select_single(
            TABLE, filters={"id": task_id}, columns="completed"
        )
    except RecordNotFoundError as e:
        raise HTTPException(status_code=404, detail=NOT_FOUND) from e

    rows = await store.update(
        TABLE,
        {"completed": not current.get("completed")},
        filters={"id": task_id},
    )
    if not rows:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return rows[0]
