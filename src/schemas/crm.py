from __future__ import annotations

from .common import CamelModel, RecordModel

DEFAULT_DEAL_STAGE = "lead"
DEFAULT_DEAL_PROBABILITY = 20
DEFAULT_TASK_PRIORITY = "medium"


class ContactCreate(CamelModel):
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    company: str | None = None
    position: str | None = None


class ContactUpdate(CamelModel):
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    company: str | None = None
    position: str | None = None


class ContactRead(RecordModel):
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    company: str | None = None
    position: str | None = None
    created_at: str | None = None
    updated_at: str | None = None


class DealCreate(CamelModel):
    title: str | None = None
    value: int | float | None = None
    stage: str | None = None
    contact_id: str | None = None
    probability: int | float | None = None
    expected_close_date: str | None = None


class DealStageUpdate(CamelModel):
    stage: str | None = None


class DealRead(RecordModel):
    title: str | None = None
    value: int | float | None = None
    stage: str | None = None
    contact_id: str | None = None
    probability: int | float | None = None
    expected_close_date: str | None = None
    created_at: str | None = None
    updated_at: str | None = None


class TaskCreate(CamelModel):
    title: str | None = None
    description: str | None = None
    due_date: str | None = None
    priority: str | None = None
    contact_id: str | None = None
    deal_id: str | None = None


class TaskRead(RecordModel):
    title: str | None = None
    description: str | None = None
    due_date: str | None = None
    priority: str | None = None
    completed: bool | None = None
    contact_id: str | None = None
    deal_id: str | None = None
    created_at: str | None = None


class ActivityRead(RecordModel):
    created_at: str | None = None
