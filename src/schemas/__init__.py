from __future__ import annotations

from .common import (
    CamelModel,
    ErrorResponse,
    MessageResponse,
    RecordModel,
)
from .crm import (
    DEFAULT_DEAL_PROBABILITY,
    DEFAULT_DEAL_STAGE,
    DEFAULT_TASK_PRIORITY,
    ActivityRead,
    ContactCreate,
    ContactRead,
    ContactUpdate,
    DealCreate,
    DealRead,
    DealStageUpdate,
    TaskCreate,
    TaskRead,
)
from .health import HealthCheckResponse

__all__ = [
    # common
    "CamelModel",
    "ErrorResponse",
    "MessageResponse",
    "RecordModel",
    # health
    "HealthCheckResponse",
    # crm
    "DEFAULT_DEAL_PROBABILITY",
    "DEFAULT_DEAL_STAGE",
    "DEFAULT_TASK_PRIORITY",
    "ActivityRead",
    "ContactCreate",
    "ContactRead",
    "ContactUpdate",
    "DealCreate",
    "DealRead",
    "DealStageUpdate",
    "TaskCreate",
    "TaskRead",
]
