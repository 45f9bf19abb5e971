from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Snake-case attributes, camelCase on the wire (the store's column names)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RecordModel(CamelModel):
    """A row as returned by the store; unknown columns are passed through."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="allow"
    )
    id: str | int


class ErrorResponse(BaseModel):
    error: str
    details: list[dict[str, Any]] | None = None


class MessageResponse(BaseModel):
    message: str
