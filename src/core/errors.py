from __future__ import annotations

from typing import Any


class StoreError(Exception):
    """A query against the backing store failed.

    ``message`` is the store's own error text and is returned to the caller
    unchanged.
    """

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        details: Any = None,
        hint: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details
        self.hint = hint
        self.status_code = status_code


class RecordNotFoundError(StoreError):
    """A single-row lookup matched no row."""
