from __future__ import annotations

from typing import Any, Protocol


class StoreProvider(Protocol):
    """Abstract record store interface.

    Implement this protocol to back the API with another store
    (Supabase, a plain PostgREST server, an in-memory fake, etc.)
    """

    async def select(
        self,
        table: str,
        *,
        filters: dict[str, Any] | None = None,
        columns: str = "*",
        order_by: str | None = None,
        ascending: bool = True,
        limit: int | None = None,
    ) -> list[dict[str, Any]]:
        """Return all rows matching the equality filters."""
        ...

    async def select_single(
        self,
        table: str,
        *,
        filters: dict[str, Any],
        columns: str = "*",
    ) -> dict[str, Any]:
        """Return exactly one row or raise RecordNotFoundError."""
        ...

    async def insert(
        self, table: str, rows: list[dict[str, Any]]
    ) -> list[dict[str, Any]]:
        """Insert rows and return them as stored."""
        ...

    async def update(
        self,
        table: str,
        values: dict[str, Any],
        *,
        filters: dict[str, Any],
    ) -> list[dict[str, Any]]:
        """Update matching rows and return them; empty if nothing matched."""
        ...

    async def delete(self, table: str, *, filters: dict[str, Any]) -> None:
        """Delete matching rows."""
        ...

    async def close(self) -> None:
        """Release the underlying connections."""
        ...
