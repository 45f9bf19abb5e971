from __future__ import annotations

import os

os.environ["SUPABASE_URL"] = "http://fake-supabase.test"
os.environ["SUPABASE_ANON_KEY"] = "fake-anon-key"

import copy
from collections.abc import AsyncGenerator, Generator
from typing import Any
from unittest.mock import AsyncMock

import pytest
from httpx import ASGITransport, AsyncClient

from src.api.deps import get_store
from src.core.errors import RecordNotFoundError
from src.main import app


class InMemoryStore:
    """Dict-backed StoreProvider used to exercise handlers end to end."""

    def __init__(self, tables: dict[str, list[dict[str, Any]]] | None = None) -> None:
        self.tables: dict[str, list[dict[str, Any]]] = copy.deepcopy(tables or {})

    def _matching(self, table: str, filters: dict[str, Any] | None) -> list[dict[str, Any]]:
        rows = self.tables.setdefault(table, [])
        return [
            row
            for row in rows
            if all(row.get(col) == val for col, val in (filters or {}).items())
        ]

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
        rows = [dict(row) for row in self._matching(table, filters)]
        if order_by:
            rows.sort(key=lambda row: row.get(order_by) or "", reverse=not ascending)
        return rows[:limit] if limit is not None else rows

    async def select_single(
        self,
        table: str,
        *,
        filters: dict[str, Any],
        columns: str = "*",
    ) -> dict[str, Any]:
        rows = self._matching(table, filters)
        if len(rows) != 1:
            raise RecordNotFoundError(
                "JSON object requested, multiple (or no) rows returned",
                code="PGRST116",
                status_code=406,
            )
        return dict(rows[0])

    async def insert(self, table: str, rows: list[dict[str, Any]]) -> list[dict[str, Any]]:
        stored = [dict(row) for row in rows]
        self.tables.setdefault(table, []).extend(stored)
        return [dict(row) for row in stored]

    async def update(
        self,
        table: str,
        values: dict[str, Any],
        *,
        filters: dict[str, Any],
    ) -> list[dict[str, Any]]:
        rows = self._matching(table, filters)
        for row in rows:
            row.update(values)
        return [dict(row) for row in rows]

    async def delete(self, table: str, *, filters: dict[str, Any]) -> None:
        doomed = self._matching(table, filters)
        self.tables[table] = [row for row in self.tables[table] if row not in doomed]

    async def close(self) -> None:
        pass


@pytest.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def mock_store() -> Generator[AsyncMock, None, None]:
    store = AsyncMock()
    app.dependency_overrides[get_store] = lambda: store
    yield store
    app.dependency_overrides.pop(get_store, None)


@pytest.fixture
def memory_store() -> Generator[InMemoryStore, None, None]:
    store = InMemoryStore(
        {
            "contacts": [
                {
                    "id": "seed-contact",
                    "name": "Ana Torres",
                    "email": "ana@example.com",
                    "phone": "+34600111222",
                    "company": "Acme",
                    "position": "CTO",
                    "createdAt": "2020-01-01T00:00:00.000Z",
                    "updatedAt": "2020-01-01T00:00:00.000Z",
                }
            ],
            "tasks": [
                {
                    "id": "seed-task",
                    "title": "Call back",
                    "description": "",
                    "dueDate": "2026-11-01",
                    "priority": "high",
                    "completed": False,
                    "contactId": "seed-contact",
                    "dealId": None,
                    "createdAt": "2020-01-01T00:00:00.000Z",
                }
            ],
        }
    )
    app.dependency_overrides[get_store] = lambda: store
    yield store
    app.dependency_overrides.pop(get_store, None)
