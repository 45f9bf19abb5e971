"""Unit tests for SupabaseClient."""
from __future__ import annotations

from unittest.mock import AsyncMock, patch

import httpx
import pytest

from src.core.errors import RecordNotFoundError, StoreError
from src.integrations.store.supabase import SupabaseClient

BASE_URL = "https://project.supabase.co/rest/v1"


def _make_response(
    status_code: int, json_body: object | None = None, method: str = "GET"
) -> httpx.Response:
    """Build a real httpx.Response so status helpers work correctly."""
    return httpx.Response(
        status_code,
        json=json_body if json_body is not None else [],
        request=httpx.Request(method, f"{BASE_URL}/contacts"),
    )


def _make_client() -> SupabaseClient:
    return SupabaseClient(BASE_URL, "anon-key", timeout=5.0)


@pytest.mark.unit
@pytest.mark.asyncio
async def test_client_sends_api_key_headers() -> None:
    client = _make_client()

    assert str(client.client.base_url).rstrip("/") == BASE_URL
    assert client.client.headers["apikey"] == "anon-key"
    assert client.client.headers["Authorization"] == "Bearer anon-key"
    await client.close()


@pytest.mark.unit
@pytest.mark.asyncio
async def test_select_builds_postgrest_query() -> None:
    client = _make_client()

    with patch.object(client.client, "request", new_callable=AsyncMock) as mock_request:
        mock_request.return_value = _make_response(200, [{"id": "a1"}])
        rows = await client.select(
            "activities", order_by="createdAt", ascending=False, limit=100
        )

    assert rows == [{"id": "a1"}]
    mock_request.assert_awaited_once_with(
        method="GET",
        url="/activities",
        params={"select": "*", "order": "createdAt.desc", "limit": 100},
        json=None,
        headers=None,
    )
    await client.close()


@pytest.mark.unit
@pytest.mark.asyncio
async def test_select_single_requests_one_object() -> None:
    client = _make_client()

    with patch.object(client.client, "request", new_callable=AsyncMock) as mock_request:
        mock_request.return_value = _make_response(200, {"completed": True})
        row = await client.select_single(
            "tasks", filters={"id": "t1"}, columns="completed"
        )

    assert row == {"completed": True}
    mock_request.assert_awaited_once_with(
        method="GET",
        url="/tasks",
        params={"select": "completed", "id": "eq.t1"},
        json=None,
        headers={"Accept": "application/vnd.pgrst.object+json"},
    )
    await client.close()


@pytest.mark.unit
@pytest.mark.asyncio
async def test_select_single_no_rows_raises_not_found() -> None:
    client = _make_client()
    body = {
        "code": "PGRST116",
        "details": "The result contains 0 rows",
        "hint": None,
        "message": "JSON object requested, multiple (or no) rows returned",
    }

    with patch.object(client.client, "request", new_callable=AsyncMock) as mock_request:
        mock_request.return_value = _make_response(406, body)
        with pytest.raises(RecordNotFoundError) as exc_info:
            await client.select_single("contacts", filters={"phone": "+123"})

    assert exc_info.value.code == "PGRST116"
    assert exc_info.value.status_code == 406
    await client.close()


@pytest.mark.unit
@pytest.mark.asyncio
async def test_insert_returns_representation() -> None:
    client = _make_client()
    row = {"id": "c1", "name": "Doe"}

    with patch.object(client.client, "request", new_callable=AsyncMock) as mock_request:
        mock_request.return_value = _make_response(201, [row], method="POST")
        result = await client.insert("contacts", [row])

    mock_request.assert_awaited_once_with(
        method="POST",
        url="/contacts",
        params=None,
        json=[row],
        headers={"Prefer": "return=representation"},
    )
    assert result == [row]
    await client.close()


@pytest.mark.unit
@pytest.mark.asyncio
async def test_update_filters_by_equality() -> None:
    client = _make_client()

    with patch.object(client.client, "request", new_callable=AsyncMock) as mock_request:
        mock_request.return_value = _make_response(200, [], method="PATCH")
        result = await client.update(
            "tasks", {"completed": False}, filters={"id": "t1", "completed": True}
        )

    assert result == []
    mock_request.assert_awaited_once_with(
        method="PATCH",
        url="/tasks",
        params={"id": "eq.t1", "completed": "eq.true"},
        json={"completed": False},
        headers={"Prefer": "return=representation"},
    )
    await client.close()


@pytest.mark.unit
@pytest.mark.asyncio
async def test_delete() -> None:
    client = _make_client()

    with patch.object(client.client, "request", new_callable=AsyncMock) as mock_request:
        mock_request.return_value = httpx.Response(
            204, request=httpx.Request("DELETE", f"{BASE_URL}/contacts")
        )
        await client.delete("contacts", filters={"id": "c1"})

    mock_request.assert_awaited_once_with(
        method="DELETE",
        url="/contacts",
        params={"id": "eq.c1"},
        json=None,
        headers=None,
    )
    await client.close()


@pytest.mark.unit
@pytest.mark.asyncio
async def test_error_response_carries_store_message() -> None:
    client = _make_client()
    body = {
        "code": "23505",
        "details": "Key (id)=(c1) already exists.",
        "hint": None,
        "message": 'duplicate key value violates unique constraint "contacts_pkey"',
    }

    with patch.object(client.client, "request", new_callable=AsyncMock) as mock_request:
        mock_request.return_value = _make_response(409, body, method="POST")
        with pytest.raises(StoreError) as exc_info:
            await client.insert("contacts", [{"id": "c1"}])

    err = exc_info.value
    assert not isinstance(err, RecordNotFoundError)
    assert err.message == body["message"]
    assert err.code == "23505"
    assert err.details == "Key (id)=(c1) already exists."
    assert err.status_code == 409
    await client.close()


@pytest.mark.unit
@pytest.mark.asyncio
async def test_non_json_error_uses_body_text() -> None:
    client = _make_client()

    with patch.object(client.client, "request", new_callable=AsyncMock) as mock_request:
        mock_request.return_value = httpx.Response(
            502,
            text="Bad Gateway",
            request=httpx.Request("GET", f"{BASE_URL}/contacts"),
        )
        with pytest.raises(StoreError, match="Bad Gateway"):
            await client.select("contacts")

    await client.close()


@pytest.mark.unit
@pytest.mark.asyncio
async def test_transport_error_is_not_retried() -> None:
    client = _make_client()

    with patch.object(client.client, "request", new_callable=AsyncMock) as mock_request:
        mock_request.side_effect = httpx.ConnectError("Connection refused")
        with pytest.raises(StoreError, match="Connection refused"):
            await client.select("contacts")

    assert mock_request.await_count == 1
    await client.close()


@pytest.mark.unit
@pytest.mark.asyncio
async def test_context_manager_closes_client() -> None:
    async with _make_client() as client:
        inner = client.client

    assert inner.is_closed
