from __future__ import annotations

import logging
from typing import Any

import httpx

from src.core.errors import RecordNotFoundError, StoreError
from src.integrations.store.base import StoreProvider

logger = logging.getLogger(__name__)

# PostgREST error code for "JSON object requested, multiple (or no) rows returned"
SINGLE_ROW_MISMATCH = "PGRST116"

RETURN_REPRESENTATION = {"Prefer": "return=representation"}
SINGLE_OBJECT = {"Accept": "application/vnd.pgrst.object+json"}


def _encode_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    return str(value)


def _filter_params(filters: dict[str, Any] | None) -> dict[str, str]:
    """Translate equality filters into PostgREST ``column=eq.value`` params."""
    params: dict[str, str] = {}
    for column, value in (filters or {}).items():
        op = "is" if value is None else "eq"
        params[column] = f"{op}.{_encode_value(value)}"
    return params


class SupabaseClient(StoreProvider):
    """Supabase (PostgREST) client implementing StoreProvider protocol."""

    def __init__(self, url: str, api_key: str, timeout: float = 30.0) -> None:
        """Initialize the Supabase client.

        Args:
            url: PostgREST base URL, e.g. ``https://<project>.supabase.co/rest/v1``.
            api_key: Project API key, sent both as ``apikey`` and bearer token.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = url.rstrip("/")

        # One AsyncClient per handle so connections are pooled across requests
        self.client = httpx.AsyncClient(
            base_url=self.base_url,
            headers={
                "apikey": api_key,
                "Authorization": f"Bearer {api_key}",
            },
            timeout=httpx.Timeout(timeout),
        )

    async def _request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        json: Any = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Send one request to PostgREST and translate failures into StoreError."""
        try:
            response = await self.client.request(
                method=method,
                url=path,
                params=params,
                json=json,
                headers=headers,
            )
        except httpx.HTTPError as e:
            logger.error("Store request %s %s failed: %s", method, path, e)
            raise StoreError(str(e) or e.__class__.__name__) from e

        if response.is_error:
            raise self._error_from_response(response)
        return response

    @staticmethod
    def _error_from_response(response: httpx.Response) -> StoreError:
        try:
            body = response.json()
        except ValueError:
            body = None

        if not isinstance(body, dict):
            message = response.text or f"Store responded with HTTP {response.status_code}"
            return StoreError(message, status_code=response.status_code)

        code = body.get("code")
        error_cls = (
            RecordNotFoundError if code == SINGLE_ROW_MISMATCH else StoreError
        )
        return error_cls(
            str(body.get("message") or response.text),
            code=code,
            details=body.get("details"),
            hint=body.get("hint"),
            status_code=response.status_code,
        )

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
        params: dict[str, Any] = {"select": columns, **_filter_params(filters)}
        if order_by:
            params["order"] = f"{order_by}.{'asc' if ascending else 'desc'}"
        if limit is not None:
            params["limit"] = limit

        response = await self._request("GET", f"/{table}", params=params)
        return list(response.json())

    async def select_single(
        self,
        table: str,
        *,
        filters: dict[str, Any],
        columns: str = "*",
    ) -> dict[str, Any]:
        """Return exactly one row or raise RecordNotFoundError."""
        params = {"select": columns, **_filter_params(filters)}
        response = await self._request(
            "GET", f"/{table}", params=params, headers=SINGLE_OBJECT
        )
        return dict(response.json())

    async def insert(
        self, table: str, rows: list[dict[str, Any]]
    ) -> list[dict[str, Any]]:
        """Insert rows and return them as stored."""
        response = await self._request(
            "POST", f"/{table}", json=rows, headers=RETURN_REPRESENTATION
        )
        return list(response.json())

    async def update(
        self,
        table: str,
        values: dict[str, Any],
        *,
        filters: dict[str, Any],
    ) -> list[dict[str, Any]]:
        """Update matching rows and return them; empty if nothing matched."""
        response = await self._request(
            "PATCH",
            f"/{table}",
            params=_filter_params(filters),
            json=values,
            headers=RETURN_REPRESENTATION,
        )
        return list(response.json())

    async def delete(self, table: str, *, filters: dict[str, Any]) -> None:
        """Delete matching rows."""
        await self._request("DELETE", f"/{table}", params=_filter_params(filters))

    async def __aenter__(self) -> SupabaseClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self.client.aclose()
