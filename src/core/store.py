from __future__ import annotations

from fastapi import Request

from src.core.config import Settings
from src.integrations.store.base import StoreProvider
from src.integrations.store.supabase import SupabaseClient


def create_store(settings: Settings) -> StoreProvider:
    """Build the process-wide store handle from configuration."""
    return SupabaseClient(
        settings.store_rest_url,
        settings.supabase_anon_key,
        timeout=settings.store_timeout,
    )


async def get_store(request: Request) -> StoreProvider:
    store: StoreProvider = request.app.state.store
    return store
