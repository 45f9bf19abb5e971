from __future__ import annotations

from src.core.store import get_store

# Re-export for convenient imports
__all__ = ["get_store"]
