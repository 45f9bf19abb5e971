from __future__ import annotations

import uuid
from datetime import UTC, datetime


def new_record_id() -> str:
    """Locally generated primary key for a new row."""
    return str(uuid.uuid4())


def utc_now_iso() -> str:
    """Current UTC time as ISO-8601 with millisecond precision, e.g. ``2026-01-05T09:30:00.123Z``."""
    return datetime.now(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")
