"""Entity id and timestamp defaults.

Ids are uppercase UUID v4 strings so they compare equal to ids minted by
the mobile clients. Timestamps are always timezone-aware UTC; naive inputs are read as UTC.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone


def new_id() -> str:
    return str(uuid.uuid4()).upper()


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Attach UTC to a naive datetime; aware values pass through."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
