# focusly/models/store_entry.py
from __future__ import annotations

from datetime import datetime, timezone

from sqlmodel import Field, SQLModel


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class StoreEntry(SQLModel, table=True):
    """One key of the durable key-value store; ``value`` holds JSON text."""

    __tablename__ = "kv_store"

    key: str = Field(primary_key=True)
    value: str
    updated_at: datetime = Field(default_factory=_utcnow)


__all__ = ["StoreEntry"]
