"""Pluggable message store backends behind the IMessageStore Protocol."""

from __future__ import annotations

from swiftmt799.core.config import AppSettings
from swiftmt799.core.protocols import IMessageStore
from swiftmt799.persistence.memory_backend import MemoryMessageStore
from swiftmt799.persistence.sqlite_backend import SQLiteMessageStore


def create_persistence(settings: AppSettings | None = None) -> IMessageStore:
    """Create the message store selected by ``settings.store.backend``."""
    if settings is None:
        settings = AppSettings()

    if settings.store.backend == "memory":
        return MemoryMessageStore()

    return SQLiteMessageStore(
        db_path=settings.store.db_path,
        timeout=settings.store.timeout,
    )


__all__ = ["IMessageStore", "MemoryMessageStore", "SQLiteMessageStore", "create_persistence"]
