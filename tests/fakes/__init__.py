"""Shared test doubles: re-export memory backends."""

from __future__ import annotations

from swiftmt799.persistence.memory_backend import MemoryMessageStore

__all__ = ["MemoryMessageStore"]
