"""API test fixtures: app wired to an in-memory or temporary SQLite store."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from swiftmt799.api.app import create_app
from swiftmt799.core.config import AppSettings, StoreConfig
from swiftmt799.persistence.sqlite_backend import SQLiteMessageStore
from tests.fakes import MemoryMessageStore


@pytest.fixture
def memory_store():
    return MemoryMessageStore()


@pytest.fixture
def client(memory_store):
    app = create_app(AppSettings(store=StoreConfig(backend="memory")), store=memory_store)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def sqlite_store(tmp_path):
    return SQLiteMessageStore(db_path=tmp_path / "swift_messages.db")


@pytest.fixture
def sqlite_client(sqlite_store):
    settings = AppSettings(store=StoreConfig(db_path=str(sqlite_store.db_path)))
    with TestClient(create_app(settings)) as c:
        yield c
