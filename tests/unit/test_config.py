"""Tests for configuration defaults and env overrides."""

from __future__ import annotations

from swiftmt799.core.config import AppSettings, StoreConfig


def test_default_settings():
    settings = AppSettings()
    assert settings.environment == "dev"
    assert settings.store.backend == "sqlite"
    assert settings.api.port == 8000


def test_store_config_defaults():
    config = StoreConfig()
    assert config.db_path == "swift_messages.db"
    assert config.timeout == 5.0


def test_store_config_env_override(monkeypatch):
    monkeypatch.setenv("SWIFTMT799_STORE_DB_PATH", "/tmp/other.db")
    monkeypatch.setenv("SWIFTMT799_STORE_BACKEND", "memory")
    config = StoreConfig()
    assert config.db_path == "/tmp/other.db"
    assert config.backend == "memory"


def test_nested_config_read_at_construction(monkeypatch):
    monkeypatch.setenv("SWIFTMT799_API_PORT", "9001")
    monkeypatch.setenv("SWIFTMT799_LOG_LEVEL", "DEBUG")
    settings = AppSettings()
    assert settings.api.port == 9001
    assert settings.log_level == "DEBUG"
