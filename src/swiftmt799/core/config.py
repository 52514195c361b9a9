"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class StoreConfig(BaseSettings):
    """Message store configuration."""

    model_config = {"env_prefix": "SWIFTMT799_STORE_"}

    backend: Literal["sqlite", "memory"] = "sqlite"
    db_path: str = "swift_messages.db"  # Relative paths resolve against the working directory
    timeout: float = 5.0  # Seconds to wait on a locked database


class ApiConfig(BaseSettings):
    """HTTP server configuration."""

    model_config = {"env_prefix": "SWIFTMT799_API_"}

    host: str = "0.0.0.0"
    port: int = 8000
    title: str = "SwiftMT799 API"


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "SWIFTMT799_"}

    environment: Literal["dev", "uat", "prod"] = "dev"
    log_level: str = "INFO"
    log_format: Literal["text", "json"] = "text"

    store: StoreConfig = Field(default_factory=StoreConfig)
    api: ApiConfig = Field(default_factory=ApiConfig)
