"""FastAPI dependencies resolving application state."""

from __future__ import annotations

from fastapi import Request

from swiftmt799.core.protocols import IMessageStore


def get_store(request: Request) -> IMessageStore:
    return request.app.state.store
