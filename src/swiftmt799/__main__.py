"""Run the SwiftMT799 API with uvicorn."""

from __future__ import annotations

import uvicorn

from swiftmt799.api.app import create_app
from swiftmt799.core.config import AppSettings


def main() -> None:
    settings = AppSettings()
    app = create_app(settings)
    uvicorn.run(
        app,
        host=settings.api.host,
        port=settings.api.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
