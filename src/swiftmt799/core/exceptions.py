"""SwiftMT799 exception hierarchy."""

from __future__ import annotations


class SwiftMT799Error(Exception):
    """Base exception for all SwiftMT799 errors."""

    status_code: int = 500


class MissingUploadError(SwiftMT799Error):
    """No file was uploaded, or the uploaded file is empty."""

    status_code = 400


class UploadReadError(SwiftMT799Error):
    """The uploaded file could not be read."""

    status_code = 500


class MessageFormatError(SwiftMT799Error):
    """Required MT799 tags were not found in the message."""

    status_code = 400

    def __init__(self, missing: list[str]) -> None:
        self.missing = missing
        super().__init__(f"Invalid Swift MT799 message format: missing {', '.join(missing)}")


class PersistenceError(SwiftMT799Error):
    """Message store operation failed."""

    status_code = 500
