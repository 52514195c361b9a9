"""Protocol interfaces for SwiftMT799 abstractions.

Structural typing, no inheritance required, easy to test with isinstance().
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from swiftmt799.models.message import ParsedMessage, PersistResult, SwiftMessageRow


# ---------------------------------------------------------------------------
# Persistence: Message Store
# ---------------------------------------------------------------------------

@runtime_checkable
class IMessageStore(Protocol):
    """Store for parsed MT799 messages.

    ``persist`` reports failure through its result instead of raising.
    """

    def persist(self, message: ParsedMessage) -> PersistResult: ...

    def get(self, row_id: int) -> SwiftMessageRow | None: ...

    def list_messages(self, limit: int = 50) -> list[SwiftMessageRow]: ...
