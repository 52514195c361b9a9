"""In-memory message store for unit tests: list-backed fake."""

from __future__ import annotations

from typing import Optional

from swiftmt799.models.message import ParsedMessage, PersistResult, SwiftMessageRow


class MemoryMessageStore:
    """List-backed IMessageStore for unit tests.

    Pass ``fail_with`` to make every ``persist`` call report that failure.
    """

    def __init__(self, fail_with: Optional[str] = None) -> None:
        self._rows: list[SwiftMessageRow] = []
        self._next_id = 1
        self.fail_with = fail_with

    def persist(self, message: ParsedMessage) -> PersistResult:
        if self.fail_with is not None:
            return PersistResult.failed(self.fail_with)
        row = SwiftMessageRow(id=self._next_id, **message.as_fields())
        self._rows.append(row)
        self._next_id += 1
        return PersistResult.ok(row.id)

    def get(self, row_id: int) -> SwiftMessageRow | None:
        return next((r for r in self._rows if r.id == row_id), None)

    def list_messages(self, limit: int = 50) -> list[SwiftMessageRow]:
        return list(reversed(self._rows))[:limit]

    def __len__(self) -> int:
        return len(self._rows)
