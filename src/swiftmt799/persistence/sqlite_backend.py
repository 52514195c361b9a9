"""SQLite message store implementing IMessageStore."""

from __future__ import annotations

import logging
import sqlite3
from contextlib import closing
from pathlib import Path

from swiftmt799.core.exceptions import PersistenceError
from swiftmt799.models.message import ParsedMessage, PersistResult, SwiftMessageRow

logger = logging.getLogger(__name__)

CREATE_TABLE_SQL = """
    CREATE TABLE IF NOT EXISTS SwiftMessages (
        Id INTEGER PRIMARY KEY AUTOINCREMENT,
        Reference TEXT,
        RelatedReference TEXT,
        Narrative TEXT
    )
"""

INSERT_SQL = """
    INSERT INTO SwiftMessages (Reference, RelatedReference, Narrative)
    VALUES (:Reference, :RelatedReference, :Narrative)
"""

SELECT_COLUMNS = "SELECT Id, Reference, RelatedReference, Narrative FROM SwiftMessages"


class SQLiteMessageStore:
    """Production IMessageStore backed by a single SQLite file.

    One connection is opened and closed per call. The table is created on
    every write if it does not already exist. Concurrent writers are
    serialized by SQLite's own locking; ``timeout`` bounds the wait.
    """

    def __init__(self, db_path: str | Path, timeout: float = 5.0) -> None:
        self._db_path = Path(db_path)
        self._timeout = timeout

    @property
    def db_path(self) -> Path:
        return self._db_path

    def _connect(self) -> sqlite3.Connection:
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        conn = sqlite3.connect(self._db_path, timeout=self._timeout)
        conn.row_factory = sqlite3.Row
        return conn

    def persist(self, message: ParsedMessage) -> PersistResult:
        logger.info("Saving data to database at %s", self._db_path)
        try:
            with closing(self._connect()) as conn, conn:
                conn.execute(CREATE_TABLE_SQL)
                logger.debug("Table SwiftMessages created or already exists.")
                cursor = conn.execute(INSERT_SQL, message.as_fields())
                row_id = cursor.lastrowid
        except (sqlite3.Error, OSError) as exc:
            logger.exception("Failed to save message to %s", self._db_path)
            return PersistResult.failed(f"{type(exc).__name__}: {exc}")

        logger.info("Data saved to database successfully (Id=%s).", row_id)
        return PersistResult.ok(row_id)

    def get(self, row_id: int) -> SwiftMessageRow | None:
        rows = self._select(f"{SELECT_COLUMNS} WHERE Id = ?", (row_id,))
        return rows[0] if rows else None

    def list_messages(self, limit: int = 50) -> list[SwiftMessageRow]:
        return self._select(f"{SELECT_COLUMNS} ORDER BY Id DESC LIMIT ?", (limit,))

    def _select(self, sql: str, params: tuple) -> list[SwiftMessageRow]:
        if not self._db_path.exists():
            return []
        try:
            with closing(sqlite3.connect(self._db_path, timeout=self._timeout)) as conn:
                conn.row_factory = sqlite3.Row
                if not _table_exists(conn):
                    return []
                rows = conn.execute(sql, params).fetchall()
        except sqlite3.Error as exc:
            raise PersistenceError(f"SQLite read failed for {self._db_path}: {exc}") from exc
        return [_to_row(r) for r in rows]


def _table_exists(conn: sqlite3.Connection) -> bool:
    found = conn.execute(
        "SELECT 1 FROM sqlite_master WHERE type = 'table' AND name = 'SwiftMessages'"
    ).fetchone()
    return found is not None


def _to_row(row: sqlite3.Row) -> SwiftMessageRow:
    return SwiftMessageRow(
        id=row["Id"],
        Reference=row["Reference"],
        RelatedReference=row["RelatedReference"],
        Narrative=row["Narrative"],
    )
