"""A thin wrapper around an SQLite database file."""

from __future__ import annotations

import logging
import sqlite3
from collections.abc import Sequence
from types import TracebackType
from typing import Any

log = logging.getLogger(__name__)

Row = tuple[str, ...]


class DatabaseError(Exception):
    """Raised when the database cannot be opened or a statement fails."""


def _as_text(value: Any) -> str:
    if value is None:
        return "NULL"
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return str(value)


class DatabaseManager:
    """Runs SQL statements against one SQLite database file."""

    def __init__(self, path: str) -> None:
        self.path = path
        try:
            self._conn: sqlite3.Connection | None = sqlite3.connect(
                path, isolation_level=None
            )
        except sqlite3.Error as err:
            raise DatabaseError(f"Cannot open database {path!r}: {err}") from err
        log.info("Database open: %s", path)

    def _connection(self) -> sqlite3.Connection:
        if self._conn is None:
            raise DatabaseError(f"Database {self.path!r} is closed")
        return self._conn

    def execute(self, sql: str, params: Sequence[Any] = ()) -> int:
        """Run a statement that returns no rows; return the affected row count."""
        try:
            cursor = self._connection().execute(sql, tuple(params))
        except sqlite3.Error as err:
            raise DatabaseError(f"Request execution error '{sql}': {err}") from err
        return cursor.rowcount

    def query(self, sql: str, params: Sequence[Any] = ()) -> list[Row]:
        """Run a query and return its rows as text, with NULL shown as ``"NULL"``."""
        try:
            cursor = self._connection().execute(sql, tuple(params))
            rows = cursor.fetchall()
        except sqlite3.Error as err:
            raise DatabaseError(f"Request execution error '{sql}': {err}") from err
        return [tuple(_as_text(value) for value in row) for row in rows]

    def close(self) -> None:
        """Close the database; closing twice does nothing."""
        if self._conn is not None:
            self._conn.close()
            self._conn = None
            log.info("Database close: %s", self.path)

    def __enter__(self) -> DatabaseManager:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()