# -*- coding: utf-8 -*-
"""
SQLite database for the listing draft store.

This module is the only place that imports sqlite3. Rows come back as
RowProxy objects supporting both row["column"] and row.column.
"""

import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional

from utils.logger import get_logger

logger = get_logger(__name__)

SCHEMA = (
    """
    CREATE TABLE IF NOT EXISTS listing_drafts (
        listing_id TEXT PRIMARY KEY,
        reference_number TEXT,
        status TEXT NOT NULL DEFAULT 'draft',
        last_step TEXT,
        draft_data TEXT NOT NULL DEFAULT '{}',
        created_at TEXT NOT NULL,
        updated_at TEXT NOT NULL
    )
    """,
    """
    CREATE INDEX IF NOT EXISTS idx_listing_drafts_updated
    ON listing_drafts (updated_at DESC)
    """,
)


class RowProxy:
    """Read-only row with key and attribute access."""

    def __init__(self, data: Dict[str, Any]):
        self._data = data

    def __getitem__(self, key):
        return self._data[key]

    def __getattr__(self, name):
        if name.startswith('_'):
            raise AttributeError(name)
        try:
            return self._data[name]
        except KeyError:
            raise AttributeError(f"'{type(self).__name__}' has no attribute '{name}'")

    def __contains__(self, key):
        return key in self._data

    def get(self, key, default=None):
        return self._data.get(key, default)

    def to_dict(self) -> Dict[str, Any]:
        return dict(self._data)

    def __repr__(self):
        return f"RowProxy({self._data})"


def _row_factory(cursor, row) -> RowProxy:
    return RowProxy({col[0]: row[idx] for idx, col in enumerate(cursor.description)})


class Database:
    """SQLite database used to persist listing drafts."""

    def __init__(self, db_path: Optional[Path] = None):
        """
        Open the database.

        Args:
            db_path: SQLite file (defaults to Config.DB_PATH)
        """
        if db_path is None:
            from app.config import Config
            db_path = Config.DB_PATH

        self._db_path = Path(db_path)
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        self._connection: Optional[sqlite3.Connection] = None

    @property
    def db_path(self) -> Path:
        return self._db_path

    @property
    def connection(self) -> sqlite3.Connection:
        """The open connection, connecting on first use."""
        if self._connection is None:
            self._connection = sqlite3.connect(str(self._db_path), check_same_thread=False)
            self._connection.row_factory = _row_factory
            logger.debug(f"Opened SQLite database: {self._db_path}")
        return self._connection

    def initialize(self) -> None:
        """Create the draft schema if missing."""
        logger.info(f"Initializing SQLite database at: {self._db_path}")
        with self.transaction() as conn:
            for statement in SCHEMA:
                conn.execute(statement)

    @contextmanager
    def transaction(self) -> Iterator[sqlite3.Connection]:
        """
        Transaction context manager.

        Usage:
            with db.transaction() as conn:
                # Operations commit on success, roll back on error
        """
        conn = self.connection
        try:
            yield conn
            conn.commit()
        except sqlite3.Error as e:
            conn.rollback()
            logger.error(f"SQLite transaction error: {e}")
            raise

    def execute(self, query: str, params: tuple = ()) -> List[RowProxy]:
        """
        Execute a statement and commit.

        Args:
            query: SQL query with ? placeholders
            params: Query parameters

        Returns:
            Rows produced by the statement (empty for writes)
        """
        try:
            with self.transaction() as conn:
                return conn.execute(query, params).fetchall()
        except sqlite3.Error:
            logger.error(f"Failed query: {query}")
            raise

    def fetch_one(self, query: str, params: tuple = ()) -> Optional[RowProxy]:
        """Execute query and fetch a single row, or None."""
        return self.connection.execute(query, params).fetchone()

    def fetch_all(self, query: str, params: tuple = ()) -> List[RowProxy]:
        """Execute query and fetch all rows."""
        return self.connection.execute(query, params).fetchall()

    def scalar(self, query: str, params: tuple = ()) -> Any:
        """Fetch the first column of the first row."""
        row = self.fetch_one(query, params)
        if row is None:
            return None
        return next(iter(row.to_dict().values()), None)

    def close(self) -> None:
        """Close database connection."""
        if self._connection is not None:
            self._connection.close()
            self._connection = None
            logger.info("SQLite connection closed")
