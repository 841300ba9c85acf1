"""SQLite connection handling and schema bootstrap."""

import logging
import sqlite3
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import date, datetime
from pathlib import Path

from attraction_dashboard.domain.errors import StoreError

logger = logging.getLogger(__name__)

SCHEMA = """
CREATE TABLE IF NOT EXISTS users (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    username TEXT UNIQUE NOT NULL,
    password TEXT NOT NULL,
    created_at DATETIME DEFAULT CURRENT_TIMESTAMP
);

CREATE TABLE IF NOT EXISTS attractions (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL,
    created_at DATETIME DEFAULT CURRENT_TIMESTAMP
);

CREATE TABLE IF NOT EXISTS daily_data (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    attraction_id INTEGER,
    date DATE NOT NULL,
    qrcodes_delivered INTEGER DEFAULT 0,
    sales_made INTEGER DEFAULT 0,
    created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
    FOREIGN KEY (attraction_id) REFERENCES attractions (id)
);

CREATE INDEX IF NOT EXISTS idx_daily_data_attraction_date
    ON daily_data (attraction_id, date);
"""


@dataclass
class SqliteDatabase:
    """File-backed store handle; connections are scoped to a unit of work."""

    path: str

    def initialize(self) -> None:
        """Create the tables if they do not exist yet."""
        parent = Path(self.path).parent
        parent.mkdir(parents=True, exist_ok=True)
        with self.connect() as connection:
            connection.executescript(SCHEMA)
        logger.info("SQLite schema ready at %s", self.path)

    @contextmanager
    def connect(self) -> Iterator[sqlite3.Connection]:
        """Yield a connection that commits on success and rolls back on error."""
        try:
            connection = sqlite3.connect(self.path)
        except sqlite3.Error as exc:
            logger.exception("Could not open SQLite database at %s", self.path)
            raise StoreError() from exc
        connection.row_factory = sqlite3.Row
        try:
            connection.execute("PRAGMA foreign_keys = ON")
            with connection:
                yield connection
        except sqlite3.Error as exc:
            logger.exception("SQLite operation failed")
            raise StoreError() from exc
        finally:
            connection.close()


def parse_date(value: object) -> date:
    """Convert a stored date column into a date."""
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


def parse_timestamp(value: object) -> datetime | None:
    """Convert a stored CURRENT_TIMESTAMP value into a datetime."""
    if isinstance(value, str) and value:
        return datetime.fromisoformat(value)
    return None
