"""SQLite-backed attraction repository."""

import sqlite3
from dataclasses import dataclass

from attraction_dashboard.adapters.sqlite_database import (
    SqliteDatabase,
    parse_timestamp,
)
from attraction_dashboard.domain.attractions import ATTRACTION_IN_USE, Attraction
from attraction_dashboard.domain.errors import ConflictError
from attraction_dashboard.services.attractions import AttractionRepository


@dataclass
class SqliteAttractionRepository(AttractionRepository):
    """SQLite implementation for attractions."""

    database: SqliteDatabase

    def list_attractions(self) -> list[Attraction]:
        """Return all attractions ordered by name."""
        with self.database.connect() as connection:
            rows = connection.execute(
                "SELECT id, name, created_at FROM attractions ORDER BY name"
            ).fetchall()
        return [_parse_row(row) for row in rows]

    def get_attraction(self, attraction_id: int) -> Attraction | None:
        """Return an attraction by id, if present."""
        with self.database.connect() as connection:
            row = connection.execute(
                "SELECT id, name, created_at FROM attractions WHERE id = ?",
                (attraction_id,),
            ).fetchone()
        return _parse_row(row) if row else None

    def create_attraction(self, name: str) -> Attraction:
        """Insert an attraction and return it."""
        with self.database.connect() as connection:
            cursor = connection.execute(
                "INSERT INTO attractions (name) VALUES (?)", (name,)
            )
            row = connection.execute(
                "SELECT id, name, created_at FROM attractions WHERE id = ?",
                (cursor.lastrowid,),
            ).fetchone()
        return _parse_row(row)

    def count_daily_records(self, attraction_id: int) -> int:
        """Return how many daily records reference the attraction."""
        with self.database.connect() as connection:
            row = connection.execute(
                "SELECT COUNT(*) AS total FROM daily_data WHERE attraction_id = ?",
                (attraction_id,),
            ).fetchone()
        return int(row["total"])

    def delete_attraction(self, attraction_id: int) -> bool:
        """Delete an attraction, returning whether a row was removed."""
        with self.database.connect() as connection:
            try:
                cursor = connection.execute(
                    "DELETE FROM attractions WHERE id = ?", (attraction_id,)
                )
            except sqlite3.IntegrityError as exc:
                raise ConflictError(ATTRACTION_IN_USE) from exc
        return cursor.rowcount > 0


def _parse_row(row: sqlite3.Row) -> Attraction:
    return Attraction(
        id=row["id"],
        name=row["name"],
        created_at=parse_timestamp(row["created_at"]),
    )
