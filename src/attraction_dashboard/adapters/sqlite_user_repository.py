"""SQLite-backed credential repository."""

import logging
from dataclasses import dataclass

from attraction_dashboard.adapters.sqlite_database import (
    SqliteDatabase,
    parse_timestamp,
)
from attraction_dashboard.domain.errors import StoreError
from attraction_dashboard.domain.users import UserRecord
from attraction_dashboard.services.auth import UserRepository

logger = logging.getLogger(__name__)


@dataclass
class SqliteUserRepository(UserRepository):
    """SQLite implementation for user persistence."""

    database: SqliteDatabase

    def get_by_username(self, username: str) -> UserRecord | None:
        """Return the user for an exact username, if present."""
        with self.database.connect() as connection:
            row = connection.execute(
                "SELECT id, username, password, created_at FROM users "
                "WHERE username = ?",
                (username,),
            ).fetchone()
        if row is None:
            return None
        return UserRecord(
            id=row["id"],
            username=row["username"],
            password_hash=row["password"],
            created_at=parse_timestamp(row["created_at"]),
        )

    def create_user(self, username: str, password_hash: str) -> UserRecord:
        """Insert a user unless the username is taken, then return it."""
        with self.database.connect() as connection:
            connection.execute(
                "INSERT OR IGNORE INTO users (username, password) VALUES (?, ?)",
                (username, password_hash),
            )
        user = self.get_by_username(username)
        if user is None:
            logger.error("SQLite returned no row for new user %r", username)
            raise StoreError()
        return user
