"""Supabase-backed credential repository."""

import logging
from dataclasses import dataclass

from supabase import Client

from attraction_dashboard.adapters.supabase_store import execute, parse_timestamp
from attraction_dashboard.domain.errors import StoreError
from attraction_dashboard.domain.users import UserRecord
from attraction_dashboard.services.auth import UserRepository

logger = logging.getLogger(__name__)


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user persistence."""

    client: Client

    def get_by_username(self, username: str) -> UserRecord | None:
        """Return the user for an exact username, if present."""
        rows = execute(
            self.client.table("users")
            .select("id, username, password, created_at")
            .eq("username", username)
            .limit(1)
        )
        if not rows:
            return None
        return _parse_user(rows[0])

    def create_user(self, username: str, password_hash: str) -> UserRecord:
        """Insert a user unless the username is taken, then return it."""
        execute(
            self.client.table("users").upsert(
                {"username": username, "password": password_hash},
                on_conflict="username",
                ignore_duplicates=True,
            )
        )
        user = self.get_by_username(username)
        if user is None:
            logger.error("Supabase returned no row for new user %r", username)
            raise StoreError()
        return user


def _parse_user(row: dict[str, object]) -> UserRecord:
    return UserRecord(
        id=int(row["id"]),
        username=str(row["username"]),
        password_hash=str(row["password"]),
        created_at=parse_timestamp(row.get("created_at")),
    )
