"""Supabase-backed attraction repository."""

import logging
from dataclasses import dataclass

from postgrest.exceptions import APIError
from supabase import Client

from attraction_dashboard.adapters.supabase_store import (
    FOREIGN_KEY_VIOLATION,
    execute,
    execute_count,
    fetch_all,
    parse_timestamp,
)
from attraction_dashboard.domain.attractions import ATTRACTION_IN_USE, Attraction
from attraction_dashboard.domain.errors import ConflictError, StoreError
from attraction_dashboard.services.attractions import AttractionRepository

logger = logging.getLogger(__name__)


@dataclass
class SupabaseAttractionRepository(AttractionRepository):
    """Supabase implementation for attractions."""

    client: Client

    def list_attractions(self) -> list[Attraction]:
        """Return all attractions ordered by name."""
        rows = fetch_all(
            lambda: self.client.table("attractions")
            .select("id, name, created_at")
            .order("name", desc=False)
            .order("id", desc=False)
        )
        return [_parse_attraction(row) for row in rows]

    def get_attraction(self, attraction_id: int) -> Attraction | None:
        """Return an attraction by id, if present."""
        rows = execute(
            self.client.table("attractions")
            .select("id, name, created_at")
            .eq("id", attraction_id)
            .limit(1)
        )
        return _parse_attraction(rows[0]) if rows else None

    def create_attraction(self, name: str) -> Attraction:
        """Insert an attraction and return it."""
        rows = execute(self.client.table("attractions").insert({"name": name}))
        if not rows:
            logger.error("Supabase returned no row for new attraction %r", name)
            raise StoreError()
        return _parse_attraction(rows[0])

    def count_daily_records(self, attraction_id: int) -> int:
        """Return how many daily records reference the attraction."""
        return execute_count(
            self.client.table("daily_data")
            .select("id", count="exact")
            .eq("attraction_id", attraction_id)
            .limit(1)
        )

    def delete_attraction(self, attraction_id: int) -> bool:
        """Delete an attraction, returning whether a row was removed."""
        try:
            rows = execute(
                self.client.table("attractions").delete().eq("id", attraction_id)
            )
        except APIError as exc:
            if exc.code == FOREIGN_KEY_VIOLATION:
                raise ConflictError(ATTRACTION_IN_USE) from exc
            logger.exception("Deleting attraction %s failed", attraction_id)
            raise StoreError() from exc
        return bool(rows)


def _parse_attraction(row: dict[str, object]) -> Attraction:
    return Attraction(
        id=int(row["id"]),
        name=str(row["name"]),
        created_at=parse_timestamp(row.get("created_at")),
    )
