"""Supabase-backed daily record repository.

The `daily_data` table carries a unique (attraction_id, date) constraint, so an
insert that loses a race with a concurrent upsert is turned into an update.
"""

import logging
from dataclasses import dataclass

from postgrest.exceptions import APIError
from supabase import Client

from attraction_dashboard.adapters.supabase_store import execute
from attraction_dashboard.domain.daily_records import DailyRecordInput, UpsertResult
from attraction_dashboard.domain.errors import ConflictError, StoreError
from attraction_dashboard.services.daily_records import DailyRecordRepository

logger = logging.getLogger(__name__)


@dataclass
class SupabaseDailyRecordRepository(DailyRecordRepository):
    """Supabase implementation for daily record writes."""

    client: Client

    def upsert_record(self, record: DailyRecordInput) -> UpsertResult:
        """Update the (attraction, date) row or insert a new one."""
        existing_id = self._find_id(record)
        if existing_id is not None:
            self._update_counts(existing_id, record)
            return UpsertResult(id=existing_id, created=False)
        try:
            rows = execute(
                self.client.table("daily_data").insert(
                    {
                        "attraction_id": record.attraction_id,
                        "date": record.date.isoformat(),
                        "qrcodes_delivered": record.qrcodes_delivered,
                        "sales_made": record.sales_made,
                    }
                )
            )
        except APIError:
            existing_id = self._find_id(record)
            if existing_id is None:
                logger.exception("Daily data insert failed and no row exists")
                raise StoreError() from None
            self._update_counts(existing_id, record)
            return UpsertResult(id=existing_id, created=False)
        if not rows:
            logger.error(
                "Supabase returned no row for daily data insert (%s, %s)",
                record.attraction_id,
                record.date.isoformat(),
            )
            raise StoreError()
        return UpsertResult(id=int(rows[0]["id"]), created=True)

    def update_record(self, record_id: int, record: DailyRecordInput) -> bool:
        """Overwrite all fields of a record by id."""
        try:
            rows = execute(
                self.client.table("daily_data")
                .update(
                    {
                        "attraction_id": record.attraction_id,
                        "date": record.date.isoformat(),
                        "qrcodes_delivered": record.qrcodes_delivered,
                        "sales_made": record.sales_made,
                    }
                )
                .eq("id", record_id)
            )
        except APIError as exc:
            raise ConflictError(
                "Daily data already exists for this attraction and date"
            ) from exc
        return bool(rows)

    def delete_record(self, record_id: int) -> bool:
        """Delete a record by id."""
        rows = execute(self.client.table("daily_data").delete().eq("id", record_id))
        return bool(rows)

    def _find_id(self, record: DailyRecordInput) -> int | None:
        rows = execute(
            self.client.table("daily_data")
            .select("id")
            .eq("attraction_id", record.attraction_id)
            .eq("date", record.date.isoformat())
            .limit(1)
        )
        return int(rows[0]["id"]) if rows else None

    def _update_counts(self, record_id: int, record: DailyRecordInput) -> None:
        execute(
            self.client.table("daily_data")
            .update(
                {
                    "qrcodes_delivered": record.qrcodes_delivered,
                    "sales_made": record.sales_made,
                }
            )
            .eq("id", record_id)
        )
