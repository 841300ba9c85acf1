"""SQLite-backed daily record repository."""

from dataclasses import dataclass

from attraction_dashboard.adapters.sqlite_database import SqliteDatabase
from attraction_dashboard.domain.daily_records import DailyRecordInput, UpsertResult
from attraction_dashboard.services.daily_records import DailyRecordRepository


@dataclass
class SqliteDailyRecordRepository(DailyRecordRepository):
    """SQLite implementation for daily record writes."""

    database: SqliteDatabase

    def upsert_record(self, record: DailyRecordInput) -> UpsertResult:
        """Update the (attraction, date) row or insert it in one transaction."""
        with self.database.connect() as connection:
            # Take the write lock before the lookup so concurrent upserts of the
            # same pair serialize instead of both inserting.
            connection.execute("BEGIN IMMEDIATE")
            existing = connection.execute(
                "SELECT id FROM daily_data WHERE attraction_id = ? AND date = ? "
                "ORDER BY id LIMIT 1",
                (record.attraction_id, record.date.isoformat()),
            ).fetchone()
            if existing is not None:
                connection.execute(
                    "UPDATE daily_data SET qrcodes_delivered = ?, sales_made = ? "
                    "WHERE id = ?",
                    (record.qrcodes_delivered, record.sales_made, existing["id"]),
                )
                return UpsertResult(id=existing["id"], created=False)
            cursor = connection.execute(
                "INSERT INTO daily_data "
                "(attraction_id, date, qrcodes_delivered, sales_made) "
                "VALUES (?, ?, ?, ?)",
                (
                    record.attraction_id,
                    record.date.isoformat(),
                    record.qrcodes_delivered,
                    record.sales_made,
                ),
            )
            return UpsertResult(id=int(cursor.lastrowid), created=True)

    def update_record(self, record_id: int, record: DailyRecordInput) -> bool:
        """Overwrite all fields of a record by id."""
        with self.database.connect() as connection:
            cursor = connection.execute(
                "UPDATE daily_data SET attraction_id = ?, date = ?, "
                "qrcodes_delivered = ?, sales_made = ? WHERE id = ?",
                (
                    record.attraction_id,
                    record.date.isoformat(),
                    record.qrcodes_delivered,
                    record.sales_made,
                    record_id,
                ),
            )
        return cursor.rowcount > 0

    def delete_record(self, record_id: int) -> bool:
        """Delete a record by id."""
        with self.database.connect() as connection:
            cursor = connection.execute(
                "DELETE FROM daily_data WHERE id = ?", (record_id,)
            )
        return cursor.rowcount > 0
