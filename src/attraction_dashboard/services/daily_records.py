"""Services for writing daily QR code and sales counts."""

import logging
from dataclasses import dataclass
from typing import Protocol

from attraction_dashboard.domain.daily_records import DailyRecordInput, UpsertResult
from attraction_dashboard.domain.errors import NotFoundError, ValidationError
from attraction_dashboard.services.attractions import AttractionRepository

logger = logging.getLogger(__name__)


class DailyRecordRepository(Protocol):
    """Persistence interface for daily records."""

    def upsert_record(self, record: DailyRecordInput) -> UpsertResult:
        """Update the counts of the (attraction, date) row or insert a new one.

        The lookup and the write must run as one unit of work.
        """

    def update_record(self, record_id: int, record: DailyRecordInput) -> bool:
        """Overwrite all fields of a record, returning whether it existed."""

    def delete_record(self, record_id: int) -> bool:
        """Delete a record, returning whether it existed."""


@dataclass
class DailyRecordService:
    """Application service for daily record writes."""

    repository: DailyRecordRepository
    attraction_repository: AttractionRepository

    def upsert(self, record: DailyRecordInput) -> UpsertResult:
        """Insert or update the record keyed by attraction and date."""
        self._validate(record)
        result = self.repository.upsert_record(record)
        logger.info(
            "%s daily data %s for attraction %s on %s",
            "Inserted" if result.created else "Updated",
            result.id,
            record.attraction_id,
            record.date.isoformat(),
        )
        return result

    def update(self, record_id: int, record: DailyRecordInput) -> None:
        """Overwrite a record by id.

        The (attraction, date) uniqueness is not re-checked on this path.
        """
        self._validate(record)
        if not self.repository.update_record(record_id, record):
            raise NotFoundError("Record not found")
        logger.info("Updated daily data %s", record_id)

    def delete(self, record_id: int) -> None:
        """Delete a record by id."""
        if not self.repository.delete_record(record_id):
            raise NotFoundError("Record not found")
        logger.info("Deleted daily data %s", record_id)

    def _validate(self, record: DailyRecordInput) -> None:
        record.validate()
        if self.attraction_repository.get_attraction(record.attraction_id) is None:
            raise ValidationError("Attraction does not exist")
