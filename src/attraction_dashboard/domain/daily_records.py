"""Domain models for daily QR code and sales counts."""

from dataclasses import dataclass
from datetime import date, datetime

from attraction_dashboard.domain.errors import ValidationError

# Largest value a Postgres integer column holds.
MAX_COUNT = 2_147_483_647


@dataclass(frozen=True)
class DailyRecord:
    """Counts for one attraction on one calendar date."""

    id: int
    attraction_id: int
    date: date
    qrcodes_delivered: int
    sales_made: int
    created_at: datetime | None = None


@dataclass(frozen=True)
class DailyRecordInput:
    """Mutable fields of a daily record as submitted by a client."""

    attraction_id: int
    date: date
    qrcodes_delivered: int = 0
    sales_made: int = 0

    def validate(self) -> None:
        """Reject counts outside the storable range."""
        for name, value in (
            ("qrcodesDelivered", self.qrcodes_delivered),
            ("salesMade", self.sales_made),
        ):
            if not 0 <= value <= MAX_COUNT:
                raise ValidationError(f"{name} must be between 0 and {MAX_COUNT}")


@dataclass(frozen=True)
class UpsertResult:
    """Outcome of an insert-or-update keyed by attraction and date."""

    id: int
    created: bool
