"""Composable filters for daily record queries.

Filters are expressed as a list of predicates that store adapters AND together.
Column names always come from this module, values are bound by the adapter.
"""

from dataclasses import dataclass
from datetime import date

from attraction_dashboard.domain.errors import ValidationError

ALL_ATTRACTIONS = "all"


@dataclass(frozen=True)
class Predicate:
    """A single comparison against a daily_data column."""

    column: str
    operator: str
    value: object


@dataclass(frozen=True)
class RecordFilters:
    """Optional date range and attraction constraints."""

    start_date: date | None = None
    end_date: date | None = None
    attraction_id: int | None = None

    def predicates(self) -> list[Predicate]:
        """Return the predicates for the constraints that are set."""
        predicates = []
        if self.start_date is not None:
            predicates.append(Predicate("date", "gte", self.start_date.isoformat()))
        if self.end_date is not None:
            predicates.append(Predicate("date", "lte", self.end_date.isoformat()))
        if self.attraction_id is not None:
            predicates.append(Predicate("attraction_id", "eq", self.attraction_id))
        return predicates


def parse_attraction_filter(raw: str | None) -> int | None:
    """Parse the attraction query value, treating "all" as no filter."""
    if raw is None:
        return None
    cleaned = raw.strip()
    if cleaned in {"", ALL_ATTRACTIONS}:
        return None
    if not cleaned.isdigit():
        raise ValidationError("attractionId must be an integer or 'all'")
    return int(cleaned)


def parse_date_filter(raw: str | None, name: str) -> date | None:
    """Parse an ISO date query value, treating an empty value as no filter."""
    if raw is None or not raw.strip():
        return None
    try:
        return date.fromisoformat(raw.strip())
    except ValueError as exc:
        raise ValidationError(f"{name} must be a date in YYYY-MM-DD format") from exc
