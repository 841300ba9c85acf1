"""Dashboard listing and summary service."""

from dataclasses import dataclass
from typing import Protocol

from attraction_dashboard.domain.dashboard import (
    DailySummary,
    DashboardRow,
    SummaryTotals,
)
from attraction_dashboard.domain.filters import RecordFilters


class DashboardRepository(Protocol):
    """Read interface for filtered daily records."""

    def list_dashboard_rows(self, filters: RecordFilters) -> list[DashboardRow]:
        """Return joined rows, newest date first then attraction name."""

    def summarize_totals(self, filters: RecordFilters) -> SummaryTotals:
        """Return row count and count sums for the filtered records."""


@dataclass
class DashboardService:
    """Service for dashboard tables and summaries."""

    repository: DashboardRepository

    def list_rows(self, filters: RecordFilters) -> list[DashboardRow]:
        """Return the rows shown in the dashboard table."""
        return self.repository.list_dashboard_rows(filters)

    def summarize(self, filters: RecordFilters) -> DailySummary:
        """Return totals with a conversion rate taken from the summed counts."""
        return DailySummary.from_totals(self.repository.summarize_totals(filters))
