"""Supabase queries for the dashboard table and summary.

PostgREST caps every response at ``max_rows``, so both reads page through an
ordered query with ``fetch_all`` instead of trusting a single response.
"""

from dataclasses import dataclass
from datetime import date
from typing import Any

from supabase import Client

from attraction_dashboard.adapters.supabase_store import apply_predicates, fetch_all
from attraction_dashboard.domain.dashboard import DashboardRow, SummaryTotals
from attraction_dashboard.domain.filters import RecordFilters
from attraction_dashboard.services.dashboard import DashboardRepository

_ROW_COLUMNS = (
    "id, date, attraction_id, qrcodes_delivered, sales_made, attractions!inner(name)"
)


@dataclass
class SupabaseDashboardRepository(DashboardRepository):
    """Supabase implementation for dashboard reads."""

    client: Client

    def list_dashboard_rows(self, filters: RecordFilters) -> list[DashboardRow]:
        """Return joined rows ordered by date desc, attraction name asc."""
        predicates = filters.predicates()

        def build_query() -> Any:  # noqa: ANN401
            query = self.client.table("daily_data").select(_ROW_COLUMNS)
            return (
                apply_predicates(query, predicates)
                .order("date", desc=True)
                .order("attractions(name)", desc=False)
                .order("id", desc=False)
            )

        return [_parse_row(row) for row in fetch_all(build_query)]

    def summarize_totals(self, filters: RecordFilters) -> SummaryTotals:
        """Return row count and count sums for the filtered records."""
        predicates = filters.predicates()

        def build_query() -> Any:  # noqa: ANN401
            query = self.client.table("daily_data").select(
                "id, qrcodes_delivered, sales_made"
            )
            return apply_predicates(query, predicates).order("id", desc=False)

        rows = fetch_all(build_query)
        return SummaryTotals(
            total_days=len(rows),
            total_qrcodes=sum(int(row.get("qrcodes_delivered") or 0) for row in rows),
            total_sales=sum(int(row.get("sales_made") or 0) for row in rows),
        )


def _parse_row(row: dict[str, object]) -> DashboardRow:
    attraction = row.get("attractions")
    name = attraction.get("name") if isinstance(attraction, dict) else None
    return DashboardRow(
        id=int(row["id"]),
        date=date.fromisoformat(str(row["date"])[:10]),
        attraction_name=str(name or ""),
        attraction_id=int(row["attraction_id"]),
        qrcodes_delivered=int(row.get("qrcodes_delivered") or 0),
        sales_made=int(row.get("sales_made") or 0),
    )
