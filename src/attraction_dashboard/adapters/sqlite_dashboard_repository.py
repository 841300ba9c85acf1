"""SQLite queries for the dashboard table and summary."""

from dataclasses import dataclass

from attraction_dashboard.adapters.sqlite_database import SqliteDatabase, parse_date
from attraction_dashboard.domain.dashboard import DashboardRow, SummaryTotals
from attraction_dashboard.domain.filters import Predicate, RecordFilters
from attraction_dashboard.services.dashboard import DashboardRepository

_OPERATORS = {"eq": "=", "gte": ">=", "lte": "<="}
_COLUMNS = {"date", "attraction_id"}


def render_where(
    predicates: list[Predicate], table_alias: str = "d"
) -> tuple[str, list[object]]:
    """Render predicates into a WHERE clause with bound parameters."""
    if not predicates:
        return "", []
    clauses = []
    params: list[object] = []
    for predicate in predicates:
        if predicate.column not in _COLUMNS or predicate.operator not in _OPERATORS:
            raise ValueError(f"Unsupported predicate: {predicate}")
        operator = _OPERATORS[predicate.operator]
        clauses.append(f"{table_alias}.{predicate.column} {operator} ?")
        params.append(predicate.value)
    return " WHERE " + " AND ".join(clauses), params


@dataclass
class SqliteDashboardRepository(DashboardRepository):
    """SQLite implementation for dashboard reads."""

    database: SqliteDatabase

    def list_dashboard_rows(self, filters: RecordFilters) -> list[DashboardRow]:
        """Return joined rows ordered by date desc, attraction name asc."""
        where, params = render_where(filters.predicates())
        query = (
            "SELECT d.id, d.date, a.name AS attraction_name, d.attraction_id, "
            "d.qrcodes_delivered, d.sales_made "
            "FROM daily_data d JOIN attractions a ON d.attraction_id = a.id"
            f"{where} ORDER BY d.date DESC, a.name"
        )
        with self.database.connect() as connection:
            rows = connection.execute(query, params).fetchall()
        return [
            DashboardRow(
                id=row["id"],
                date=parse_date(row["date"]),
                attraction_name=row["attraction_name"],
                attraction_id=row["attraction_id"],
                qrcodes_delivered=row["qrcodes_delivered"] or 0,
                sales_made=row["sales_made"] or 0,
            )
            for row in rows
        ]

    def summarize_totals(self, filters: RecordFilters) -> SummaryTotals:
        """Return row count and count sums for the filtered records."""
        where, params = render_where(filters.predicates())
        query = (
            "SELECT COUNT(*) AS total_days, "
            "COALESCE(SUM(d.qrcodes_delivered), 0) AS total_qrcodes, "
            "COALESCE(SUM(d.sales_made), 0) AS total_sales "
            f"FROM daily_data d{where}"
        )
        with self.database.connect() as connection:
            row = connection.execute(query, params).fetchone()
        return SummaryTotals(
            total_days=int(row["total_days"]),
            total_qrcodes=int(row["total_qrcodes"]),
            total_sales=int(row["total_sales"]),
        )
