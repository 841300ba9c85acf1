"""Dashboard read endpoints."""

from fastapi import APIRouter, Depends, Query, Request

from attraction_dashboard.api.dependencies import get_container, require_user
from attraction_dashboard.domain.dashboard import DashboardRow
from attraction_dashboard.domain.filters import (
    RecordFilters,
    parse_attraction_filter,
    parse_date_filter,
)

router = APIRouter(tags=["dashboard"], dependencies=[Depends(require_user)])


def record_filters(
    start_date: str | None = Query(default=None, alias="startDate"),
    end_date: str | None = Query(default=None, alias="endDate"),
    attraction_id: str | None = Query(default=None, alias="attractionId"),
) -> RecordFilters:
    """Build filters from the dashboard query string."""
    return RecordFilters(
        start_date=parse_date_filter(start_date, "startDate"),
        end_date=parse_date_filter(end_date, "endDate"),
        attraction_id=parse_attraction_filter(attraction_id),
    )


@router.get("/dashboard-data")
async def dashboard_data(
    request: Request, filters: RecordFilters = Depends(record_filters)
) -> list[dict[str, object]]:
    """Return filtered rows with per-row conversion rates."""
    rows = get_container(request).dashboard_service.list_rows(filters)
    return [_serialize_row(row) for row in rows]


@router.get("/summary")
async def summary(
    request: Request, filters: RecordFilters = Depends(record_filters)
) -> dict[str, object]:
    """Return totals for the filtered rows."""
    result = get_container(request).dashboard_service.summarize(filters)
    return {
        "total_days": result.total_days,
        "total_qrcodes": result.total_qrcodes,
        "total_sales": result.total_sales,
        "avg_conversion_rate": result.avg_conversion_rate,
    }


def _serialize_row(row: DashboardRow) -> dict[str, object]:
    return {
        "id": row.id,
        "date": row.date.isoformat(),
        "attraction_name": row.attraction_name,
        "attraction_id": row.attraction_id,
        "qrcodes_delivered": row.qrcodes_delivered,
        "sales_made": row.sales_made,
        "conversion_rate": row.conversion_rate,
    }
