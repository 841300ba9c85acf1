"""Daily data write endpoints."""

from fastapi import APIRouter, Depends, Request

from attraction_dashboard.api.dependencies import get_container, require_user
from attraction_dashboard.api.schemas import DailyDataRequest
from attraction_dashboard.domain.daily_records import DailyRecordInput

router = APIRouter(tags=["daily-data"], dependencies=[Depends(require_user)])


@router.post("/daily-data")
async def upsert_daily_data(
    payload: DailyDataRequest, request: Request
) -> dict[str, object]:
    """Insert the day's counts, or overwrite them if the day already exists."""
    result = get_container(request).daily_record_service.upsert(_to_input(payload))
    if result.created:
        return {"message": "Data inserted successfully", "id": result.id}
    return {"message": "Data updated successfully", "id": result.id}


@router.put("/daily-data/{record_id}")
async def update_daily_data(
    record_id: int, payload: DailyDataRequest, request: Request
) -> dict[str, str]:
    """Overwrite a daily record by id."""
    get_container(request).daily_record_service.update(record_id, _to_input(payload))
    return {"message": "Data updated successfully"}


@router.delete("/daily-data/{record_id}")
async def delete_daily_data(record_id: int, request: Request) -> dict[str, str]:
    """Delete a daily record by id."""
    get_container(request).daily_record_service.delete(record_id)
    return {"message": "Data deleted successfully"}


def _to_input(payload: DailyDataRequest) -> DailyRecordInput:
    return DailyRecordInput(
        attraction_id=payload.attraction_id,
        date=payload.date,
        qrcodes_delivered=payload.qrcodes_delivered,
        sales_made=payload.sales_made,
    )
