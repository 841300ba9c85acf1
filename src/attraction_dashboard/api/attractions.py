"""Attraction endpoints."""

from fastapi import APIRouter, Depends, Request

from attraction_dashboard.api.dependencies import get_container, require_user
from attraction_dashboard.api.schemas import AttractionRequest
from attraction_dashboard.domain.attractions import Attraction

router = APIRouter(tags=["attractions"], dependencies=[Depends(require_user)])


@router.get("/attractions")
async def list_attractions(request: Request) -> list[dict[str, object]]:
    """Return attractions sorted by name."""
    attractions = get_container(request).attraction_service.list_attractions()
    return [_serialize_attraction(attraction) for attraction in attractions]


@router.post("/attractions")
async def create_attraction(
    payload: AttractionRequest, request: Request
) -> dict[str, object]:
    """Create an attraction."""
    attraction = get_container(request).attraction_service.create_attraction(
        payload.name
    )
    return {"id": attraction.id, "name": attraction.name}


@router.delete("/attractions/{attraction_id}")
async def delete_attraction(attraction_id: int, request: Request) -> dict[str, str]:
    """Delete an attraction without daily data."""
    get_container(request).attraction_service.delete_attraction(attraction_id)
    return {"message": "Attraction deleted successfully"}


def _serialize_attraction(attraction: Attraction) -> dict[str, object]:
    return {
        "id": attraction.id,
        "name": attraction.name,
        "created_at": attraction.created_at.isoformat()
        if attraction.created_at
        else None,
    }
