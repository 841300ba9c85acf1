"""Login endpoint."""

from fastapi import APIRouter, Request

from attraction_dashboard.api.dependencies import get_container
from attraction_dashboard.api.schemas import LoginRequest

router = APIRouter(tags=["auth"])


@router.post("/login")
async def login(payload: LoginRequest, request: Request) -> dict[str, object]:
    """Exchange credentials for a bearer token."""
    result = get_container(request).auth_service.login(
        payload.username, payload.password
    )
    return {
        "token": result.token,
        "user": {"id": result.user.id, "username": result.user.username},
    }
