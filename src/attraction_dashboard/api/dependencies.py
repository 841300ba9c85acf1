"""Request dependencies shared by the routers."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import Depends, Header, Request

from attraction_dashboard.domain.users import TokenClaims  # noqa: TC001
from attraction_dashboard.services.auth import AuthService  # noqa: TC001

if TYPE_CHECKING:
    from attraction_dashboard.containers import AppContainer


def get_container(request: Request) -> AppContainer:
    """Return the container attached to the running app."""
    return request.app.state.container


def _get_auth_service(request: Request) -> AuthService:
    return get_container(request).auth_service


async def require_user(
    authorization: str | None = Header(default=None),
    auth_service: AuthService = Depends(_get_auth_service),
) -> TokenClaims:
    """Resolve the bearer token into identity claims or reject the request."""
    return auth_service.authenticate(authorization)
