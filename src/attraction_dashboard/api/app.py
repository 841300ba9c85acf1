"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from attraction_dashboard.api.attractions import router as attractions_router
from attraction_dashboard.api.auth import router as auth_router
from attraction_dashboard.api.daily_data import router as daily_data_router
from attraction_dashboard.api.dashboard import router as dashboard_router
from attraction_dashboard.api.errors import register_exception_handlers
from attraction_dashboard.api.ui import router as ui_router
from attraction_dashboard.app_logging import configure_logging
from attraction_dashboard.config import parse_cors_origins
from attraction_dashboard.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        app.state.container.initialize()
        logger.info(
            "Dashboard API ready (%s backend)", container.settings.database_backend
        )
        yield

    app = FastAPI(title="Attraction Dashboard", lifespan=lifespan)
    app.state.container = container

    origins = parse_cors_origins(container.settings.cors_allowed_origins)
    if origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=origins,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    register_exception_handlers(app)

    api_prefix = container.settings.api_prefix.rstrip("/")
    for router in (
        auth_router,
        attractions_router,
        daily_data_router,
        dashboard_router,
    ):
        app.include_router(router, prefix=api_prefix)
    app.include_router(ui_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
