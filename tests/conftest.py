"""Shared test fixtures."""

from collections.abc import Iterator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from attraction_dashboard.api.app import create_app
from attraction_dashboard.config import Settings
from attraction_dashboard.containers import AppContainer, build_container
from attraction_dashboard.services.attractions import AttractionService
from attraction_dashboard.services.auth import AuthService
from attraction_dashboard.services.daily_records import DailyRecordService
from attraction_dashboard.services.dashboard import DashboardService
from attraction_dashboard.services.security import PasswordHasher, TokenCodec
from tests.fakes import (
    InMemoryAttractionRepository,
    InMemoryDailyRecordRepository,
    InMemoryDashboardRepository,
    InMemoryStore,
    InMemoryUserRepository,
)

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "admin-password"
JWT_SECRET = "test-secret"


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        jwt_secret=JWT_SECRET,
        admin_username=ADMIN_USERNAME,
        admin_password=ADMIN_PASSWORD,
        bcrypt_rounds=4,
        database_backend="sqlite",
        database_path=str(tmp_path / "dashboard.sqlite"),
    )


@pytest.fixture
def hasher() -> PasswordHasher:
    return PasswordHasher(rounds=4)


@pytest.fixture
def tokens() -> TokenCodec:
    return TokenCodec(secret=JWT_SECRET)


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def container(
    settings: Settings,
    hasher: PasswordHasher,
    tokens: TokenCodec,
    store: InMemoryStore,
) -> AppContainer:
    auth_service = AuthService(
        repository=InMemoryUserRepository(), hasher=hasher, tokens=tokens
    )
    attraction_repository = InMemoryAttractionRepository(store)

    def initialize() -> None:
        auth_service.ensure_admin(ADMIN_USERNAME, ADMIN_PASSWORD)

    initialize()
    return AppContainer(
        settings=settings,
        auth_service=auth_service,
        attraction_service=AttractionService(attraction_repository),
        daily_record_service=DailyRecordService(
            repository=InMemoryDailyRecordRepository(store),
            attraction_repository=attraction_repository,
        ),
        dashboard_service=DashboardService(InMemoryDashboardRepository(store)),
        initialize=initialize,
    )


@pytest.fixture
def client(container: AppContainer) -> TestClient:
    return TestClient(create_app(container))


@pytest.fixture
def auth_headers(client: TestClient) -> dict[str, str]:
    response = client.post(
        "/api/login", json={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD}
    )
    return {"Authorization": f"Bearer {response.json()['token']}"}


@pytest.fixture
def sqlite_client(settings: Settings) -> Iterator[TestClient]:
    with TestClient(create_app(build_container(settings))) as test_client:
        yield test_client
