"""Dependency container wiring for the application."""

from collections.abc import Callable
from dataclasses import dataclass

from supabase import create_client

from attraction_dashboard.adapters.sqlite_attraction_repository import (
    SqliteAttractionRepository,
)
from attraction_dashboard.adapters.sqlite_daily_record_repository import (
    SqliteDailyRecordRepository,
)
from attraction_dashboard.adapters.sqlite_dashboard_repository import (
    SqliteDashboardRepository,
)
from attraction_dashboard.adapters.sqlite_database import SqliteDatabase
from attraction_dashboard.adapters.sqlite_user_repository import SqliteUserRepository
from attraction_dashboard.adapters.supabase_attraction_repository import (
    SupabaseAttractionRepository,
)
from attraction_dashboard.adapters.supabase_daily_record_repository import (
    SupabaseDailyRecordRepository,
)
from attraction_dashboard.adapters.supabase_dashboard_repository import (
    SupabaseDashboardRepository,
)
from attraction_dashboard.adapters.supabase_user_repository import (
    SupabaseUserRepository,
)
from attraction_dashboard.config import Settings
from attraction_dashboard.services.attractions import (
    AttractionRepository,
    AttractionService,
)
from attraction_dashboard.services.auth import AuthService, UserRepository
from attraction_dashboard.services.daily_records import (
    DailyRecordRepository,
    DailyRecordService,
)
from attraction_dashboard.services.dashboard import (
    DashboardRepository,
    DashboardService,
)
from attraction_dashboard.services.security import PasswordHasher, TokenCodec

SQLITE_BACKEND = "sqlite"
SUPABASE_BACKEND = "supabase"


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    auth_service: AuthService
    attraction_service: AttractionService
    daily_record_service: DailyRecordService
    dashboard_service: DashboardService
    initialize: Callable[[], None]


@dataclass
class _Repositories:
    users: UserRepository
    attractions: AttractionRepository
    daily_records: DailyRecordRepository
    dashboard: DashboardRepository
    prepare_schema: Callable[[], None]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    repositories = _build_repositories(resolved_settings)
    auth_service = AuthService(
        repository=repositories.users,
        hasher=PasswordHasher(rounds=resolved_settings.bcrypt_rounds),
        tokens=TokenCodec(
            secret=resolved_settings.jwt_secret,
            algorithm=resolved_settings.jwt_algorithm,
            ttl=resolved_settings.token_ttl(),
        ),
    )

    def initialize() -> None:
        repositories.prepare_schema()
        auth_service.ensure_admin(
            resolved_settings.admin_username, resolved_settings.admin_password
        )

    return AppContainer(
        settings=resolved_settings,
        auth_service=auth_service,
        attraction_service=AttractionService(repositories.attractions),
        daily_record_service=DailyRecordService(
            repository=repositories.daily_records,
            attraction_repository=repositories.attractions,
        ),
        dashboard_service=DashboardService(repositories.dashboard),
        initialize=initialize,
    )


def _build_repositories(settings: Settings) -> _Repositories:
    backend = settings.database_backend.lower()
    if backend == SQLITE_BACKEND:
        database = SqliteDatabase(settings.database_path)
        return _Repositories(
            users=SqliteUserRepository(database),
            attractions=SqliteAttractionRepository(database),
            daily_records=SqliteDailyRecordRepository(database),
            dashboard=SqliteDashboardRepository(database),
            prepare_schema=database.initialize,
        )
    if backend == SUPABASE_BACKEND:
        if not settings.supabase_url or not settings.supabase_service_key:
            raise ValueError(
                "supabase_url and supabase_service_key are required "
                "for the supabase backend"
            )
        client = create_client(settings.supabase_url, settings.supabase_service_key)

        def prepare_schema() -> None:
            # Tables come from supabase/migrations.
            return None

        return _Repositories(
            users=SupabaseUserRepository(client),
            attractions=SupabaseAttractionRepository(client),
            daily_records=SupabaseDailyRecordRepository(client),
            dashboard=SupabaseDashboardRepository(client),
            prepare_schema=prepare_schema,
        )
    raise ValueError(f"Unknown database backend: {settings.database_backend}")
