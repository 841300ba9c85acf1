"""Application configuration."""

import os
from datetime import timedelta

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    jwt_secret: str
    jwt_algorithm: str = "HS256"
    token_ttl_minutes: int | None = 720
    admin_username: str = "admin"
    admin_password: str
    bcrypt_rounds: int = 10
    database_backend: str = "sqlite"
    database_path: str = "database.sqlite"
    supabase_url: str | None = None
    supabase_service_key: str | None = None
    api_prefix: str = "/api"
    cors_allowed_origins: str | None = "*"
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    def token_ttl(self) -> timedelta | None:
        """Return the token lifetime, or None for tokens that never expire."""
        if not self.token_ttl_minutes:
            return None
        return timedelta(minutes=self.token_ttl_minutes)


def parse_cors_origins(raw: str | None) -> list[str]:
    """Parse allowed CORS origins from env."""
    if raw is None:
        return []
    cleaned = raw.strip()
    if cleaned == "*":
        return ["*"]
    return [origin.strip() for origin in cleaned.split(",") if origin.strip()]
