"""Domain models for dashboard users."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class UserRecord:
    """Represents a user stored in the database."""

    id: int
    username: str
    password_hash: str
    created_at: datetime | None = None


@dataclass(frozen=True)
class TokenClaims:
    """Identity claims carried by a bearer token."""

    id: int
    username: str


@dataclass(frozen=True)
class LoginResult:
    """Issued token together with the public user view."""

    token: str
    user: TokenClaims
