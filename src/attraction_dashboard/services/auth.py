"""Login, token verification and admin bootstrap."""

import logging
from dataclasses import dataclass
from typing import Protocol

from attraction_dashboard.domain.errors import InvalidCredentials, Unauthenticated
from attraction_dashboard.domain.users import LoginResult, TokenClaims, UserRecord
from attraction_dashboard.services.security import PasswordHasher, TokenCodec

logger = logging.getLogger(__name__)


class UserRepository(Protocol):
    """Persistence interface for credentials."""

    def get_by_username(self, username: str) -> UserRecord | None:
        """Return the user with the exact username, if present."""

    def create_user(self, username: str, password_hash: str) -> UserRecord:
        """Create and return a new user record."""


@dataclass
class AuthService:
    """Application service for authentication."""

    repository: UserRepository
    hasher: PasswordHasher
    tokens: TokenCodec

    def login(self, username: str, password: str) -> LoginResult:
        """Check credentials and issue a token.

        Unknown usernames and wrong passwords raise the same error so callers
        cannot tell which accounts exist.
        """
        user = self.repository.get_by_username(username)
        if user is None or not self.hasher.verify(password, user.password_hash):
            logger.warning("Rejected login attempt for %r", username)
            raise InvalidCredentials()
        claims = TokenClaims(id=user.id, username=user.username)
        return LoginResult(token=self.tokens.issue(claims), user=claims)

    def authenticate(self, authorization: str | None) -> TokenClaims:
        """Resolve an Authorization header into identity claims."""
        token = _extract_bearer_token(authorization)
        if not token:
            raise Unauthenticated()
        return self.tokens.verify(token)

    def ensure_admin(self, username: str, password: str) -> bool:
        """Seed the bootstrap administrator, returning whether it was created."""
        if self.repository.get_by_username(username) is not None:
            return False
        self.repository.create_user(username, self.hasher.hash(password))
        logger.info("Created bootstrap user %r", username)
        return True


def _extract_bearer_token(authorization: str | None) -> str | None:
    if not authorization:
        return None
    parts = authorization.split()
    if len(parts) < 2:  # noqa: PLR2004
        return None
    return parts[1]
