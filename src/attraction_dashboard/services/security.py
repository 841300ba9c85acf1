"""Password hashing and bearer token helpers."""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

import bcrypt
import jwt

from attraction_dashboard.domain.errors import Forbidden
from attraction_dashboard.domain.users import TokenClaims


@dataclass
class PasswordHasher:
    """bcrypt hashing for stored credentials."""

    rounds: int = 10

    def hash(self, password: str) -> str:
        """Return a bcrypt hash for the password."""
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        """Return whether the password matches the stored hash."""
        try:
            return bcrypt.checkpw(
                password.encode("utf-8"), password_hash.encode("utf-8")
            )
        except ValueError:
            # Malformed hash or a password bcrypt refuses to process.
            return False


@dataclass
class TokenCodec:
    """Issues and verifies HS256 bearer tokens."""

    secret: str
    algorithm: str = "HS256"
    ttl: timedelta | None = None

    def issue(self, claims: TokenClaims) -> str:
        """Return a signed token for the identity claims."""
        now = datetime.now(tz=UTC)
        payload: dict[str, object] = {
            "id": claims.id,
            "username": claims.username,
            "iat": now,
        }
        if self.ttl is not None:
            payload["exp"] = now + self.ttl
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> TokenClaims:
        """Decode a token, raising Forbidden when it is not acceptable."""
        try:
            payload = jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except jwt.InvalidTokenError as exc:
            raise Forbidden() from exc
        user_id = payload.get("id")
        username = payload.get("username")
        if not isinstance(user_id, int) or not isinstance(username, str):
            raise Forbidden()
        return TokenClaims(id=user_id, username=username)
