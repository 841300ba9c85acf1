"""Domain error taxonomy."""


class DashboardError(Exception):
    """Base error carrying a client-safe message."""

    default_message = "Unexpected error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(DashboardError):
    """Raised when a required field is missing or invalid."""

    default_message = "Invalid request"


class InvalidCredentials(DashboardError):
    """Raised when a login does not match a stored user."""

    default_message = "Invalid credentials"


class Unauthenticated(DashboardError):
    """Raised when a protected request carries no token."""

    default_message = "Access token required"


class Forbidden(DashboardError):
    """Raised when a token fails verification."""

    default_message = "Invalid token"


class NotFoundError(DashboardError):
    """Raised when an update or delete affects no row."""

    default_message = "Record not found"


class ConflictError(DashboardError):
    """Raised when a write is blocked by dependent rows."""

    default_message = "Operation conflicts with existing data"


class StoreError(DashboardError):
    """Raised when the backing store fails."""

    default_message = "Internal server error"
