"""Services for managing attractions."""

import logging
from dataclasses import dataclass
from typing import Protocol

from attraction_dashboard.domain.attractions import ATTRACTION_IN_USE, Attraction
from attraction_dashboard.domain.errors import (
    ConflictError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)


class AttractionRepository(Protocol):
    """Persistence interface for attractions."""

    def list_attractions(self) -> list[Attraction]:
        """Return all attractions ordered by name."""

    def get_attraction(self, attraction_id: int) -> Attraction | None:
        """Return an attraction by id, if present."""

    def create_attraction(self, name: str) -> Attraction:
        """Create and return an attraction."""

    def count_daily_records(self, attraction_id: int) -> int:
        """Return how many daily records reference the attraction."""

    def delete_attraction(self, attraction_id: int) -> bool:
        """Delete an attraction, returning whether a row was removed."""


@dataclass
class AttractionService:
    """Application service for attraction operations."""

    repository: AttractionRepository

    def list_attractions(self) -> list[Attraction]:
        """Return attractions sorted by name."""
        return self.repository.list_attractions()

    def create_attraction(self, name: str | None) -> Attraction:
        """Create an attraction from a non-blank name."""
        cleaned = (name or "").strip()
        if not cleaned:
            raise ValidationError("Attraction name is required")
        attraction = self.repository.create_attraction(cleaned)
        logger.info("Created attraction %s (%r)", attraction.id, attraction.name)
        return attraction

    def delete_attraction(self, attraction_id: int) -> None:
        """Delete an attraction that no daily record references."""
        if self.repository.count_daily_records(attraction_id) > 0:
            raise ConflictError(ATTRACTION_IN_USE)
        if not self.repository.delete_attraction(attraction_id):
            raise NotFoundError("Attraction not found")
        logger.info("Deleted attraction %s", attraction_id)
