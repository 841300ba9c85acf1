"""Domain models for attractions."""

from dataclasses import dataclass
from datetime import datetime

ATTRACTION_IN_USE = "Cannot delete an attraction that has daily data recorded"


@dataclass(frozen=True)
class Attraction:
    """A venue or event that QR codes and sales are tracked against."""

    id: int
    name: str
    created_at: datetime | None = None
