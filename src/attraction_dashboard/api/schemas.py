"""Pydantic models for API request payloads."""

import datetime

from pydantic import BaseModel, ConfigDict, Field

from attraction_dashboard.domain.daily_records import MAX_COUNT


class LoginRequest(BaseModel):
    """Login payload."""

    username: str
    password: str


class AttractionRequest(BaseModel):
    """Attraction creation payload."""

    name: str | None = None


class DailyDataRequest(BaseModel):
    """Daily counts payload, keyed the way the client sends it."""

    model_config = ConfigDict(populate_by_name=True)

    attraction_id: int = Field(alias="attractionId")
    date: datetime.date
    qrcodes_delivered: int = Field(
        default=0, ge=0, le=MAX_COUNT, alias="qrcodesDelivered"
    )
    sales_made: int = Field(default=0, ge=0, le=MAX_COUNT, alias="salesMade")
