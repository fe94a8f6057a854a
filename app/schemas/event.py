"""Event API schemas."""

from datetime import date as date_type, datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from app.schemas.common import PatchRequest
from app.schemas.ticket import TicketResponse


class EventCreateRequest(BaseModel):
    """Request body for POST /events.

    date is a string checked by EventDate: an ISO calendar date (2024-11-15)
    or an ISO datetime (2024-11-15T18:00:00), of which only the date is kept.
    """

    org_id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    date: str
    location: str = Field(..., min_length=1, max_length=255)
    category: str = Field(..., min_length=1, max_length=100)


class EventUpdateRequest(PatchRequest):
    """Request body for PUT /events/{id} (partial). org_id moves the event to another organization."""

    org_id: str | None = Field(default=None, min_length=1)
    name: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = Field(default=None, min_length=1)
    date: str | None = None
    location: str | None = Field(default=None, min_length=1, max_length=255)
    category: str | None = Field(default=None, min_length=1, max_length=100)


class EventResponse(BaseModel):
    """Event as returned by the API."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    event_id: str
    org_id: str
    name: str
    description: str
    date: date_type
    location: str
    category: str
    created_at: datetime | None = Field(
        default=None,
        validation_alias=AliasChoices("created_at", "createdAt"),
        serialization_alias="createdAt",
    )
    updated_at: datetime | None = Field(
        default=None,
        validation_alias=AliasChoices("updated_at", "updatedAt"),
        serialization_alias="updatedAt",
    )


class EventDetailResponse(EventResponse):
    """GET /events/{id}: the event with its tickets."""

    tickets: list[TicketResponse] = Field(default_factory=list)
