"""Ticket API schemas. JSON uses quantityAvailable."""

from datetime import datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from app.domain.value_objects.core import MAX_TICKET_QUANTITY
from app.schemas.common import PatchRequest


class TicketCreateRequest(BaseModel):
    """Request body for POST /tickets."""

    model_config = ConfigDict(populate_by_name=True)

    event_id: str = Field(..., min_length=1)
    type: str = Field(..., min_length=1, max_length=100)
    price: float = Field(..., ge=0, allow_inf_nan=False)
    quantity_available: int = Field(
        ...,
        ge=0,
        le=MAX_TICKET_QUANTITY,
        validation_alias=AliasChoices("quantityAvailable", "quantity_available"),
    )


class TicketUpdateRequest(PatchRequest):
    """Request body for PUT /tickets/{id} (partial). event_id moves the ticket to another event."""

    event_id: str | None = Field(default=None, min_length=1)
    type: str | None = Field(default=None, min_length=1, max_length=100)
    price: float | None = Field(default=None, ge=0, allow_inf_nan=False)
    quantity_available: int | None = Field(
        default=None,
        ge=0,
        le=MAX_TICKET_QUANTITY,
        validation_alias=AliasChoices("quantityAvailable", "quantity_available"),
    )


class TicketResponse(BaseModel):
    """Ticket as returned by the API."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    ticket_id: str
    event_id: str
    type: str
    price: float
    quantity_available: int = Field(
        validation_alias=AliasChoices("quantity_available", "quantityAvailable"),
        serialization_alias="quantityAvailable",
    )
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
