"""Pydantic request/response schemas for the API."""

from app.schemas.common import ErrorResponse, FieldErrorItem, PatchRequest
from app.schemas.event import (
    EventCreateRequest,
    EventDetailResponse,
    EventResponse,
    EventUpdateRequest,
)
from app.schemas.health import HealthResponse, ReadinessErrorResponse, ReadinessResponse
from app.schemas.organization import (
    OrganizationCreateRequest,
    OrganizationDetailResponse,
    OrganizationResponse,
    OrganizationUpdateRequest,
)
from app.schemas.ticket import TicketCreateRequest, TicketResponse, TicketUpdateRequest

__all__ = [
    "ErrorResponse",
    "EventCreateRequest",
    "EventDetailResponse",
    "EventResponse",
    "EventUpdateRequest",
    "FieldErrorItem",
    "HealthResponse",
    "OrganizationCreateRequest",
    "OrganizationDetailResponse",
    "OrganizationResponse",
    "OrganizationUpdateRequest",
    "PatchRequest",
    "ReadinessErrorResponse",
    "ReadinessResponse",
    "TicketCreateRequest",
    "TicketResponse",
    "TicketUpdateRequest",
]
