"""Application DTOs (no ORM dependency)."""

from app.application.dtos.cascade import CascadeResult
from app.application.dtos.event import (
    EventCreate,
    EventDetailResult,
    EventPatch,
    EventResult,
    EventSearch,
)
from app.application.dtos.organization import (
    OrganizationCreate,
    OrganizationDetailResult,
    OrganizationPatch,
    OrganizationResult,
)
from app.application.dtos.ticket import TicketCreate, TicketPatch, TicketResult

__all__ = [
    "CascadeResult",
    "EventCreate",
    "EventDetailResult",
    "EventPatch",
    "EventResult",
    "EventSearch",
    "OrganizationCreate",
    "OrganizationDetailResult",
    "OrganizationPatch",
    "OrganizationResult",
    "TicketCreate",
    "TicketPatch",
    "TicketResult",
]
