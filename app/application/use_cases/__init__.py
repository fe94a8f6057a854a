"""Application use cases: one entry point per workflow."""

from app.application.use_cases.cascade import (
    cascade_delete_event,
    cascade_delete_organization,
)
from app.application.use_cases.events import EventService
from app.application.use_cases.organizations import OrganizationService
from app.application.use_cases.tickets import TicketService

__all__ = [
    "EventService",
    "OrganizationService",
    "TicketService",
    "cascade_delete_event",
    "cascade_delete_organization",
]
