"""Persistence repositories. Re-exports for dependency injection."""

from app.infrastructure.persistence.repositories.base import BaseRepository
from app.infrastructure.persistence.repositories.event_repo import EventRepository
from app.infrastructure.persistence.repositories.organization_repo import (
    OrganizationRepository,
)
from app.infrastructure.persistence.repositories.ticket_repo import TicketRepository

__all__ = [
    "BaseRepository",
    "EventRepository",
    "OrganizationRepository",
    "TicketRepository",
]
