"""Persistence models: ORM entities and mixins."""

from app.infrastructure.persistence.models.event import Event
from app.infrastructure.persistence.models.mixins import TimestampMixin
from app.infrastructure.persistence.models.organization import Organization
from app.infrastructure.persistence.models.ticket import Ticket

__all__ = [
    "Organization",
    "Event",
    "Ticket",
    "TimestampMixin",
]
