"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() providers that build application services from
infrastructure repositories. Routes depend only on these providers.
Reads use get_db; writes use get_db_transactional (commit on success,
rollback on any exception).
"""

from app.api.v1.dependencies.event import get_event_service, get_event_service_for_write
from app.api.v1.dependencies.organization import (
    get_organization_service,
    get_organization_service_for_write,
)
from app.api.v1.dependencies.ticket import get_ticket_service, get_ticket_service_for_write

__all__ = [
    "get_event_service",
    "get_event_service_for_write",
    "get_organization_service",
    "get_organization_service_for_write",
    "get_ticket_service",
    "get_ticket_service_for_write",
]
