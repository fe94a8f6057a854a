"""Application layer: DTOs, repository protocols, validators, use cases.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the repository interfaces.
"""

from app.application.interfaces import (
    IEventRepository,
    IOrganizationRepository,
    ITicketRepository,
)
from app.application.use_cases import EventService, OrganizationService, TicketService

__all__ = [
    "EventService",
    "IEventRepository",
    "IOrganizationRepository",
    "ITicketRepository",
    "OrganizationService",
    "TicketService",
]
