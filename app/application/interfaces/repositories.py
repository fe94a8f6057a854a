"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
Bulk delete methods return the number of rows removed so cascades can be verified.
"""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from app.application.dtos.event import EventResult
    from app.application.dtos.organization import OrganizationResult
    from app.application.dtos.ticket import TicketResult


class IOrganizationRepository(Protocol):
    """Protocol for organization repository (DIP)."""

    async def get_by_id(self, org_id: str) -> OrganizationResult | None:
        """Return organization by id, or None."""

    async def exists(self, org_id: str) -> bool:
        """Return whether an organization with this id exists."""

    async def list_all(self) -> list[OrganizationResult]:
        """Return every organization."""

    async def count(self) -> int:
        """Return number of organizations."""

    async def create_organization(
        self, name: str, description: str, contact_email: str
    ) -> OrganizationResult:
        """Persist a new organization with a generated org_id."""

    async def update_organization(
        self, org_id: str, **changes: Any
    ) -> OrganizationResult | None:
        """Apply changes; return None if the organization does not exist."""

    async def delete_by_id(self, org_id: str) -> int:
        """Delete the organization row only; return rows removed (0 or 1)."""


class IEventRepository(Protocol):
    """Protocol for event repository (DIP)."""

    async def get_by_id(self, event_id: str) -> EventResult | None:
        """Return event by id, or None."""

    async def exists(self, event_id: str) -> bool:
        """Return whether an event with this id exists."""

    async def list_all(self) -> list[EventResult]:
        """Return every event."""

    async def list_by_org(self, org_id: str) -> list[EventResult]:
        """Return events owned by an organization."""

    async def search(
        self, category: str | None = None, location: str | None = None
    ) -> list[EventResult]:
        """Filter by category (case-insensitive exact) and location (case-insensitive substring)."""

    async def ids_by_org(self, org_id: str) -> list[str]:
        """Return event ids owned by an organization."""

    async def count_by_org(self, org_id: str) -> int:
        """Return number of events owned by an organization."""

    async def create_event(
        self,
        org_id: str,
        name: str,
        description: str,
        event_date: date,
        location: str,
        category: str,
    ) -> EventResult:
        """Persist a new event with a generated event_id."""

    async def update_event(self, event_id: str, **changes: Any) -> EventResult | None:
        """Apply changes; return None if the event does not exist."""

    async def delete_by_id(self, event_id: str) -> int:
        """Delete the event row only; return rows removed (0 or 1)."""

    async def delete_by_org(self, org_id: str) -> int:
        """Delete every event of an organization; return rows removed."""


class ITicketRepository(Protocol):
    """Protocol for ticket repository (DIP)."""

    async def get_by_id(self, ticket_id: str) -> TicketResult | None:
        """Return ticket by id, or None."""

    async def list_all(self) -> list[TicketResult]:
        """Return every ticket."""

    async def list_by_event(self, event_id: str) -> list[TicketResult]:
        """Return tickets owned by an event."""

    async def create_ticket(
        self, event_id: str, type: str, price: float, quantity_available: int
    ) -> TicketResult:
        """Persist a new ticket with a generated ticket_id."""

    async def update_ticket(self, ticket_id: str, **changes: Any) -> TicketResult | None:
        """Apply changes; return None if the ticket does not exist."""

    async def delete_by_id(self, ticket_id: str) -> int:
        """Delete one ticket; return rows removed (0 or 1)."""

    async def delete_by_event_ids(self, event_ids: list[str]) -> int:
        """Delete every ticket whose event_id is in event_ids; return rows removed."""

    async def count_by_event_ids(self, event_ids: list[str]) -> int:
        """Return number of tickets whose event_id is in event_ids."""
