"""Event operations: create, get, list, search, update, cascading delete."""

from __future__ import annotations

from dataclasses import asdict

from app.application.dtos.cascade import CascadeResult
from app.application.dtos.event import (
    EventCreate,
    EventDetailResult,
    EventPatch,
    EventResult,
    EventSearch,
)
from app.application.interfaces.repositories import (
    IEventRepository,
    IOrganizationRepository,
    ITicketRepository,
)
from app.application.services.field_validators import validate_event
from app.application.use_cases.cascade import cascade_delete_event
from app.domain.exceptions import ForeignKeyViolationException, ResourceNotFoundException


class EventService:
    """Create, query and search events. Every event references an existing organization."""

    def __init__(
        self,
        event_repo: IEventRepository,
        org_repo: IOrganizationRepository,
        ticket_repo: ITicketRepository,
    ) -> None:
        self.event_repo = event_repo
        self.org_repo = org_repo
        self.ticket_repo = ticket_repo

    async def _require_organization(self, org_id: str) -> None:
        if not await self.org_repo.exists(org_id):
            raise ForeignKeyViolationException("org_id", "Organization", org_id)

    async def create_event(self, data: EventCreate) -> EventResult:
        """Validate fields, check the organization exists, then persist."""
        cleaned = validate_event(asdict(data))
        await self._require_organization(cleaned["org_id"])
        return await self.event_repo.create_event(
            org_id=cleaned["org_id"],
            name=cleaned["name"],
            description=cleaned["description"],
            event_date=cleaned["date"],
            location=cleaned["location"],
            category=cleaned["category"],
        )

    async def get_event(self, event_id: str) -> EventResult:
        """Return event by id; else raise ResourceNotFoundException."""
        event = await self.event_repo.get_by_id(event_id)
        if not event:
            raise ResourceNotFoundException("Event", event_id)
        return event

    async def get_event_with_tickets(self, event_id: str) -> EventDetailResult:
        """Return event plus the tickets it owns."""
        event = await self.get_event(event_id)
        tickets = await self.ticket_repo.list_by_event(event_id)
        return EventDetailResult(**asdict(event), tickets=tuple(tickets))

    async def list_events(self) -> list[EventResult]:
        return await self.event_repo.list_all()

    async def search_events(self, filters: EventSearch) -> list[EventResult]:
        """Filter by category (case-insensitive exact) and location (case-insensitive substring).

        Empty filters are ignored; with none, every event is returned.
        """
        if filters.is_empty:
            return await self.event_repo.list_all()
        return await self.event_repo.search(
            category=filters.category, location=filters.location
        )

    async def update_event(self, event_id: str, patch: EventPatch) -> EventResult:
        """Apply supplied fields only. A new org_id must reference an existing organization."""
        changes = validate_event(patch.changes(), partial=True)
        current = await self.get_event(event_id)
        if not changes:
            return current
        if "org_id" in changes and changes["org_id"] != current.org_id:
            await self._require_organization(changes["org_id"])
        updated = await self.event_repo.update_event(event_id, **changes)
        if not updated:
            raise ResourceNotFoundException("Event", event_id)
        return updated

    async def delete_event(self, event_id: str) -> CascadeResult:
        """Delete the event with its tickets."""
        return await cascade_delete_event(self.event_repo, self.ticket_repo, event_id=event_id)
