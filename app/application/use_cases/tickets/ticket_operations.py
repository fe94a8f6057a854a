"""Ticket operations: create, get, list, update, delete."""

from __future__ import annotations

from dataclasses import asdict

from app.application.dtos.ticket import TicketCreate, TicketPatch, TicketResult
from app.application.interfaces.repositories import IEventRepository, ITicketRepository
from app.application.services.field_validators import validate_ticket
from app.domain.exceptions import ForeignKeyViolationException, ResourceNotFoundException


class TicketService:
    """Create and query tickets. Every ticket references an existing event."""

    def __init__(self, ticket_repo: ITicketRepository, event_repo: IEventRepository) -> None:
        self.ticket_repo = ticket_repo
        self.event_repo = event_repo

    async def _require_event(self, event_id: str) -> None:
        if not await self.event_repo.exists(event_id):
            raise ForeignKeyViolationException("event_id", "Event", event_id)

    async def create_ticket(self, data: TicketCreate) -> TicketResult:
        """Validate price and quantity, check the event exists, then persist."""
        cleaned = validate_ticket(asdict(data))
        await self._require_event(cleaned["event_id"])
        return await self.ticket_repo.create_ticket(**cleaned)

    async def get_ticket(self, ticket_id: str) -> TicketResult:
        ticket = await self.ticket_repo.get_by_id(ticket_id)
        if not ticket:
            raise ResourceNotFoundException("Ticket", ticket_id)
        return ticket

    async def list_tickets(self) -> list[TicketResult]:
        return await self.ticket_repo.list_all()

    async def update_ticket(self, ticket_id: str, patch: TicketPatch) -> TicketResult:
        """Apply supplied fields only. A new event_id must reference an existing event."""
        changes = validate_ticket(patch.changes(), partial=True)
        current = await self.get_ticket(ticket_id)
        if not changes:
            return current
        if "event_id" in changes and changes["event_id"] != current.event_id:
            await self._require_event(changes["event_id"])
        updated = await self.ticket_repo.update_ticket(ticket_id, **changes)
        if not updated:
            raise ResourceNotFoundException("Ticket", ticket_id)
        return updated

    async def delete_ticket(self, ticket_id: str) -> None:
        """Delete one ticket; raise ResourceNotFoundException if it does not exist."""
        if not await self.ticket_repo.delete_by_id(ticket_id):
            raise ResourceNotFoundException("Ticket", ticket_id)
