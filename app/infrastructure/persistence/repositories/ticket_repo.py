"""Ticket repository. Returns application DTOs."""

from typing import Any

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.ticket import TicketResult
from app.infrastructure.persistence.models.ticket import Ticket
from app.infrastructure.persistence.repositories.base import BaseRepository

_UPDATABLE = {"event_id", "type", "price", "quantity_available"}


def _to_result(t: Ticket) -> TicketResult:
    """Map ORM Ticket to TicketResult."""
    return TicketResult(
        ticket_id=t.ticket_id,
        event_id=t.event_id,
        type=t.type,
        price=t.price,
        quantity_available=t.quantity_available,
        created_at=t.created_at,
        updated_at=t.updated_at,
    )


class TicketRepository(BaseRepository[Ticket]):
    """Ticket storage. Tickets belong to exactly one event."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Ticket)

    async def get_by_id(self, ticket_id: str) -> TicketResult | None:
        row = await super().get_by_id(ticket_id)
        return _to_result(row) if row else None

    async def list_all(self) -> list[TicketResult]:
        return [_to_result(t) for t in await self.get_all()]

    async def list_by_event(self, event_id: str) -> list[TicketResult]:
        result = await self.db.execute(
            select(Ticket)
            .where(Ticket.event_id == event_id)
            .order_by(Ticket.created_at.asc(), Ticket.ticket_id.asc())
        )
        return [_to_result(t) for t in result.scalars().all()]

    async def create_ticket(
        self, event_id: str, type: str, price: float, quantity_available: int
    ) -> TicketResult:
        entity = Ticket(
            event_id=event_id,
            type=type,
            price=price,
            quantity_available=quantity_available,
        )
        created = await self.create(entity)
        return _to_result(created)

    async def update_ticket(self, ticket_id: str, **changes: Any) -> TicketResult | None:
        """Apply changes; event_id re-parents the ticket (caller checks the parent exists)."""
        updated = await self.apply_changes(ticket_id, changes, _UPDATABLE)
        return _to_result(updated) if updated else None

    async def delete_by_id(self, ticket_id: str) -> int:
        result = await self.db.execute(delete(Ticket).where(Ticket.ticket_id == ticket_id))
        return result.rowcount or 0

    async def delete_by_event_ids(self, event_ids: list[str]) -> int:
        if not event_ids:
            return 0
        result = await self.db.execute(delete(Ticket).where(Ticket.event_id.in_(event_ids)))
        return result.rowcount or 0

    async def count_by_event_ids(self, event_ids: list[str]) -> int:
        if not event_ids:
            return 0
        result = await self.db.execute(
            select(func.count()).select_from(Ticket).where(Ticket.event_id.in_(event_ids))
        )
        return int(result.scalar_one())
