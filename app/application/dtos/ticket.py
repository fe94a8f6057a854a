"""DTOs for tickets (no dependency on ORM)."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from app.application.dtos._patch import supplied_fields


@dataclass(frozen=True)
class TicketCreate:
    """Input for creating a ticket under an existing event."""

    event_id: str
    type: str
    price: float | str
    quantity_available: int | str


@dataclass(frozen=True)
class TicketPatch:
    """Partial update: None fields keep their current value. event_id re-parents the ticket."""

    event_id: str | None = None
    type: str | None = None
    price: float | str | None = None
    quantity_available: int | str | None = None

    def changes(self) -> dict[str, Any]:
        return supplied_fields(self)


@dataclass(frozen=True)
class TicketResult:
    """Ticket read-model."""

    ticket_id: str
    event_id: str
    type: str
    price: float
    quantity_available: int
    created_at: datetime | None = None
    updated_at: datetime | None = None
