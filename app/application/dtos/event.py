"""DTOs for events (no dependency on ORM)."""

from dataclasses import dataclass
from datetime import date as date_type, datetime
from typing import Any

from app.application.dtos._patch import supplied_fields
from app.application.dtos.ticket import TicketResult


@dataclass(frozen=True)
class EventCreate:
    """Input for creating an event under an existing organization."""

    org_id: str
    name: str
    description: str
    date: date_type | str
    location: str
    category: str


@dataclass(frozen=True)
class EventPatch:
    """Partial update: None fields keep their current value. org_id re-parents the event."""

    org_id: str | None = None
    name: str | None = None
    description: str | None = None
    date: date_type | str | None = None
    location: str | None = None
    category: str | None = None

    def changes(self) -> dict[str, Any]:
        return supplied_fields(self)


@dataclass(frozen=True)
class EventSearch:
    """Search filters. Empty or None filters are ignored.

    category matches case-insensitively and exactly; location matches
    case-insensitively as a substring.
    """

    category: str | None = None
    location: str | None = None

    @property
    def is_empty(self) -> bool:
        return not (self.category and self.category.strip()) and not (
            self.location and self.location.strip()
        )


@dataclass(frozen=True)
class EventResult:
    """Event read-model."""

    event_id: str
    org_id: str
    name: str
    description: str
    date: date_type
    location: str
    category: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class EventDetailResult(EventResult):
    """Event with the tickets it owns (GET /events/{id})."""

    tickets: tuple[TicketResult, ...] = ()
