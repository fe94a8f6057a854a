"""DTOs for organizations (no dependency on ORM)."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from app.application.dtos._patch import supplied_fields
from app.application.dtos.event import EventResult


@dataclass(frozen=True)
class OrganizationCreate:
    """Input for creating an organization. The org_id is generated by the store."""

    name: str
    description: str
    contact_email: str


@dataclass(frozen=True)
class OrganizationPatch:
    """Partial update: None fields keep their current value."""

    name: str | None = None
    description: str | None = None
    contact_email: str | None = None

    def changes(self) -> dict[str, Any]:
        return supplied_fields(self)


@dataclass(frozen=True)
class OrganizationResult:
    """Organization read-model."""

    org_id: str
    name: str
    description: str
    contact_email: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class OrganizationDetailResult(OrganizationResult):
    """Organization with the events it owns (GET /organizations/{id})."""

    events: tuple[EventResult, ...] = ()
