"""Event repository. Returns application DTOs."""

from datetime import date
from typing import Any

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.event import EventResult
from app.infrastructure.persistence.models.event import Event
from app.infrastructure.persistence.repositories.base import BaseRepository

_UPDATABLE = {"org_id", "name", "description", "date", "location", "category"}


def _to_result(e: Event) -> EventResult:
    """Map ORM Event to EventResult."""
    return EventResult(
        event_id=e.event_id,
        org_id=e.org_id,
        name=e.name,
        description=e.description,
        date=e.date,
        location=e.location,
        category=e.category,
        created_at=e.created_at,
        updated_at=e.updated_at,
    )


def _escape_like(value: str) -> str:
    """Escape LIKE wildcards so user input matches literally (escape char '\\')."""
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class EventRepository(BaseRepository[Event]):
    """Event storage. Events belong to exactly one organization."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Event)

    async def get_by_id(self, event_id: str) -> EventResult | None:
        row = await super().get_by_id(event_id)
        return _to_result(row) if row else None

    async def list_all(self) -> list[EventResult]:
        return [_to_result(e) for e in await self.get_all()]

    async def list_by_org(self, org_id: str) -> list[EventResult]:
        result = await self.db.execute(
            select(Event)
            .where(Event.org_id == org_id)
            .order_by(Event.created_at.asc(), Event.event_id.asc())
        )
        return [_to_result(e) for e in result.scalars().all()]

    async def search(
        self, category: str | None = None, location: str | None = None
    ) -> list[EventResult]:
        """Events matching every non-empty filter.

        category: case-insensitive exact match. location: case-insensitive
        substring match. With no filters, every event is returned.
        """
        stmt = select(Event)
        if category and category.strip():
            stmt = stmt.where(func.lower(Event.category) == category.strip().lower())
        if location and location.strip():
            pattern = f"%{_escape_like(location.strip().lower())}%"
            stmt = stmt.where(func.lower(Event.location).like(pattern, escape="\\"))
        result = await self.db.execute(
            stmt.order_by(Event.created_at.asc(), Event.event_id.asc())
        )
        return [_to_result(e) for e in result.scalars().all()]

    async def ids_by_org(self, org_id: str) -> list[str]:
        result = await self.db.execute(select(Event.event_id).where(Event.org_id == org_id))
        return list(result.scalars().all())

    async def count_by_org(self, org_id: str) -> int:
        result = await self.db.execute(
            select(func.count()).select_from(Event).where(Event.org_id == org_id)
        )
        return int(result.scalar_one())

    async def create_event(
        self,
        org_id: str,
        name: str,
        description: str,
        event_date: date,
        location: str,
        category: str,
    ) -> EventResult:
        entity = Event(
            org_id=org_id,
            name=name,
            description=description,
            date=event_date,
            location=location,
            category=category,
        )
        created = await self.create(entity)
        return _to_result(created)

    async def update_event(self, event_id: str, **changes: Any) -> EventResult | None:
        """Apply changes; org_id re-parents the event (caller checks the parent exists)."""
        updated = await self.apply_changes(event_id, changes, _UPDATABLE)
        return _to_result(updated) if updated else None

    async def delete_by_id(self, event_id: str) -> int:
        result = await self.db.execute(delete(Event).where(Event.event_id == event_id))
        return result.rowcount or 0

    async def delete_by_org(self, org_id: str) -> int:
        result = await self.db.execute(delete(Event).where(Event.org_id == org_id))
        return result.rowcount or 0
