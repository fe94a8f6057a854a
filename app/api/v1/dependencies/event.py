"""Event service dependencies (composition root)."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.use_cases.events import EventService
from app.infrastructure.persistence.database import get_db, get_db_transactional
from app.infrastructure.persistence.repositories import (
    EventRepository,
    OrganizationRepository,
    TicketRepository,
)


def _build(db: AsyncSession) -> EventService:
    return EventService(
        EventRepository(db),
        OrganizationRepository(db),
        ticket_repo=TicketRepository(db),
    )


async def get_event_service(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> EventService:
    """Event service for reads and search (no transaction)."""
    return _build(db)


async def get_event_service_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> EventService:
    """Event service for create/update/delete (one transaction per request)."""
    return _build(db)
