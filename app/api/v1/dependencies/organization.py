"""Organization service dependencies (composition root)."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.use_cases.organizations import OrganizationService
from app.infrastructure.persistence.database import get_db, get_db_transactional
from app.infrastructure.persistence.repositories import (
    EventRepository,
    OrganizationRepository,
    TicketRepository,
)


def _build(db: AsyncSession) -> OrganizationService:
    return OrganizationService(
        OrganizationRepository(db),
        event_repo=EventRepository(db),
        ticket_repo=TicketRepository(db),
    )


async def get_organization_service(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> OrganizationService:
    """Organization service for reads (no transaction)."""
    return _build(db)


async def get_organization_service_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> OrganizationService:
    """Organization service for create/update/delete (one transaction per request)."""
    return _build(db)
