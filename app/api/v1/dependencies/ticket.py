"""Ticket service dependencies (composition root)."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.use_cases.tickets import TicketService
from app.infrastructure.persistence.database import get_db, get_db_transactional
from app.infrastructure.persistence.repositories import EventRepository, TicketRepository


async def get_ticket_service(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> TicketService:
    """Ticket service for reads (no transaction)."""
    return TicketService(TicketRepository(db), EventRepository(db))


async def get_ticket_service_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> TicketService:
    """Ticket service for create/update/delete (one transaction per request)."""
    return TicketService(TicketRepository(db), EventRepository(db))
