"""Reference dataset seeding (runs only against an empty database)."""

from __future__ import annotations

import logging
from typing import TypedDict

from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.event import EventCreate
from app.application.dtos.organization import OrganizationCreate
from app.application.dtos.ticket import TicketCreate
from app.application.use_cases.events import EventService
from app.application.use_cases.organizations import OrganizationService
from app.application.use_cases.tickets import TicketService
from app.infrastructure.persistence.repositories import (
    EventRepository,
    OrganizationRepository,
    TicketRepository,
)

logger = logging.getLogger(__name__)


class OrganizationSeed(TypedDict):
    key: str
    name: str
    description: str
    contact_email: str


class EventSeed(TypedDict):
    key: str
    org: str
    name: str
    description: str
    date: str
    location: str
    category: str


class TicketSeed(TypedDict):
    event: str
    type: str
    price: float
    quantity_available: int


SEED_ORGANIZATIONS: list[OrganizationSeed] = [
    {
        "key": "tech_united",
        "name": "Tech United",
        "description": "Promotes technology innovation",
        "contact_email": "info@techunited.com",
    },
    {
        "key": "arts_collective",
        "name": "Arts Collective",
        "description": "Supporting local artists",
        "contact_email": "info@artscollective.org",
    },
]

SEED_EVENTS: list[EventSeed] = [
    {
        "key": "tech_conference",
        "org": "tech_united",
        "name": "Tech Conference 2024",
        "description": "Annual tech conference",
        "date": "2024-11-15",
        "location": "Convention Center",
        "category": "Technology",
    },
    {
        "key": "ai_workshop",
        "org": "tech_united",
        "name": "AI Workshop",
        "description": "Hands-on AI workshop",
        "date": "2024-12-01",
        "location": "Tech United HQ",
        "category": "Technology",
    },
    {
        "key": "art_exhibition",
        "org": "arts_collective",
        "name": "Art Exhibition",
        "description": "Showcasing local artists",
        "date": "2024-10-27",
        "location": "City Gallery",
        "category": "Arts",
    },
]

SEED_TICKETS: list[TicketSeed] = [
    {"event": "tech_conference", "type": "Regular", "price": 100, "quantity_available": 50},
    {"event": "tech_conference", "type": "VIP", "price": 250, "quantity_available": 20},
    {"event": "ai_workshop", "type": "General Admission", "price": 50, "quantity_available": 100},
    {"event": "art_exhibition", "type": "Standard", "price": 20, "quantity_available": 75},
]


class SeedService:
    """Insert the reference organizations, events and tickets when none exist.

    Goes through the regular services so seeded rows pass the same
    validation and foreign-key checks as API writes. The caller owns the
    transaction.
    """

    def __init__(self, db: AsyncSession) -> None:
        self.org_repo = OrganizationRepository(db)
        self.event_repo = EventRepository(db)
        self.ticket_repo = TicketRepository(db)

    async def seed_if_empty(self) -> bool:
        """Seed the reference dataset; return False without writing if any organization exists."""
        if await self.org_repo.count() > 0:
            logger.info("Seed skipped: organizations table is not empty")
            return False

        org_service = OrganizationService(self.org_repo, self.event_repo, self.ticket_repo)
        event_service = EventService(self.event_repo, self.org_repo, self.ticket_repo)
        ticket_service = TicketService(self.ticket_repo, self.event_repo)

        org_ids: dict[str, str] = {}
        for org in SEED_ORGANIZATIONS:
            created = await org_service.create_organization(
                OrganizationCreate(
                    name=org["name"],
                    description=org["description"],
                    contact_email=org["contact_email"],
                )
            )
            org_ids[org["key"]] = created.org_id

        event_ids: dict[str, str] = {}
        for ev in SEED_EVENTS:
            created_event = await event_service.create_event(
                EventCreate(
                    org_id=org_ids[ev["org"]],
                    name=ev["name"],
                    description=ev["description"],
                    date=ev["date"],
                    location=ev["location"],
                    category=ev["category"],
                )
            )
            event_ids[ev["key"]] = created_event.event_id

        for ticket in SEED_TICKETS:
            await ticket_service.create_ticket(
                TicketCreate(
                    event_id=event_ids[ticket["event"]],
                    type=ticket["type"],
                    price=ticket["price"],
                    quantity_available=ticket["quantity_available"],
                )
            )

        logger.info(
            "Seeded %d organizations, %d events, %d tickets",
            len(SEED_ORGANIZATIONS),
            len(SEED_EVENTS),
            len(SEED_TICKETS),
        )
        return True
