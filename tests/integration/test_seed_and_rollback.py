"""Seeding and transactional rollback against a real SQLite database."""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.use_cases.cascade import cascade_delete_organization
from app.domain.exceptions import CascadeIncompleteException
from app.infrastructure.persistence import database
from app.infrastructure.persistence.repositories import (
    EventRepository,
    OrganizationRepository,
    TicketRepository,
)
from app.infrastructure.services import SeedService


class _StubbornTicketRepository(TicketRepository):
    """Reports a ticket left behind after every bulk delete."""

    async def count_by_event_ids(self, event_ids: list[str]) -> int:
        return 1


async def test_seed_inserts_reference_dataset(db_session: AsyncSession) -> None:
    assert await SeedService(db_session).seed_if_empty() is True

    orgs = await OrganizationRepository(db_session).list_all()
    events = await EventRepository(db_session).list_all()
    tickets = await TicketRepository(db_session).list_all()

    assert {o.name for o in orgs} == {"Tech United", "Arts Collective"}
    assert {e.name for e in events} == {"Tech Conference 2024", "AI Workshop", "Art Exhibition"}
    assert sorted((t.type, t.price, t.quantity_available) for t in tickets) == [
        ("General Admission", 50.0, 100),
        ("Regular", 100.0, 50),
        ("Standard", 20.0, 75),
        ("VIP", 250.0, 20),
    ]


async def test_seed_links_children_to_parents(db_session: AsyncSession) -> None:
    await SeedService(db_session).seed_if_empty()

    orgs = {o.name: o.org_id for o in await OrganizationRepository(db_session).list_all()}
    events = await EventRepository(db_session).list_by_org(orgs["Arts Collective"])

    assert [e.name for e in events] == ["Art Exhibition"]
    tickets = await TicketRepository(db_session).list_by_event(events[0].event_id)
    assert [t.type for t in tickets] == ["Standard"]


async def test_seed_is_skipped_when_data_exists(db_session: AsyncSession) -> None:
    service = SeedService(db_session)
    assert await service.seed_if_empty() is True
    assert await service.seed_if_empty() is False
    assert await OrganizationRepository(db_session).count() == 2


async def test_incomplete_cascade_rolls_back_everything(database_ready) -> None:
    """A failed verification leaves the organization, its events and tickets in place."""
    factory = database.get_session_factory()
    async with factory() as session:
        async with session.begin():
            await SeedService(session).seed_if_empty()

    async with factory() as session:
        orgs = await OrganizationRepository(session).list_all()
        tech = next(o for o in orgs if o.name == "Tech United")

    with pytest.raises(CascadeIncompleteException):
        async with factory() as session:
            async with session.begin():
                await cascade_delete_organization(
                    OrganizationRepository(session),
                    EventRepository(session),
                    _StubbornTicketRepository(session),
                    org_id=tech.org_id,
                )

    async with factory() as session:
        assert await OrganizationRepository(session).exists(tech.org_id)
        assert len(await EventRepository(session).list_by_org(tech.org_id)) == 2
        assert await TicketRepository(session).count() == 4
