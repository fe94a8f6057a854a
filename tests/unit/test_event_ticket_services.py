"""EventService and TicketService unit tests with mocked repos (foreign keys, re-parenting, search)."""

from datetime import date
from unittest.mock import AsyncMock

import pytest

from app.application.dtos.event import EventCreate, EventPatch, EventResult, EventSearch
from app.application.dtos.ticket import TicketCreate, TicketPatch, TicketResult
from app.application.use_cases.events import EventService
from app.application.use_cases.tickets import TicketService
from app.domain.exceptions import (
    ForeignKeyViolationException,
    ResourceNotFoundException,
    ValidationException,
)


def _event(**overrides) -> EventResult:
    values = {
        "event_id": "ev1",
        "org_id": "org1",
        "name": "Tech Conference 2024",
        "description": "Annual tech conference",
        "date": date(2024, 11, 15),
        "location": "Convention Center",
        "category": "Technology",
    }
    values.update(overrides)
    return EventResult(**values)


def _ticket(**overrides) -> TicketResult:
    values = {
        "ticket_id": "t1",
        "event_id": "ev1",
        "type": "Regular",
        "price": 100.0,
        "quantity_available": 50,
    }
    values.update(overrides)
    return TicketResult(**values)


@pytest.fixture
def event_service_mocks():
    event_repo = AsyncMock()
    org_repo = AsyncMock()
    ticket_repo = AsyncMock()
    svc = EventService(event_repo, org_repo, ticket_repo=ticket_repo)
    return svc, event_repo, org_repo, ticket_repo


@pytest.fixture
def ticket_service_mocks():
    ticket_repo = AsyncMock()
    event_repo = AsyncMock()
    return TicketService(ticket_repo, event_repo), ticket_repo, event_repo


async def test_create_event_unknown_org_is_foreign_key_error(event_service_mocks) -> None:
    """Unknown org_id fails with FOREIGN_KEY_VIOLATION and nothing is created."""
    svc, event_repo, org_repo, _ = event_service_mocks
    org_repo.exists = AsyncMock(return_value=False)

    with pytest.raises(ForeignKeyViolationException):
        await svc.create_event(
            EventCreate(
                org_id="missing",
                name="X",
                description="Y",
                date="2024-11-15",
                location="Z",
                category="Technology",
            )
        )
    event_repo.create_event.assert_not_awaited()


async def test_create_event_passes_parsed_date(event_service_mocks) -> None:
    svc, event_repo, org_repo, _ = event_service_mocks
    org_repo.exists = AsyncMock(return_value=True)
    event_repo.create_event = AsyncMock(return_value=_event())

    await svc.create_event(
        EventCreate(
            org_id="org1",
            name="Tech Conference 2024",
            description="Annual tech conference",
            date="2024-11-15",
            location="Convention Center",
            category="Technology",
        )
    )

    kwargs = event_repo.create_event.await_args.kwargs
    assert kwargs["event_date"] == date(2024, 11, 15)
    assert kwargs["org_id"] == "org1"


async def test_create_event_invalid_date_checked_before_foreign_key(event_service_mocks) -> None:
    svc, _, org_repo, _ = event_service_mocks

    with pytest.raises(ValidationException):
        await svc.create_event(
            EventCreate(
                org_id="org1",
                name="X",
                description="Y",
                date="2024-02-30",
                location="Z",
                category="C",
            )
        )
    org_repo.exists.assert_not_awaited()


async def test_update_event_reparent_requires_existing_org(event_service_mocks) -> None:
    svc, event_repo, org_repo, _ = event_service_mocks
    event_repo.get_by_id = AsyncMock(return_value=_event())
    org_repo.exists = AsyncMock(return_value=False)

    with pytest.raises(ForeignKeyViolationException):
        await svc.update_event("ev1", EventPatch(org_id="org-missing"))
    event_repo.update_event.assert_not_awaited()


async def test_update_event_same_org_skips_parent_check(event_service_mocks) -> None:
    svc, event_repo, org_repo, _ = event_service_mocks
    event_repo.get_by_id = AsyncMock(return_value=_event())
    event_repo.update_event = AsyncMock(return_value=_event(name="Renamed"))

    result = await svc.update_event("ev1", EventPatch(org_id="org1", name="Renamed"))

    assert result.name == "Renamed"
    org_repo.exists.assert_not_awaited()


async def test_update_event_not_found(event_service_mocks) -> None:
    svc, event_repo, _, _ = event_service_mocks
    event_repo.get_by_id = AsyncMock(return_value=None)

    with pytest.raises(ResourceNotFoundException):
        await svc.update_event("missing", EventPatch(name="X"))


async def test_search_without_filters_lists_everything(event_service_mocks) -> None:
    svc, event_repo, _, _ = event_service_mocks
    event_repo.list_all = AsyncMock(return_value=[_event()])

    result = await svc.search_events(EventSearch(category="  ", location=None))

    assert result == [_event()]
    event_repo.search.assert_not_awaited()


async def test_search_with_filters_delegates_to_repo(event_service_mocks) -> None:
    svc, event_repo, _, _ = event_service_mocks
    event_repo.search = AsyncMock(return_value=[])

    await svc.search_events(EventSearch(category="technology"))

    event_repo.search.assert_awaited_once_with(category="technology", location=None)


async def test_create_ticket_unknown_event_is_foreign_key_error(ticket_service_mocks) -> None:
    svc, ticket_repo, event_repo = ticket_service_mocks
    event_repo.exists = AsyncMock(return_value=False)

    with pytest.raises(ForeignKeyViolationException) as exc_info:
        await svc.create_ticket(
            TicketCreate(event_id="missing", type="VIP", price=10, quantity_available=1)
        )
    assert exc_info.value.details["field"] == "event_id"
    ticket_repo.create_ticket.assert_not_awaited()


async def test_create_ticket_negative_price_rejected(ticket_service_mocks) -> None:
    svc, ticket_repo, _ = ticket_service_mocks

    with pytest.raises(ValidationException) as exc_info:
        await svc.create_ticket(
            TicketCreate(event_id="ev1", type="VIP", price=-1, quantity_available=1)
        )
    assert [e.field for e in exc_info.value.errors] == ["price"]
    ticket_repo.create_ticket.assert_not_awaited()


async def test_create_ticket_price_zero_accepted(ticket_service_mocks) -> None:
    svc, ticket_repo, event_repo = ticket_service_mocks
    event_repo.exists = AsyncMock(return_value=True)
    ticket_repo.create_ticket = AsyncMock(return_value=_ticket(price=0.0))

    result = await svc.create_ticket(
        TicketCreate(event_id="ev1", type="Free", price=0, quantity_available=10)
    )

    assert result.price == 0.0
    ticket_repo.create_ticket.assert_awaited_once_with(
        event_id="ev1", type="Free", price=0.0, quantity_available=10
    )


async def test_update_ticket_reparent_checks_new_event(ticket_service_mocks) -> None:
    svc, ticket_repo, event_repo = ticket_service_mocks
    ticket_repo.get_by_id = AsyncMock(return_value=_ticket())
    event_repo.exists = AsyncMock(return_value=True)
    ticket_repo.update_ticket = AsyncMock(return_value=_ticket(event_id="ev2"))

    result = await svc.update_ticket("t1", TicketPatch(event_id="ev2"))

    assert result.event_id == "ev2"
    event_repo.exists.assert_awaited_once_with("ev2")


async def test_delete_ticket_not_found(ticket_service_mocks) -> None:
    svc, ticket_repo, _ = ticket_service_mocks
    ticket_repo.delete_by_id = AsyncMock(return_value=0)

    with pytest.raises(ResourceNotFoundException):
        await svc.delete_ticket("missing")


def test_event_service_requires_ticket_repository() -> None:
    with pytest.raises(TypeError):
        EventService(AsyncMock(), AsyncMock())  # type: ignore[call-arg]
