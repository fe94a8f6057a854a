"""OrganizationService unit tests with mocked repos."""

from datetime import date
from unittest.mock import AsyncMock

import pytest

from app.application.dtos.cascade import CascadeResult
from app.application.dtos.event import EventResult
from app.application.dtos.organization import (
    OrganizationCreate,
    OrganizationDetailResult,
    OrganizationPatch,
    OrganizationResult,
)
from app.application.use_cases.organizations import OrganizationService
from app.domain.exceptions import ResourceNotFoundException, ValidationException


def _org(**overrides) -> OrganizationResult:
    values = {
        "org_id": "org1",
        "name": "Tech United",
        "description": "Promotes technology innovation",
        "contact_email": "info@techunited.com",
    }
    values.update(overrides)
    return OrganizationResult(**values)


@pytest.fixture
def org_service_mocks():
    """OrganizationService with mocked org, event and ticket repos."""
    org_repo = AsyncMock()
    event_repo = AsyncMock()
    ticket_repo = AsyncMock()
    svc = OrganizationService(org_repo, event_repo=event_repo, ticket_repo=ticket_repo)
    return svc, org_repo, event_repo, ticket_repo


async def test_create_organization_validates_then_persists(org_service_mocks) -> None:
    svc, org_repo, _, _ = org_service_mocks
    org_repo.create_organization = AsyncMock(return_value=_org())

    result = await svc.create_organization(
        OrganizationCreate(
            name="Tech United",
            description="Promotes technology innovation",
            contact_email="info@techunited.com",
        )
    )

    assert result.org_id == "org1"
    org_repo.create_organization.assert_awaited_once_with(
        name="Tech United",
        description="Promotes technology innovation",
        contact_email="info@techunited.com",
    )


async def test_create_organization_invalid_email_never_reaches_repo(org_service_mocks) -> None:
    svc, org_repo, _, _ = org_service_mocks

    with pytest.raises(ValidationException):
        await svc.create_organization(
            OrganizationCreate(name="X", description="Y", contact_email="not-an-email")
        )
    org_repo.create_organization.assert_not_awaited()


async def test_get_organization_not_found(org_service_mocks) -> None:
    svc, org_repo, _, _ = org_service_mocks
    org_repo.get_by_id = AsyncMock(return_value=None)

    with pytest.raises(ResourceNotFoundException) as exc_info:
        await svc.get_organization("missing")
    assert exc_info.value.details["resource_id"] == "missing"


async def test_get_organization_with_events_nests_children(org_service_mocks) -> None:
    svc, org_repo, event_repo, _ = org_service_mocks
    org_repo.get_by_id = AsyncMock(return_value=_org())
    event = EventResult(
        event_id="ev1",
        org_id="org1",
        name="AI Workshop",
        description="Hands-on AI workshop",
        date=date(2024, 12, 1),
        location="Tech United HQ",
        category="Technology",
    )
    event_repo.list_by_org = AsyncMock(return_value=[event])

    detail = await svc.get_organization_with_events("org1")

    assert isinstance(detail, OrganizationDetailResult)
    assert detail.name == "Tech United"
    assert detail.events == (event,)


async def test_update_organization_sends_only_supplied_fields(org_service_mocks) -> None:
    """Fields left as None in the patch are not passed to the repository."""
    svc, org_repo, _, _ = org_service_mocks
    org_repo.update_organization = AsyncMock(return_value=_org(name="Renamed"))

    result = await svc.update_organization("org1", OrganizationPatch(name="Renamed"))

    assert result.name == "Renamed"
    org_repo.update_organization.assert_awaited_once_with("org1", name="Renamed")


async def test_update_organization_empty_patch_returns_current(org_service_mocks) -> None:
    svc, org_repo, _, _ = org_service_mocks
    org_repo.get_by_id = AsyncMock(return_value=_org())

    result = await svc.update_organization("org1", OrganizationPatch())

    assert result == _org()
    org_repo.update_organization.assert_not_awaited()


async def test_update_organization_not_found(org_service_mocks) -> None:
    svc, org_repo, _, _ = org_service_mocks
    org_repo.update_organization = AsyncMock(return_value=None)

    with pytest.raises(ResourceNotFoundException):
        await svc.update_organization("missing", OrganizationPatch(name="X"))


async def test_delete_organization_cascades(org_service_mocks) -> None:
    svc, org_repo, event_repo, ticket_repo = org_service_mocks
    org_repo.exists = AsyncMock(return_value=True)
    org_repo.delete_by_id = AsyncMock(return_value=1)
    event_repo.ids_by_org = AsyncMock(return_value=["ev1", "ev2"])
    event_repo.delete_by_org = AsyncMock(return_value=2)
    event_repo.count_by_org = AsyncMock(return_value=0)
    ticket_repo.delete_by_event_ids = AsyncMock(return_value=3)
    ticket_repo.count_by_event_ids = AsyncMock(return_value=0)

    result = await svc.delete_organization("org1")

    assert result == CascadeResult(organizations=1, events=2, tickets=3)
    ticket_repo.delete_by_event_ids.assert_awaited_once_with(["ev1", "ev2"])


def test_event_and_ticket_repositories_are_required() -> None:
    with pytest.raises(TypeError):
        OrganizationService(AsyncMock())  # type: ignore[call-arg]
    with pytest.raises(TypeError):
        OrganizationService(AsyncMock(), event_repo=AsyncMock())  # type: ignore[call-arg]
