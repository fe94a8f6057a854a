"""Organization operations: create, get, list, update, cascading delete."""

from __future__ import annotations

from dataclasses import asdict

from app.application.dtos.cascade import CascadeResult
from app.application.dtos.organization import (
    OrganizationCreate,
    OrganizationDetailResult,
    OrganizationPatch,
    OrganizationResult,
)
from app.application.interfaces.repositories import (
    IEventRepository,
    IOrganizationRepository,
    ITicketRepository,
)
from app.application.services.field_validators import validate_organization
from app.application.use_cases.cascade import cascade_delete_organization
from app.domain.exceptions import ResourceNotFoundException


class OrganizationService:
    """Create and query organizations. Delete cascades into events and tickets."""

    def __init__(
        self,
        org_repo: IOrganizationRepository,
        event_repo: IEventRepository,
        ticket_repo: ITicketRepository,
    ) -> None:
        self.org_repo = org_repo
        self.event_repo = event_repo
        self.ticket_repo = ticket_repo

    async def create_organization(self, data: OrganizationCreate) -> OrganizationResult:
        """Validate every field, then persist with a generated org_id."""
        cleaned = validate_organization(asdict(data))
        return await self.org_repo.create_organization(**cleaned)

    async def get_organization(self, org_id: str) -> OrganizationResult:
        """Return organization by id; else raise ResourceNotFoundException."""
        org = await self.org_repo.get_by_id(org_id)
        if not org:
            raise ResourceNotFoundException("Organization", org_id)
        return org

    async def get_organization_with_events(self, org_id: str) -> OrganizationDetailResult:
        """Return organization plus the events it owns."""
        org = await self.get_organization(org_id)
        events = await self.event_repo.list_by_org(org_id)
        return OrganizationDetailResult(**asdict(org), events=tuple(events))

    async def list_organizations(self) -> list[OrganizationResult]:
        return await self.org_repo.list_all()

    async def update_organization(
        self, org_id: str, patch: OrganizationPatch
    ) -> OrganizationResult:
        """Apply supplied fields only; unspecified fields keep their value."""
        changes = validate_organization(patch.changes(), partial=True)
        if not changes:
            return await self.get_organization(org_id)
        updated = await self.org_repo.update_organization(org_id, **changes)
        if not updated:
            raise ResourceNotFoundException("Organization", org_id)
        return updated

    async def delete_organization(self, org_id: str) -> CascadeResult:
        """Delete the organization with its events and their tickets."""
        return await cascade_delete_organization(
            self.org_repo, self.event_repo, self.ticket_repo, org_id=org_id
        )
