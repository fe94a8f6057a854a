"""Organization repository. Returns application DTOs."""

from typing import Any

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.organization import OrganizationResult
from app.infrastructure.persistence.models.organization import Organization
from app.infrastructure.persistence.repositories.base import BaseRepository

_UPDATABLE = {"name", "description", "contact_email"}


def _to_result(o: Organization) -> OrganizationResult:
    """Map ORM Organization to OrganizationResult."""
    return OrganizationResult(
        org_id=o.org_id,
        name=o.name,
        description=o.description,
        contact_email=o.contact_email,
        created_at=o.created_at,
        updated_at=o.updated_at,
    )


class OrganizationRepository(BaseRepository[Organization]):
    """Organization storage."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Organization)

    async def get_by_id(self, org_id: str) -> OrganizationResult | None:
        row = await super().get_by_id(org_id)
        return _to_result(row) if row else None

    async def list_all(self) -> list[OrganizationResult]:
        return [_to_result(o) for o in await self.get_all()]

    async def create_organization(
        self, name: str, description: str, contact_email: str
    ) -> OrganizationResult:
        entity = Organization(name=name, description=description, contact_email=contact_email)
        created = await self.create(entity)
        return _to_result(created)

    async def update_organization(
        self, org_id: str, **changes: Any
    ) -> OrganizationResult | None:
        """Apply name/description/contact_email changes; other keys are ignored."""
        updated = await self.apply_changes(org_id, changes, _UPDATABLE)
        return _to_result(updated) if updated else None

    async def delete_by_id(self, org_id: str) -> int:
        result = await self.db.execute(delete(Organization).where(Organization.org_id == org_id))
        return result.rowcount or 0
