"""Organization use cases."""

from app.application.use_cases.organizations.organization_operations import (
    OrganizationService,
)

__all__ = ["OrganizationService"]
