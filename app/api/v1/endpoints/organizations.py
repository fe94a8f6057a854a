"""Organization API: thin routes delegating to OrganizationService."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response

from app.api.v1.dependencies import (
    get_organization_service,
    get_organization_service_for_write,
)
from app.application.dtos.organization import OrganizationCreate, OrganizationPatch
from app.application.use_cases.organizations import OrganizationService
from app.schemas.common import ErrorResponse
from app.schemas.organization import (
    OrganizationCreateRequest,
    OrganizationDetailResponse,
    OrganizationResponse,
    OrganizationUpdateRequest,
)

router = APIRouter()

_NOT_FOUND = {404: {"model": ErrorResponse, "description": "Organization not found"}}
_INVALID = {400: {"model": ErrorResponse, "description": "Validation failed"}}


@router.get("", response_model=list[OrganizationResponse])
async def list_organizations(
    service: Annotated[OrganizationService, Depends(get_organization_service)],
):
    """List every organization."""
    items = await service.list_organizations()
    return [OrganizationResponse.model_validate(o) for o in items]


@router.get("/{org_id}", response_model=OrganizationDetailResponse, responses=_NOT_FOUND)
async def get_organization(
    org_id: str,
    service: Annotated[OrganizationService, Depends(get_organization_service)],
):
    """Get an organization with its events."""
    org = await service.get_organization_with_events(org_id)
    return OrganizationDetailResponse.model_validate(org)


@router.post("", response_model=OrganizationResponse, status_code=201, responses=_INVALID)
async def create_organization(
    body: OrganizationCreateRequest,
    service: Annotated[OrganizationService, Depends(get_organization_service_for_write)],
):
    """Create an organization. org_id is generated."""
    created = await service.create_organization(
        OrganizationCreate(
            name=body.name,
            description=body.description,
            contact_email=body.contact_email,
        )
    )
    return OrganizationResponse.model_validate(created)


@router.put(
    "/{org_id}",
    response_model=OrganizationResponse,
    responses={**_NOT_FOUND, **_INVALID},
)
async def update_organization(
    org_id: str,
    body: OrganizationUpdateRequest,
    service: Annotated[OrganizationService, Depends(get_organization_service_for_write)],
):
    """Update an organization (partial). Omitted fields keep their value."""
    patch = OrganizationPatch(**body.model_dump(exclude_unset=True))
    updated = await service.update_organization(org_id, patch)
    return OrganizationResponse.model_validate(updated)


@router.delete("/{org_id}", status_code=204, responses=_NOT_FOUND)
async def delete_organization(
    org_id: str,
    service: Annotated[OrganizationService, Depends(get_organization_service_for_write)],
) -> Response:
    """Delete an organization with all its events and their tickets."""
    await service.delete_organization(org_id)
    return Response(status_code=204)
