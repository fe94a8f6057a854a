"""Organization API schemas. JSON uses contactEmail / createdAt / updatedAt."""

from datetime import datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from app.schemas.common import PatchRequest
from app.schemas.event import EventResponse


class OrganizationCreateRequest(BaseModel):
    """Request body for POST /organizations. org_id is generated, never accepted."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    contact_email: str = Field(
        ...,
        min_length=1,
        max_length=254,
        validation_alias=AliasChoices("contactEmail", "contact_email"),
    )


class OrganizationUpdateRequest(PatchRequest):
    """Request body for PUT /organizations/{id} (partial)."""

    name: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = Field(default=None, min_length=1)
    contact_email: str | None = Field(
        default=None,
        min_length=1,
        max_length=254,
        validation_alias=AliasChoices("contactEmail", "contact_email"),
    )


class OrganizationResponse(BaseModel):
    """Organization as returned by the API."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    org_id: str
    name: str
    description: str
    contact_email: str = Field(
        validation_alias=AliasChoices("contact_email", "contactEmail"),
        serialization_alias="contactEmail",
    )
    created_at: datetime | None = Field(
        default=None,
        validation_alias=AliasChoices("created_at", "createdAt"),
        serialization_alias="createdAt",
    )
    updated_at: datetime | None = Field(
        default=None,
        validation_alias=AliasChoices("updated_at", "updatedAt"),
        serialization_alias="updatedAt",
    )


class OrganizationDetailResponse(OrganizationResponse):
    """GET /organizations/{id}: the organization with its events."""

    events: list[EventResponse] = Field(default_factory=list)
