"""Shared API schemas: error body and the partial-update base."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class FieldErrorItem(BaseModel):
    """One failing field in a 400 response."""

    field: str
    message: str


class ErrorResponse(BaseModel):
    """Body of every error response."""

    error: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable summary")
    details: dict[str, Any] = Field(default_factory=dict)
    errors: list[FieldErrorItem] | None = Field(
        default=None, description="Per-field failures (validation and foreign-key errors)"
    )


class PatchRequest(BaseModel):
    """Base for PUT bodies: every field optional, omitted fields keep their value.

    No stored field is nullable, so an explicit null is rejected rather than
    treated as "clear".
    """

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("*", mode="before")
    @classmethod
    def reject_explicit_null(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return value
