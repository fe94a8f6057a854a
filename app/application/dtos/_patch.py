"""Shared helper for patch DTOs (explicit partial updates)."""

from dataclasses import fields
from typing import Any


def supplied_fields(patch: Any) -> dict[str, Any]:
    """Return {field: value} for every field the caller supplied (value is not None).

    Patch fields default to None, which means "keep the current value";
    no entity field is nullable, so None never means "clear".
    """
    return {
        f.name: getattr(patch, f.name)
        for f in fields(patch)
        if getattr(patch, f.name) is not None
    }
