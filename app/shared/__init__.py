"""Shared utilities: telemetry and cross-cutting helpers.

Used by application and infrastructure. No business logic.
"""

from app.shared.utils import generate_cuid

__all__ = [
    "generate_cuid",
]
