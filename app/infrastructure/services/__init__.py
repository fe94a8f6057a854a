"""Infrastructure services."""

from app.infrastructure.services.seed_service import SeedService

__all__ = ["SeedService"]
