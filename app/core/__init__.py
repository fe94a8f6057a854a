"""Core: config, exception handlers and application lifespan.

Single place for settings and bootstrap wiring.
"""

from app.core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
