"""Seed the reference organizations, events and tickets into the configured database.

Creates missing tables, then inserts the dataset only when the organizations
table is empty (same routine the app runs at startup when SEED_ON_STARTUP is set).

Usage:
    python -m scripts.seed_dev_data [--reset]

--reset drops every table first so the dataset is reloaded from scratch.
Reads DATABASE_URL from the environment or the project .env file.
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

from dotenv import load_dotenv


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def _load_env() -> None:
    """Load .env from project root so get_settings() sees DATABASE_URL when run as script."""
    load_dotenv(_project_root() / ".env", override=True)


async def run(reset: bool = False) -> bool:
    from app.core.config import get_settings
    from app.infrastructure.persistence import database
    from app.infrastructure.services.seed_service import SeedService

    get_settings.cache_clear()
    try:
        if reset:
            await database.drop_models()
            print("Dropped all tables.")
        await database.init_models()
        async with database.get_session_factory()() as session:
            async with session.begin():
                seeded = await SeedService(session).seed_if_empty()
    finally:
        await database.dispose_engine()
    if seeded:
        print("Seed completed.")
    else:
        print("Database already has organizations; nothing seeded.")
    return seeded


def main() -> None:
    _load_env()
    reset = "--reset" in sys.argv[1:]
    asyncio.run(run(reset=reset))


if __name__ == "__main__":
    main()
