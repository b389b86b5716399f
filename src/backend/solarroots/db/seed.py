"""Demo data for an empty directory.

Usage:
    cd src/backend
    python -m solarroots.db.seed

Seeding is idempotent: nothing is inserted once the directory has any site.
"""

import asyncio
import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from solarroots.db.models import Base, Site
from solarroots.db.session import async_session_maker, engine
from solarroots.services.site_service import SiteService

logger = logging.getLogger(__name__)

DEMO_SITES = [
    {
        "name": "SolarRoots Community",
        "description": "Community hub for regenerative agriculture and solar cooperatives.",
        "website": "https://solarroots.example.com",
        "tags": ["solar", "regenerative"],
    },
    {
        "name": "Sunrise Co-op",
        "description": "Worker-owned solar installation cooperative focused on rural communities.",
        "website": "https://sunrisecoop.example.com",
        "tags": ["solar", "cooperative"],
    },
]


async def seed_directory(db: AsyncSession) -> int:
    """Insert the demo sites if the directory is empty.

    Returns:
        Number of sites created
    """
    existing = (await db.execute(select(func.count()).select_from(Site))).scalar() or 0
    if existing:
        logger.info(f"Directory already has {existing} sites, skipping seed")
        return 0

    service = SiteService(db)
    for data in DEMO_SITES:
        entry = await service.create(**data)
        logger.info(f"Seeded site '{entry.name}' ({entry.id})")
    return len(DEMO_SITES)


async def run_seed():
    """Create tables and seed the configured database."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session_maker() as db:
        created = await seed_directory(db)
        await db.commit()
    logger.info(f"Seed complete. Created {created} sites.")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(run_seed())
