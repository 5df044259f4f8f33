"""
Database initialization and bootstrapping.
Creates tables and seeds the default payment terms and materials.
"""

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from textile_billing.db.base import Base
from textile_billing.db.repositories.dhara_repository import DharaRepository
from textile_billing.db.repositories.material_repository import MaterialRepository
from textile_billing.core.logging import get_logger
import textile_billing.models  # noqa: F401  registers every table with Base

logger = get_logger(__name__)


DEFAULT_DHARAS = [
    {"dhara_name": "Regular (35 days)", "days": 35},
    {"dhara_name": "War to War (10 days)", "days": 10},
    {"dhara_name": "Cash (0 days)", "days": 0},
    {"dhara_name": "Extended (60 days)", "days": 60},
]

DEFAULT_MATERIALS = [
    {"name": "Cotton", "extra_detail": "Premium quality cotton fabric"},
    {"name": "Polyester", "extra_detail": "Synthetic blend material"},
    {"name": "Silk", "extra_detail": "Natural silk fabric"},
    {"name": "Wool", "extra_detail": "Pure wool material"},
]


async def create_tables(engine: AsyncEngine) -> None:
    """
    Create all database tables that do not exist yet.
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    
    logger.info("Database tables initialized")


async def seed_initial_data(session: AsyncSession) -> None:
    """
    Seed default payment terms and materials into empty tables.
    Existing rows are never touched, so this is safe on every startup.
    """
    dhara_repo = DharaRepository(session)
    if await dhara_repo.count() == 0:
        for dhara in DEFAULT_DHARAS:
            await dhara_repo.create(**dhara)
        logger.info("Seeded default payment terms", extra={"count": len(DEFAULT_DHARAS)})
    
    material_repo = MaterialRepository(session)
    if await material_repo.count() == 0:
        for material in DEFAULT_MATERIALS:
            await material_repo.create(**material)
        logger.info("Seeded default materials", extra={"count": len(DEFAULT_MATERIALS)})
    
    await session.commit()
