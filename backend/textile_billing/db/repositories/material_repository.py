"""
Material repository for database operations.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from textile_billing.db.repositories.base_repository import BaseRepository
from textile_billing.models.material import Material


class MaterialRepository(BaseRepository[Material]):
    """Repository for material operations."""
    
    default_order = ("name", "id")
    
    def __init__(self, session: AsyncSession):
        super().__init__(Material, session)
