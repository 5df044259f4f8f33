"""
Dalal repository for database operations.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from textile_billing.db.repositories.base_repository import BaseRepository
from textile_billing.models.dalal import Dalal


class DalalRepository(BaseRepository[Dalal]):
    """Repository for dalal operations."""
    
    default_order = ("name", "id")
    
    def __init__(self, session: AsyncSession):
        super().__init__(Dalal, session)
