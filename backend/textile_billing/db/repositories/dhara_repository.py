"""
Dhara repository for database operations.
"""

from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from textile_billing.db.repositories.base_repository import BaseRepository
from textile_billing.models.dhara import Dhara


class DharaRepository(BaseRepository[Dhara]):
    """Repository for payment term operations. Lists shortest credit period first."""
    
    default_order = ("days", "dhara_name")
    
    def __init__(self, session: AsyncSession):
        super().__init__(Dhara, session)
    
    async def get_by_name(self, dhara_name: str) -> Optional[Dhara]:
        """Get dhara by name."""
        result = await self.session.execute(
            select(Dhara).where(Dhara.dhara_name == dhara_name)
        )
        return result.scalars().first()
