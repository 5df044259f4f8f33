"""
Company profile repository. The table holds at most one row.
"""

from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from textile_billing.db.repositories.base_repository import BaseRepository
from textile_billing.models.company_profile import CompanyProfile


class CompanyProfileRepository(BaseRepository[CompanyProfile]):
    """Repository for the company profile."""
    
    def __init__(self, session: AsyncSession):
        super().__init__(CompanyProfile, session)
    
    async def get_current(self) -> Optional[CompanyProfile]:
        """Get the saved profile, if any."""
        result = await self.session.execute(
            select(CompanyProfile)
            .order_by(CompanyProfile.id)
            .limit(1)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()
    
    async def save(self, **kwargs) -> CompanyProfile:
        """Insert the profile or replace the existing one."""
        current = await self.get_current()
        if current is None:
            return await self.create(**kwargs)
        return await self.update(current.id, **kwargs)
