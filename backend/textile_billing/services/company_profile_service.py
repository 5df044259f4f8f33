"""
Company profile service.
"""

from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession

from textile_billing.services.base_service import BaseService
from textile_billing.db.repositories.company_profile_repository import CompanyProfileRepository
from textile_billing.schemas.company_profile import CompanyProfileUpdate, CompanyProfileResponse


class CompanyProfileService(BaseService):
    """Service for reading and saving the company profile."""
    
    def __init__(self, session: AsyncSession):
        self.session = session
        self.company_profile_repo = CompanyProfileRepository(session)
    
    async def get_profile(self) -> Optional[CompanyProfileResponse]:
        """Get the company profile, or None before it is first saved."""
        profile = await self.company_profile_repo.get_current()
        if not profile:
            return None
        return CompanyProfileResponse.model_validate(profile)
    
    async def save_profile(self, profile_data: CompanyProfileUpdate) -> CompanyProfileResponse:
        """Create or replace the company profile."""
        profile = await self.company_profile_repo.save(**profile_data.model_dump())
        await self.session.commit()
        return CompanyProfileResponse.model_validate(profile)
