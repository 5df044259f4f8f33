"""
Company profile controller.
"""

from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession

from textile_billing.controllers.base_controller import BaseController
from textile_billing.services.company_profile_service import CompanyProfileService
from textile_billing.schemas.company_profile import CompanyProfileUpdate, CompanyProfileResponse


class CompanyProfileController(BaseController):
    """Controller for the company profile."""
    
    def __init__(self, session: AsyncSession):
        self.company_profile_service = CompanyProfileService(session)
    
    async def get_profile(self) -> Optional[CompanyProfileResponse]:
        """Get the company profile."""
        return await self.company_profile_service.get_profile()
    
    async def save_profile(self, profile_data: CompanyProfileUpdate) -> CompanyProfileResponse:
        """Save the company profile."""
        return await self.company_profile_service.save_profile(profile_data)
