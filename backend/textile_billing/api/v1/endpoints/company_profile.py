"""
Company profile API endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from textile_billing.db.session import get_db
from textile_billing.controllers.company_profile_controller import CompanyProfileController
from textile_billing.schemas.company_profile import CompanyProfileUpdate, CompanyProfileResponse

router = APIRouter()


@router.get("", response_model=CompanyProfileResponse)
async def get_company_profile(
    db: AsyncSession = Depends(get_db),
) -> CompanyProfileResponse:
    """Get the company profile."""
    controller = CompanyProfileController(db)
    profile = await controller.get_profile()
    if not profile:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Company profile not set up",
        )
    return profile


@router.put("", response_model=CompanyProfileResponse)
async def save_company_profile(
    profile_data: CompanyProfileUpdate,
    db: AsyncSession = Depends(get_db),
) -> CompanyProfileResponse:
    """Create or replace the company profile."""
    controller = CompanyProfileController(db)
    return await controller.save_profile(profile_data)
