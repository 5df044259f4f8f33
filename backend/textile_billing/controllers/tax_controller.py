"""
Tax controller.
"""

from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession

from textile_billing.controllers.base_controller import BaseController
from textile_billing.services.tax_service import TaxService
from textile_billing.schemas.tax import (
    TaxCreate,
    TaxUpdate,
    TaxResponse,
    TaxListResponse,
)


class TaxController(BaseController):
    """Controller for tax rate operations."""
    
    def __init__(self, session: AsyncSession):
        self.tax_service = TaxService(session)
    
    async def create_tax(self, tax_data: TaxCreate) -> TaxResponse:
        """Create a new tax rate."""
        return await self.tax_service.create_tax(tax_data)
    
    async def get_tax(self, tax_id: int) -> Optional[TaxResponse]:
        """Get tax rate by ID."""
        return await self.tax_service.get_tax(tax_id)
    
    async def list_taxes(self, skip: int = 0, limit: int = 100) -> TaxListResponse:
        """List tax rate records."""
        items, total = await self.tax_service.list_taxes(skip=skip, limit=limit)
        return TaxListResponse(items=items, total=total)
    
    async def update_tax(
        self,
        tax_id: int,
        tax_data: TaxUpdate,
    ) -> Optional[TaxResponse]:
        """Update a tax rate."""
        return await self.tax_service.update_tax(tax_id, tax_data)
    
    async def delete_tax(self, tax_id: int) -> bool:
        """Delete a tax rate."""
        return await self.tax_service.delete_tax(tax_id)
