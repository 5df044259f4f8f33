"""
Tax service with business logic.
"""

import logging
from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession

from textile_billing.core.exceptions import ReferenceInUseError
from textile_billing.services.base_service import BaseService
from textile_billing.db.repositories.tax_repository import TaxRepository
from textile_billing.db.repositories.bill_repository import BillRepository
from textile_billing.schemas.tax import TaxCreate, TaxUpdate, TaxResponse

logger = logging.getLogger(__name__)


class TaxService(BaseService):
    """Service for tax rate operations."""
    
    def __init__(self, session: AsyncSession):
        self.session = session
        self.tax_repo = TaxRepository(session)
        self.bill_repo = BillRepository(session)
    
    async def create_tax(self, tax_data: TaxCreate) -> TaxResponse:
        """Create a new tax rate."""
        tax = await self.tax_repo.create(**tax_data.model_dump())
        await self.session.commit()
        return TaxResponse.model_validate(tax)
    
    async def get_tax(self, tax_id: int) -> Optional[TaxResponse]:
        """Get tax rate by ID."""
        tax = await self.tax_repo.get(tax_id)
        if not tax:
            return None
        return TaxResponse.model_validate(tax)
    
    async def list_taxes(
        self,
        skip: int = 0,
        limit: int = 100,
    ) -> tuple[List[TaxResponse], int]:
        """List tax rate records."""
        taxes = await self.tax_repo.list(skip=skip, limit=limit)
        total = await self.tax_repo.count()
        return [TaxResponse.model_validate(item) for item in taxes], total
    
    async def update_tax(
        self,
        tax_id: int,
        tax_data: TaxUpdate,
    ) -> Optional[TaxResponse]:
        """Update a tax rate."""
        tax = await self.tax_repo.get(tax_id)
        if not tax:
            return None
        
        old_percentage = tax.percentage
        update_dict = tax_data.model_dump(exclude_unset=True)
        updated = await self.tax_repo.update(tax_id, **update_dict)
        await self.session.commit()
        if updated.percentage != old_percentage:
            # Bills keep the amounts they were billed at
            logger.info(
                "Tax rate changed",
                extra={"tax_id": tax_id, "old": old_percentage, "new": updated.percentage},
            )
        return TaxResponse.model_validate(updated)
    
    async def delete_tax(self, tax_id: int) -> bool:
        """Delete a tax rate that no bill refers to."""
        bill_count = await self.bill_repo.count_by_reference("tax_id", tax_id)
        if bill_count:
            raise ReferenceInUseError("Tax", tax_id, bill_count)
        
        deleted = await self.tax_repo.delete(tax_id)
        await self.session.commit()
        return deleted
