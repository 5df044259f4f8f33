"""
Buyer service with business logic.
"""

from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession

from textile_billing.core.exceptions import ReferenceInUseError
from textile_billing.services.base_service import BaseService
from textile_billing.db.repositories.buyer_repository import BuyerRepository
from textile_billing.db.repositories.bill_repository import BillRepository
from textile_billing.schemas.buyer import BuyerCreate, BuyerUpdate, BuyerResponse


class BuyerService(BaseService):
    """Service for buyer operations."""
    
    def __init__(self, session: AsyncSession):
        self.session = session
        self.buyer_repo = BuyerRepository(session)
        self.bill_repo = BillRepository(session)
    
    async def create_buyer(self, buyer_data: BuyerCreate) -> BuyerResponse:
        """Create a new buyer."""
        buyer = await self.buyer_repo.create(**buyer_data.model_dump())
        await self.session.commit()
        return BuyerResponse.model_validate(buyer)
    
    async def get_buyer(self, buyer_id: int) -> Optional[BuyerResponse]:
        """Get buyer by ID."""
        buyer = await self.buyer_repo.get(buyer_id)
        if not buyer:
            return None
        return BuyerResponse.model_validate(buyer)
    
    async def list_buyers(
        self,
        skip: int = 0,
        limit: int = 100,
    ) -> tuple[List[BuyerResponse], int]:
        """List buyer records."""
        buyers = await self.buyer_repo.list(skip=skip, limit=limit)
        total = await self.buyer_repo.count()
        return [BuyerResponse.model_validate(item) for item in buyers], total
    
    async def update_buyer(
        self,
        buyer_id: int,
        buyer_data: BuyerUpdate,
    ) -> Optional[BuyerResponse]:
        """Update a buyer."""
        buyer = await self.buyer_repo.get(buyer_id)
        if not buyer:
            return None
        
        update_dict = buyer_data.model_dump(exclude_unset=True)
        updated = await self.buyer_repo.update(buyer_id, **update_dict)
        await self.session.commit()
        return BuyerResponse.model_validate(updated)
    
    async def delete_buyer(self, buyer_id: int) -> bool:
        """Delete a buyer that no bill refers to."""
        bill_count = await self.bill_repo.count_by_reference("buyer_id", buyer_id)
        if bill_count:
            raise ReferenceInUseError("Buyer", buyer_id, bill_count)
        
        deleted = await self.buyer_repo.delete(buyer_id)
        await self.session.commit()
        return deleted
