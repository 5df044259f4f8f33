"""
Buyer controller.
"""

from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession

from textile_billing.controllers.base_controller import BaseController
from textile_billing.services.buyer_service import BuyerService
from textile_billing.schemas.buyer import (
    BuyerCreate,
    BuyerUpdate,
    BuyerResponse,
    BuyerListResponse,
)


class BuyerController(BaseController):
    """Controller for buyer operations."""
    
    def __init__(self, session: AsyncSession):
        self.buyer_service = BuyerService(session)
    
    async def create_buyer(self, buyer_data: BuyerCreate) -> BuyerResponse:
        """Create a new buyer."""
        return await self.buyer_service.create_buyer(buyer_data)
    
    async def get_buyer(self, buyer_id: int) -> Optional[BuyerResponse]:
        """Get buyer by ID."""
        return await self.buyer_service.get_buyer(buyer_id)
    
    async def list_buyers(self, skip: int = 0, limit: int = 100) -> BuyerListResponse:
        """List buyer records."""
        items, total = await self.buyer_service.list_buyers(skip=skip, limit=limit)
        return BuyerListResponse(items=items, total=total)
    
    async def update_buyer(
        self,
        buyer_id: int,
        buyer_data: BuyerUpdate,
    ) -> Optional[BuyerResponse]:
        """Update a buyer."""
        return await self.buyer_service.update_buyer(buyer_id, buyer_data)
    
    async def delete_buyer(self, buyer_id: int) -> bool:
        """Delete a buyer."""
        return await self.buyer_service.delete_buyer(buyer_id)
