"""
Dhara controller.
"""

from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession

from textile_billing.controllers.base_controller import BaseController
from textile_billing.services.dhara_service import DharaService
from textile_billing.schemas.dhara import (
    DharaCreate,
    DharaUpdate,
    DharaResponse,
    DharaListResponse,
)


class DharaController(BaseController):
    """Controller for payment term operations."""
    
    def __init__(self, session: AsyncSession):
        self.dhara_service = DharaService(session)
    
    async def create_dhara(self, dhara_data: DharaCreate) -> DharaResponse:
        """Create a new payment term."""
        return await self.dhara_service.create_dhara(dhara_data)
    
    async def get_dhara(self, dhara_id: int) -> Optional[DharaResponse]:
        """Get payment term by ID."""
        return await self.dhara_service.get_dhara(dhara_id)
    
    async def list_dharas(self, skip: int = 0, limit: int = 100) -> DharaListResponse:
        """List payment term records."""
        items, total = await self.dhara_service.list_dharas(skip=skip, limit=limit)
        return DharaListResponse(items=items, total=total)
    
    async def update_dhara(
        self,
        dhara_id: int,
        dhara_data: DharaUpdate,
    ) -> Optional[DharaResponse]:
        """Update a payment term."""
        return await self.dhara_service.update_dhara(dhara_id, dhara_data)
    
    async def delete_dhara(self, dhara_id: int) -> bool:
        """Delete a payment term."""
        return await self.dhara_service.delete_dhara(dhara_id)
