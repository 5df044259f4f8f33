"""
Dalal controller.
"""

from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession

from textile_billing.controllers.base_controller import BaseController
from textile_billing.services.dalal_service import DalalService
from textile_billing.schemas.dalal import (
    DalalCreate,
    DalalUpdate,
    DalalResponse,
    DalalListResponse,
)


class DalalController(BaseController):
    """Controller for dalal operations."""
    
    def __init__(self, session: AsyncSession):
        self.dalal_service = DalalService(session)
    
    async def create_dalal(self, dalal_data: DalalCreate) -> DalalResponse:
        """Create a new dalal."""
        return await self.dalal_service.create_dalal(dalal_data)
    
    async def get_dalal(self, dalal_id: int) -> Optional[DalalResponse]:
        """Get dalal by ID."""
        return await self.dalal_service.get_dalal(dalal_id)
    
    async def list_dalals(self, skip: int = 0, limit: int = 100) -> DalalListResponse:
        """List dalal records."""
        items, total = await self.dalal_service.list_dalals(skip=skip, limit=limit)
        return DalalListResponse(items=items, total=total)
    
    async def update_dalal(
        self,
        dalal_id: int,
        dalal_data: DalalUpdate,
    ) -> Optional[DalalResponse]:
        """Update a dalal."""
        return await self.dalal_service.update_dalal(dalal_id, dalal_data)
    
    async def delete_dalal(self, dalal_id: int) -> bool:
        """Delete a dalal."""
        return await self.dalal_service.delete_dalal(dalal_id)
