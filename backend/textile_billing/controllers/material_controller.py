"""
Material controller.
"""

from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession

from textile_billing.controllers.base_controller import BaseController
from textile_billing.services.material_service import MaterialService
from textile_billing.schemas.material import (
    MaterialCreate,
    MaterialUpdate,
    MaterialResponse,
    MaterialListResponse,
)


class MaterialController(BaseController):
    """Controller for material operations."""
    
    def __init__(self, session: AsyncSession):
        self.material_service = MaterialService(session)
    
    async def create_material(self, material_data: MaterialCreate) -> MaterialResponse:
        """Create a new material."""
        return await self.material_service.create_material(material_data)
    
    async def get_material(self, material_id: int) -> Optional[MaterialResponse]:
        """Get material by ID."""
        return await self.material_service.get_material(material_id)
    
    async def list_materials(self, skip: int = 0, limit: int = 100) -> MaterialListResponse:
        """List material records."""
        items, total = await self.material_service.list_materials(skip=skip, limit=limit)
        return MaterialListResponse(items=items, total=total)
    
    async def update_material(
        self,
        material_id: int,
        material_data: MaterialUpdate,
    ) -> Optional[MaterialResponse]:
        """Update a material."""
        return await self.material_service.update_material(material_id, material_data)
    
    async def delete_material(self, material_id: int) -> bool:
        """Delete a material."""
        return await self.material_service.delete_material(material_id)
