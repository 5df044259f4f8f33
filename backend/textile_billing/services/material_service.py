"""
Material service with business logic.
"""

from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession

from textile_billing.core.exceptions import ReferenceInUseError
from textile_billing.services.base_service import BaseService
from textile_billing.db.repositories.material_repository import MaterialRepository
from textile_billing.db.repositories.bill_repository import BillRepository
from textile_billing.schemas.material import MaterialCreate, MaterialUpdate, MaterialResponse


class MaterialService(BaseService):
    """Service for material operations."""
    
    def __init__(self, session: AsyncSession):
        self.session = session
        self.material_repo = MaterialRepository(session)
        self.bill_repo = BillRepository(session)
    
    async def create_material(self, material_data: MaterialCreate) -> MaterialResponse:
        """Create a new material."""
        material = await self.material_repo.create(**material_data.model_dump())
        await self.session.commit()
        return MaterialResponse.model_validate(material)
    
    async def get_material(self, material_id: int) -> Optional[MaterialResponse]:
        """Get material by ID."""
        material = await self.material_repo.get(material_id)
        if not material:
            return None
        return MaterialResponse.model_validate(material)
    
    async def list_materials(
        self,
        skip: int = 0,
        limit: int = 100,
    ) -> tuple[List[MaterialResponse], int]:
        """List material records."""
        materials = await self.material_repo.list(skip=skip, limit=limit)
        total = await self.material_repo.count()
        return [MaterialResponse.model_validate(item) for item in materials], total
    
    async def update_material(
        self,
        material_id: int,
        material_data: MaterialUpdate,
    ) -> Optional[MaterialResponse]:
        """Update a material."""
        material = await self.material_repo.get(material_id)
        if not material:
            return None
        
        update_dict = material_data.model_dump(exclude_unset=True)
        updated = await self.material_repo.update(material_id, **update_dict)
        await self.session.commit()
        return MaterialResponse.model_validate(updated)
    
    async def delete_material(self, material_id: int) -> bool:
        """Delete a material that no bill refers to."""
        bill_count = await self.bill_repo.count_by_reference("material_id", material_id)
        if bill_count:
            raise ReferenceInUseError("Material", material_id, bill_count)
        
        deleted = await self.material_repo.delete(material_id)
        await self.session.commit()
        return deleted
