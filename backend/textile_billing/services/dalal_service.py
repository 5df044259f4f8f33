"""
Dalal service with business logic.
"""

from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession

from textile_billing.core.exceptions import ReferenceInUseError
from textile_billing.services.base_service import BaseService
from textile_billing.db.repositories.dalal_repository import DalalRepository
from textile_billing.db.repositories.bill_repository import BillRepository
from textile_billing.schemas.dalal import DalalCreate, DalalUpdate, DalalResponse


class DalalService(BaseService):
    """Service for dalal operations."""
    
    def __init__(self, session: AsyncSession):
        self.session = session
        self.dalal_repo = DalalRepository(session)
        self.bill_repo = BillRepository(session)
    
    async def create_dalal(self, dalal_data: DalalCreate) -> DalalResponse:
        """Create a new dalal."""
        dalal = await self.dalal_repo.create(**dalal_data.model_dump())
        await self.session.commit()
        return DalalResponse.model_validate(dalal)
    
    async def get_dalal(self, dalal_id: int) -> Optional[DalalResponse]:
        """Get dalal by ID."""
        dalal = await self.dalal_repo.get(dalal_id)
        if not dalal:
            return None
        return DalalResponse.model_validate(dalal)
    
    async def list_dalals(
        self,
        skip: int = 0,
        limit: int = 100,
    ) -> tuple[List[DalalResponse], int]:
        """List dalal records."""
        dalals = await self.dalal_repo.list(skip=skip, limit=limit)
        total = await self.dalal_repo.count()
        return [DalalResponse.model_validate(item) for item in dalals], total
    
    async def update_dalal(
        self,
        dalal_id: int,
        dalal_data: DalalUpdate,
    ) -> Optional[DalalResponse]:
        """Update a dalal."""
        dalal = await self.dalal_repo.get(dalal_id)
        if not dalal:
            return None
        
        update_dict = dalal_data.model_dump(exclude_unset=True)
        updated = await self.dalal_repo.update(dalal_id, **update_dict)
        await self.session.commit()
        return DalalResponse.model_validate(updated)
    
    async def delete_dalal(self, dalal_id: int) -> bool:
        """Delete a dalal that no bill refers to."""
        bill_count = await self.bill_repo.count_by_reference("dalal_id", dalal_id)
        if bill_count:
            raise ReferenceInUseError("Dalal", dalal_id, bill_count)
        
        deleted = await self.dalal_repo.delete(dalal_id)
        await self.session.commit()
        return deleted
