"""
Dhara service with business logic.
"""

import logging
from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession

from textile_billing.core.exceptions import ReferenceInUseError
from textile_billing.services.base_service import BaseService
from textile_billing.db.repositories.dhara_repository import DharaRepository
from textile_billing.db.repositories.bill_repository import BillRepository
from textile_billing.schemas.dhara import DharaCreate, DharaUpdate, DharaResponse
from textile_billing.utils.bill_builder import ensure_due_date

logger = logging.getLogger(__name__)


class DharaService(BaseService):
    """Service for payment term operations."""
    
    def __init__(self, session: AsyncSession):
        self.session = session
        self.dhara_repo = DharaRepository(session)
        self.bill_repo = BillRepository(session)
    
    async def create_dhara(self, dhara_data: DharaCreate) -> DharaResponse:
        """Create a new payment term."""
        dhara = await self.dhara_repo.create(**dhara_data.model_dump())
        await self.session.commit()
        return DharaResponse.model_validate(dhara)
    
    async def get_dhara(self, dhara_id: int) -> Optional[DharaResponse]:
        """Get payment term by ID."""
        dhara = await self.dhara_repo.get(dhara_id)
        if not dhara:
            return None
        return DharaResponse.model_validate(dhara)
    
    async def list_dharas(
        self,
        skip: int = 0,
        limit: int = 100,
    ) -> tuple[List[DharaResponse], int]:
        """List payment term records."""
        dharas = await self.dhara_repo.list(skip=skip, limit=limit)
        total = await self.dhara_repo.count()
        return [DharaResponse.model_validate(item) for item in dharas], total
    
    async def update_dhara(
        self,
        dhara_id: int,
        dhara_data: DharaUpdate,
    ) -> Optional[DharaResponse]:
        """Update a payment term."""
        dhara = await self.dhara_repo.get(dhara_id)
        if not dhara:
            return None
        
        old_days = dhara.days
        update_dict = dhara_data.model_dump(exclude_unset=True)
        if update_dict.get("days", old_days) != old_days:
            latest = await self.bill_repo.latest_date_by_reference("dhara_id", dhara_id)
            if latest is not None:
                ensure_due_date(latest, update_dict["days"])
        
        updated = await self.dhara_repo.update(dhara_id, **update_dict)
        await self.session.commit()
        if updated.days != old_days:
            # Due dates are derived on read, so every bill on this term moves
            logger.info(
                "Payment term days changed",
                extra={"dhara_id": dhara_id, "old": old_days, "new": updated.days},
            )
        return DharaResponse.model_validate(updated)
    
    async def delete_dhara(self, dhara_id: int) -> bool:
        """Delete a payment term that no bill refers to."""
        bill_count = await self.bill_repo.count_by_reference("dhara_id", dhara_id)
        if bill_count:
            raise ReferenceInUseError("Dhara", dhara_id, bill_count)
        
        deleted = await self.dhara_repo.delete(dhara_id)
        await self.session.commit()
        return deleted
