"""
Bill repository for database operations.
"""

from datetime import date
from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, update, func

from textile_billing.db.repositories.base_repository import BaseRepository
from textile_billing.models.bill import Bill


# Foreign key columns a reference record can be used through
REFERENCE_COLUMNS = ("buyer_id", "dalal_id", "material_id", "dhara_id", "tax_id")


class BillRepository(BaseRepository[Bill]):
    """Repository for bill operations. Reference relationships load with each bill."""
    
    default_order = ("date", "id")
    
    def __init__(self, session: AsyncSession):
        super().__init__(Bill, session)
    
    async def list_all(self) -> List[Bill]:
        """All bills, most recent first."""
        result = await self.session.execute(
            select(Bill).order_by(Bill.date.desc(), Bill.id.desc())
        )
        return list(result.scalars().all())
    
    async def list_unpaid(self) -> List[Bill]:
        """Bills whose payment has not been received."""
        result = await self.session.execute(
            select(Bill).where(Bill.payment_received == False)  # noqa: E712
        )
        return list(result.scalars().all())
    
    async def count_by_reference(self, column: str, reference_id: int) -> int:
        """Count bills pointing at a reference record through ``column``."""
        if column not in REFERENCE_COLUMNS:
            raise ValueError(f"Unknown reference column: {column}")
        result = await self.session.execute(
            select(func.count(Bill.id)).where(getattr(Bill, column) == reference_id)
        )
        return result.scalar() or 0
    
    async def latest_date_by_reference(self, column: str, reference_id: int) -> Optional[date]:
        """Most recent bill date among bills pointing at a reference record."""
        if column not in REFERENCE_COLUMNS:
            raise ValueError(f"Unknown reference column: {column}")
        result = await self.session.execute(
            select(func.max(Bill.date)).where(getattr(Bill, column) == reference_id)
        )
        return result.scalar()
    
    async def mark_paid(self, bill_id: int) -> None:
        """Flip payment_received to true."""
        await self.session.execute(
            update(Bill)
            .where(Bill.id == bill_id)
            .values(payment_received=True)
        )
        await self.session.flush()
