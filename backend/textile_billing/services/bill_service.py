"""
Bill service with business logic.

Amounts are computed once when a bill is written. Due dates, aging and status
are derived for every read against the ``today`` supplied by the caller.
"""

import logging
from datetime import date
from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession

from textile_billing.core.exceptions import BillAlreadyPaidError, ReferenceNotFoundError
from textile_billing.services.base_service import BaseService
from textile_billing.db.repositories.bill_repository import BillRepository
from textile_billing.db.repositories.buyer_repository import BuyerRepository
from textile_billing.db.repositories.dalal_repository import DalalRepository
from textile_billing.db.repositories.material_repository import MaterialRepository
from textile_billing.db.repositories.dhara_repository import DharaRepository
from textile_billing.db.repositories.tax_repository import TaxRepository
from textile_billing.models.bill import Bill
from textile_billing.schemas.bill import BillBase, BillCreate, BillUpdate, BillView, BillFilter
from textile_billing.utils.bill_builder import BillReferences, build_bill_record, build_bill_view
from textile_billing.utils.bill_filters import filter_bills, urgent_bills

logger = logging.getLogger(__name__)


class BillService(BaseService):
    """Service for bill operations."""
    
    def __init__(self, session: AsyncSession):
        self.session = session
        self.bill_repo = BillRepository(session)
        self.buyer_repo = BuyerRepository(session)
        self.dalal_repo = DalalRepository(session)
        self.material_repo = MaterialRepository(session)
        self.dhara_repo = DharaRepository(session)
        self.tax_repo = TaxRepository(session)
    
    async def _load_references(self, bill_data: BillBase) -> BillReferences:
        """Look up the five reference records named by the bill inputs."""
        return BillReferences(
            buyer=await self.buyer_repo.get(bill_data.buyer_id),
            dalal=await self.dalal_repo.get(bill_data.dalal_id),
            material=await self.material_repo.get(bill_data.material_id),
            dhara=await self.dhara_repo.get(bill_data.dhara_id),
            tax=await self.tax_repo.get(bill_data.tax_id),
        )
    
    async def _build_record(self, bill_data: BillBase) -> dict:
        refs = await self._load_references(bill_data)
        try:
            return build_bill_record(bill_data, refs)
        except ReferenceNotFoundError as e:
            logger.warning(
                "Bill rejected, reference not found",
                extra={"reference": e.reference, "reference_id": e.reference_id},
            )
            raise
    
    @staticmethod
    def _to_view(bill: Bill, today: date) -> BillView:
        return build_bill_view(bill, BillReferences.of(bill), today)
    
    async def create_bill(self, bill_data: BillCreate, today: date) -> BillView:
        """Create a bill, computing and storing its base and tax amounts."""
        record = await self._build_record(bill_data)
        bill = await self.bill_repo.create(**record)
        bill = await self.bill_repo.get(bill.id)
        # A bill that cannot be aged must not be committed
        view = self._to_view(bill, today)
        await self.session.commit()
        
        logger.info(
            "Bill created",
            extra={"bill_id": bill.id, "bill_no": bill.bill_no, "base_amount": bill.base_amount},
        )
        return view
    
    async def get_bill(self, bill_id: int, today: date) -> Optional[BillView]:
        """Get bill by ID."""
        bill = await self.bill_repo.get(bill_id)
        if not bill:
            return None
        return self._to_view(bill, today)
    
    async def list_bills(
        self,
        bill_filter: BillFilter,
        today: date,
        skip: int = 0,
        limit: int = 100,
    ) -> tuple[List[BillView], int]:
        """List bills matching ``bill_filter``, most recent first."""
        bills = await self.bill_repo.list_all()
        matches = filter_bills((self._to_view(bill, today) for bill in bills), bill_filter)
        return matches[skip:skip + limit], len(matches)
    
    async def list_urgent_bills(self, today: date) -> List[BillView]:
        """Unpaid bills due within the due-soon window or overdue, most overdue first."""
        bills = await self.bill_repo.list_unpaid()
        return urgent_bills(self._to_view(bill, today) for bill in bills)
    
    async def list_bill_views(self, today: date) -> List[BillView]:
        """Every bill as a view, most recent first."""
        bills = await self.bill_repo.list_all()
        return [self._to_view(bill, today) for bill in bills]
    
    async def update_bill(
        self,
        bill_id: int,
        bill_data: BillUpdate,
        today: date,
    ) -> Optional[BillView]:
        """Replace a bill's inputs and recompute its amounts."""
        bill = await self.bill_repo.get(bill_id)
        if not bill:
            return None
        
        record = await self._build_record(bill_data)
        updated = await self.bill_repo.update(bill_id, **record)
        view = self._to_view(updated, today)
        await self.session.commit()
        logger.info(
            "Bill updated",
            extra={"bill_id": bill_id, "base_amount": updated.base_amount},
        )
        return view
    
    async def mark_paid(self, bill_id: int, today: date) -> Optional[BillView]:
        """Record that payment for a bill was received."""
        bill = await self.bill_repo.get(bill_id)
        if not bill:
            return None
        if bill.payment_received:
            raise BillAlreadyPaidError(bill_id)
        
        await self.bill_repo.mark_paid(bill_id)
        await self.session.commit()
        logger.info("Bill marked as paid", extra={"bill_id": bill_id})
        
        bill = await self.bill_repo.get(bill_id)
        return self._to_view(bill, today)
    
    async def delete_bill(self, bill_id: int) -> bool:
        """Delete a bill."""
        deleted = await self.bill_repo.delete(bill_id)
        await self.session.commit()
        if deleted:
            logger.info("Bill deleted", extra={"bill_id": bill_id})
        return deleted
