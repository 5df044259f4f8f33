"""
Bill controller.
Coordinates the bill and invoice services.
"""

from datetime import date
from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession

from textile_billing.controllers.base_controller import BaseController
from textile_billing.services.bill_service import BillService
from textile_billing.services.invoice_service import InvoiceService
from textile_billing.schemas.bill import (
    BillCreate,
    BillUpdate,
    BillView,
    BillFilter,
    BillListResponse,
)
from textile_billing.schemas.invoice import InvoiceResponse


class BillController(BaseController):
    """Controller for bill operations."""
    
    def __init__(self, session: AsyncSession):
        self.bill_service = BillService(session)
        self.invoice_service = InvoiceService(session)
    
    async def create_bill(self, bill_data: BillCreate, today: date) -> BillView:
        """Create a new bill."""
        return await self.bill_service.create_bill(bill_data, today)
    
    async def get_bill(self, bill_id: int, today: date) -> Optional[BillView]:
        """Get bill by ID."""
        return await self.bill_service.get_bill(bill_id, today)
    
    async def list_bills(
        self,
        bill_filter: BillFilter,
        today: date,
        skip: int = 0,
        limit: int = 100,
    ) -> BillListResponse:
        """List bills matching a filter."""
        bills, total = await self.bill_service.list_bills(
            bill_filter,
            today,
            skip=skip,
            limit=limit,
        )
        return BillListResponse(items=bills, total=total)
    
    async def list_urgent_bills(self, today: date) -> List[BillView]:
        """List bills due soon or overdue."""
        return await self.bill_service.list_urgent_bills(today)
    
    async def update_bill(self, bill_id: int, bill_data: BillUpdate, today: date) -> Optional[BillView]:
        """Update a bill."""
        return await self.bill_service.update_bill(bill_id, bill_data, today)
    
    async def mark_paid(self, bill_id: int, today: date) -> Optional[BillView]:
        """Mark a bill as paid."""
        return await self.bill_service.mark_paid(bill_id, today)
    
    async def delete_bill(self, bill_id: int) -> bool:
        """Delete a bill."""
        return await self.bill_service.delete_bill(bill_id)
    
    async def get_invoice(self, bill_id: int, today: date) -> Optional[InvoiceResponse]:
        """Get the printable invoice data of a bill."""
        return await self.invoice_service.get_invoice(bill_id, today)
