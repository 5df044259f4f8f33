"""
Invoice service.
Assembles the data the PDF layer prints for a bill.
"""

from datetime import date
from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession

from textile_billing.services.base_service import BaseService
from textile_billing.services.bill_service import BillService
from textile_billing.services.company_profile_service import CompanyProfileService
from textile_billing.schemas.invoice import InvoiceAmounts, InvoiceResponse
from textile_billing.utils.amount_in_words import amount_to_words


class InvoiceService(BaseService):
    """Service for building invoice payloads."""
    
    def __init__(self, session: AsyncSession):
        self.bill_service = BillService(session)
        self.company_profile_service = CompanyProfileService(session)
    
    async def get_invoice(self, bill_id: int, today: date) -> Optional[InvoiceResponse]:
        """Bill view, company profile and printable amounts for one bill."""
        bill = await self.bill_service.get_bill(bill_id, today)
        if not bill:
            return None
        
        company = await self.company_profile_service.get_profile()
        amounts = InvoiceAmounts(
            base_amount=round(bill.base_amount, 2),
            tax_amount=round(bill.tax_amount, 2),
            total_amount=round(bill.total_amount, 2),
        )
        return InvoiceResponse(
            bill=bill,
            company=company,
            amounts=amounts,
            amount_in_words=amount_to_words(amounts.total_amount),
        )
