"""
Dashboard service: record counts, money totals and urgent bills.
"""

from datetime import date
from sqlalchemy.ext.asyncio import AsyncSession

from textile_billing.services.base_service import BaseService
from textile_billing.services.bill_service import BillService
from textile_billing.db.repositories.buyer_repository import BuyerRepository
from textile_billing.db.repositories.dalal_repository import DalalRepository
from textile_billing.db.repositories.material_repository import MaterialRepository
from textile_billing.schemas.dashboard import DashboardResponse, DashboardStats
from textile_billing.utils.bill_filters import urgent_bills


class DashboardService(BaseService):
    """Service for the home screen summary."""
    
    def __init__(self, session: AsyncSession):
        self.bill_service = BillService(session)
        self.buyer_repo = BuyerRepository(session)
        self.dalal_repo = DalalRepository(session)
        self.material_repo = MaterialRepository(session)
    
    async def get_dashboard(self, today: date) -> DashboardResponse:
        """Summarize every bill as of ``today``."""
        bills = await self.bill_service.list_bill_views(today)
        paid = [bill for bill in bills if bill.payment_received]
        unpaid = [bill for bill in bills if not bill.payment_received]
        
        stats = DashboardStats(
            buyers=await self.buyer_repo.count(),
            dalals=await self.dalal_repo.count(),
            materials=await self.material_repo.count(),
            total_bills=len(bills),
            pending_bills=len(unpaid),
            total_revenue=sum(bill.total_amount for bill in paid),
            pending_amount=sum(bill.total_amount for bill in unpaid),
        )
        return DashboardResponse(stats=stats, urgent_bills=urgent_bills(unpaid))
