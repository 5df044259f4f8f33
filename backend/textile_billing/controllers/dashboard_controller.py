"""
Dashboard controller.
"""

from datetime import date
from sqlalchemy.ext.asyncio import AsyncSession

from textile_billing.controllers.base_controller import BaseController
from textile_billing.services.dashboard_service import DashboardService
from textile_billing.schemas.dashboard import DashboardResponse


class DashboardController(BaseController):
    """Controller for the dashboard summary."""
    
    def __init__(self, session: AsyncSession):
        self.dashboard_service = DashboardService(session)
    
    async def get_dashboard(self, today: date) -> DashboardResponse:
        return await self.dashboard_service.get_dashboard(today)
