"""
Dashboard API endpoint.
"""

from datetime import date

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from textile_billing.db.session import get_db
from textile_billing.deps.clock import get_today
from textile_billing.controllers.dashboard_controller import DashboardController
from textile_billing.schemas.dashboard import DashboardResponse

router = APIRouter()


@router.get("", response_model=DashboardResponse)
async def get_dashboard(
    today: date = Depends(get_today),
    db: AsyncSession = Depends(get_db),
) -> DashboardResponse:
    """Counts, revenue and pending amount, plus the urgent bills."""
    controller = DashboardController(db)
    return await controller.get_dashboard(today)
