"""
Dashboard schemas.
"""

from pydantic import BaseModel
from typing import List

from textile_billing.schemas.bill import BillView


class DashboardStats(BaseModel):
    """Record counts and money totals."""
    buyers: int = 0
    dalals: int = 0
    materials: int = 0
    total_bills: int = 0
    pending_bills: int = 0
    total_revenue: float = 0.0  # sum of totals of paid bills
    pending_amount: float = 0.0  # sum of totals of unpaid bills


class DashboardResponse(BaseModel):
    """Dashboard stats with the bills that need attention."""
    stats: DashboardStats
    urgent_bills: List[BillView]
