"""
Bill Pydantic schemas for request/response validation.

Requests carry raw bill inputs only. Amounts are computed server-side, and due
date, days to due, total and status are derived for every response.
"""

from datetime import date
from enum import Enum
from pydantic import BaseModel, Field, model_validator
from typing import Optional, List

from textile_billing.utils.due_dates import BillStatus


class BillBase(BaseModel):
    """Bill inputs shared by create and update."""
    bill_no: int = Field(..., gt=0)
    date: date
    buyer_id: int = Field(..., gt=0)
    dalal_id: int = Field(..., gt=0)
    material_id: int = Field(..., gt=0)
    dhara_id: int = Field(..., gt=0)
    tax_id: int = Field(..., gt=0)
    meter: float = Field(..., gt=0, allow_inf_nan=False)
    price_rate: float = Field(..., gt=0, allow_inf_nan=False)
    chalan_no: str = Field(..., min_length=1, max_length=50)
    taka_count: int = Field(..., gt=0)


class BillCreate(BillBase):
    """Schema for creating a bill."""
    payment_received: bool = False


class BillUpdate(BillBase):
    """
    Schema for updating a bill.
    
    Updates replace every input field and recompute the amounts. Payment state
    is changed only through mark-paid.
    """
    pass


class BillView(BaseModel):
    """A bill joined with its reference data and aged against a given day."""
    id: int
    bill_no: int
    date: date
    
    buyer_id: int
    buyer_name: str
    buyer_gst: Optional[str] = None
    dalal_id: int
    dalal_name: str
    material_id: int
    material_name: str
    material_hsn_code: Optional[str] = None
    dhara_id: int
    dhara_name: str
    dhara_days: int
    tax_id: int
    tax_name: str
    tax_percentage: float
    
    meter: float
    price_rate: float
    chalan_no: str
    taka_count: int
    payment_received: bool
    
    base_amount: float
    tax_amount: float
    total_amount: float
    due_date: date
    days_to_due: int
    status: BillStatus


class BillListResponse(BaseModel):
    """Schema for bill list response."""
    items: List[BillView]
    total: int


class BillStatusFilter(str, Enum):
    """Status choices of the bill list. PENDING covers every unpaid bill."""
    ALL = "all"
    PENDING = "pending"
    PAID = "paid"


class BillFilter(BaseModel):
    """
    Bill list filter. All criteria are optional and combined with AND.
    
    Date bounds are inclusive.
    """
    status: BillStatusFilter = BillStatusFilter.ALL
    buyer_id: Optional[int] = None
    from_date: Optional[date] = None
    to_date: Optional[date] = None
    
    @model_validator(mode="after")
    def check_date_range(self) -> "BillFilter":
        if self.from_date and self.to_date and self.from_date > self.to_date:
            raise ValueError("from_date must not be after to_date")
        return self
