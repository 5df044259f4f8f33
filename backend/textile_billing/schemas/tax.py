"""
Tax rate Pydantic schemas.
"""

from pydantic import BaseModel, Field
from typing import Optional, List

from textile_billing.schemas.partial_update import PartialUpdate


class TaxBase(BaseModel):
    """Base tax schema with common fields."""
    name: str = Field(..., min_length=1, max_length=100)  # e.g., "GST"
    percentage: float = Field(..., ge=0, allow_inf_nan=False, description="Tax rate in percent, 0 means no tax")


class TaxCreate(TaxBase):
    """Schema for creating a tax rate."""
    pass


class TaxUpdate(PartialUpdate):
    """Schema for updating a tax rate. Existing bills keep the amount they were billed at."""
    not_nullable = ("name", "percentage")
    
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    percentage: Optional[float] = Field(None, ge=0, allow_inf_nan=False)


class TaxResponse(TaxBase):
    """Schema for tax response."""
    id: int
    
    class Config:
        from_attributes = True


class TaxListResponse(BaseModel):
    """Schema for tax list response."""
    items: List[TaxResponse]
    total: int
