"""
Buyer Pydantic schemas for request/response validation.
"""

from pydantic import BaseModel, Field
from typing import Optional, List

from textile_billing.schemas.partial_update import PartialUpdate


class BuyerBase(BaseModel):
    """Base buyer schema with common fields."""
    name: str = Field(..., min_length=1, max_length=200)
    address: Optional[str] = Field(None, max_length=500)
    contact_number: str = Field(..., min_length=1, max_length=20)
    gst_number: Optional[str] = Field(None, max_length=20)


class BuyerCreate(BuyerBase):
    """Schema for creating a buyer."""
    pass


class BuyerUpdate(PartialUpdate):
    """Schema for updating a buyer (all fields optional)."""
    not_nullable = ("name", "contact_number")
    
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    address: Optional[str] = Field(None, max_length=500)
    contact_number: Optional[str] = Field(None, min_length=1, max_length=20)
    gst_number: Optional[str] = Field(None, max_length=20)


class BuyerResponse(BuyerBase):
    """Schema for buyer response."""
    id: int
    
    class Config:
        from_attributes = True


class BuyerListResponse(BaseModel):
    """Schema for buyer list response."""
    items: List[BuyerResponse]
    total: int
