"""
Dhara (payment term) Pydantic schemas.
"""

from pydantic import BaseModel, Field
from typing import Optional, List

from textile_billing.schemas.partial_update import PartialUpdate


class DharaBase(BaseModel):
    """Base dhara schema with common fields."""
    dhara_name: str = Field(..., min_length=1, max_length=100)
    days: int = Field(..., ge=0, le=3650, description="Credit period in days, 0 for cash")


class DharaCreate(DharaBase):
    """Schema for creating a dhara."""
    pass


class DharaUpdate(PartialUpdate):
    """Schema for updating a dhara (all fields optional)."""
    not_nullable = ("dhara_name", "days")
    
    dhara_name: Optional[str] = Field(None, min_length=1, max_length=100)
    days: Optional[int] = Field(None, ge=0, le=3650)


class DharaResponse(DharaBase):
    """Schema for dhara response."""
    id: int
    
    class Config:
        from_attributes = True


class DharaListResponse(BaseModel):
    """Schema for dhara list response."""
    items: List[DharaResponse]
    total: int
