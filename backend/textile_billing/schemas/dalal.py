"""
Dalal (broker) Pydantic schemas.
"""

from pydantic import BaseModel, Field
from typing import Optional, List

from textile_billing.schemas.partial_update import PartialUpdate


class DalalBase(BaseModel):
    """Base dalal schema with common fields."""
    name: str = Field(..., min_length=1, max_length=200)
    contact_number: str = Field(..., min_length=1, max_length=20)
    address: Optional[str] = Field(None, max_length=500)


class DalalCreate(DalalBase):
    """Schema for creating a dalal."""
    pass


class DalalUpdate(PartialUpdate):
    """Schema for updating a dalal (all fields optional)."""
    not_nullable = ("name", "contact_number")
    
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    contact_number: Optional[str] = Field(None, min_length=1, max_length=20)
    address: Optional[str] = Field(None, max_length=500)


class DalalResponse(DalalBase):
    """Schema for dalal response."""
    id: int
    
    class Config:
        from_attributes = True


class DalalListResponse(BaseModel):
    """Schema for dalal list response."""
    items: List[DalalResponse]
    total: int
