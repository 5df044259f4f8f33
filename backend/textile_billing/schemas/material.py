"""
Material Pydantic schemas.
"""

from pydantic import BaseModel, Field
from typing import Optional, List

from textile_billing.schemas.partial_update import PartialUpdate


class MaterialBase(BaseModel):
    """Base material schema with common fields."""
    name: str = Field(..., min_length=1, max_length=200)
    extra_detail: Optional[str] = Field(None, max_length=500)
    hsn_code: Optional[str] = Field(None, max_length=20, description="HSN tax classification code printed on invoices")


class MaterialCreate(MaterialBase):
    """Schema for creating a material."""
    pass


class MaterialUpdate(PartialUpdate):
    """Schema for updating a material (all fields optional)."""
    not_nullable = ("name",)
    
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    extra_detail: Optional[str] = Field(None, max_length=500)
    hsn_code: Optional[str] = Field(None, max_length=20)


class MaterialResponse(MaterialBase):
    """Schema for material response."""
    id: int
    
    class Config:
        from_attributes = True


class MaterialListResponse(BaseModel):
    """Schema for material list response."""
    items: List[MaterialResponse]
    total: int
