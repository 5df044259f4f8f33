"""
Company profile schemas. The profile is printed in the invoice header and footer.
"""

from pydantic import BaseModel, Field
from typing import Optional


class CompanyProfileBase(BaseModel):
    """Company details shown on invoices."""
    name: str = Field(..., min_length=1, max_length=200)
    tagline: Optional[str] = Field(None, max_length=200)
    address: str = Field(..., min_length=1, max_length=500)
    contact: str = Field(..., min_length=1, max_length=100)
    gst: str = Field(..., min_length=1, max_length=20)
    pan: str = Field(..., min_length=1, max_length=20)
    business_type: Optional[str] = Field(None, max_length=200)
    bank_name: Optional[str] = Field(None, max_length=200)
    account_no: Optional[str] = Field(None, max_length=50)
    ifsc: Optional[str] = Field(None, max_length=20)
    branch: Optional[str] = Field(None, max_length=100)
    terms_conditions: Optional[str] = None


class CompanyProfileUpdate(CompanyProfileBase):
    """Schema for saving the company profile (full replacement)."""
    pass


class CompanyProfileResponse(CompanyProfileBase):
    """Schema for company profile response."""
    id: int
    
    class Config:
        from_attributes = True
