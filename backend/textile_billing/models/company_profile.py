"""
Company profile model. A single row holds the seller's own details.
"""

from sqlalchemy import Column, String, Integer, Text

from textile_billing.db.base import Base


class CompanyProfile(Base):
    """Seller details printed on invoices."""
    
    __tablename__ = "company_profile"
    
    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(200), nullable=False)
    tagline = Column(String(200), nullable=True)
    address = Column(String(500), nullable=False)
    contact = Column(String(100), nullable=False)
    gst = Column(String(20), nullable=False)
    pan = Column(String(20), nullable=False)
    business_type = Column(String(200), nullable=True)
    bank_name = Column(String(200), nullable=True)
    account_no = Column(String(50), nullable=True)
    ifsc = Column(String(20), nullable=True)
    branch = Column(String(100), nullable=True)
    terms_conditions = Column(Text, nullable=True)
