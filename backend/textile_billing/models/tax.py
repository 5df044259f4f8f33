"""
Tax rate model.
"""

from sqlalchemy import Column, String, Integer, Float

from textile_billing.db.base import Base


class Tax(Base):
    """Tax rate applied to a bill's base amount."""
    
    __tablename__ = "taxes"
    
    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    name = Column(String(100), nullable=False)  # e.g., "GST 5%"
    percentage = Column(Float, nullable=False, default=0.0)
