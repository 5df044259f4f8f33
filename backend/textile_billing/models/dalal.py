"""
Dalal model.
"""

from sqlalchemy import Column, String, Integer

from textile_billing.db.base import Base


class Dalal(Base):
    """Broker who arranged the sale."""
    
    __tablename__ = "dalals"
    
    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    name = Column(String(200), nullable=False, index=True)
    contact_number = Column(String(20), nullable=False)
    address = Column(String(500), nullable=True)
