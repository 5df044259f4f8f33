"""
Buyer model.
"""

from sqlalchemy import Column, String, Integer

from textile_billing.db.base import Base


class Buyer(Base):
    """Party the fabric is sold to."""
    
    __tablename__ = "buyers"
    
    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    name = Column(String(200), nullable=False, index=True)
    address = Column(String(500), nullable=True)
    contact_number = Column(String(20), nullable=False)
    gst_number = Column(String(20), nullable=True)
    
    def __repr__(self):
        return f"<Buyer(id={self.id}, name={self.name})>"
