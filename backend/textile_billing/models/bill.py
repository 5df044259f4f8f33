"""
Bill model.

base_amount, tax_amount and tax_percentage are written when the bill is
created or edited and are never recomputed from later tax rate changes. Due
date, days to due, total and status are derived on read.
"""

from sqlalchemy import Column, String, Integer, Float, Boolean, Date, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from textile_billing.db.base import Base


class Bill(Base):
    """Sale of fabric to a buyer through a dalal."""
    
    __tablename__ = "bills"
    
    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    bill_no = Column(Integer, nullable=False, index=True)
    date = Column(Date, nullable=False, index=True)
    
    buyer_id = Column(Integer, ForeignKey("buyers.id"), nullable=False, index=True)
    dalal_id = Column(Integer, ForeignKey("dalals.id"), nullable=False, index=True)
    material_id = Column(Integer, ForeignKey("materials.id"), nullable=False, index=True)
    dhara_id = Column(Integer, ForeignKey("dharas.id"), nullable=False, index=True)
    tax_id = Column(Integer, ForeignKey("taxes.id"), nullable=False, index=True)
    
    meter = Column(Float, nullable=False)
    price_rate = Column(Float, nullable=False)
    chalan_no = Column(String(50), nullable=False)
    taka_count = Column(Integer, nullable=False)
    payment_received = Column(Boolean, nullable=False, default=False, index=True)
    
    base_amount = Column(Float, nullable=False)
    tax_amount = Column(Float, nullable=False)
    # Rate applied when the amounts were computed
    tax_percentage = Column(Float, nullable=False)
    
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=True, onupdate=func.now())
    
    # Relationships (always loaded with the bill, views need every one of them)
    buyer = relationship("Buyer", lazy="selectin")
    dalal = relationship("Dalal", lazy="selectin")
    material = relationship("Material", lazy="selectin")
    dhara = relationship("Dhara", lazy="selectin")
    tax = relationship("Tax", lazy="selectin")
    
    def __repr__(self):
        return f"<Bill(id={self.id}, bill_no={self.bill_no}, date={self.date})>"
