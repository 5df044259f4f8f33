"""
Dhara model for payment terms reference table.
"""

from sqlalchemy import Column, String, Integer

from textile_billing.db.base import Base


class Dhara(Base):
    """Payment term: credit period granted before a bill falls due."""
    
    __tablename__ = "dharas"
    
    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    dhara_name = Column(String(100), nullable=False)  # e.g., "Regular (35 days)"
    days = Column(Integer, nullable=False, default=0)  # 0 = cash
    
    def __repr__(self):
        return f"<Dhara(dhara_name={self.dhara_name}, days={self.days})>"
