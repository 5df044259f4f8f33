"""
Material model.
"""

from sqlalchemy import Column, String, Integer

from textile_billing.db.base import Base


class Material(Base):
    """Fabric material reference table."""
    
    __tablename__ = "materials"
    
    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    name = Column(String(200), nullable=False, index=True)  # e.g., "Cotton"
    extra_detail = Column(String(500), nullable=True)
    hsn_code = Column(String(20), nullable=True)
