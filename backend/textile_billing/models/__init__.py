"""
Database models.
Import all models here to ensure they're registered with Base.
"""

from textile_billing.models.buyer import Buyer
from textile_billing.models.dalal import Dalal
from textile_billing.models.material import Material
from textile_billing.models.dhara import Dhara
from textile_billing.models.tax import Tax
from textile_billing.models.bill import Bill
from textile_billing.models.company_profile import CompanyProfile

__all__ = [
    "Buyer",
    "Dalal",
    "Material",
    "Dhara",
    "Tax",
    "Bill",
    "CompanyProfile",
]
