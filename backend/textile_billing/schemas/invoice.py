"""
Invoice payload schemas consumed by the PDF layer.
"""

from pydantic import BaseModel
from typing import Optional

from textile_billing.schemas.bill import BillView
from textile_billing.schemas.company_profile import CompanyProfileResponse


class InvoiceAmounts(BaseModel):
    """Amounts rounded to paise for printing."""
    base_amount: float
    tax_amount: float
    total_amount: float


class InvoiceResponse(BaseModel):
    """Everything needed to print one bill."""
    bill: BillView
    company: Optional[CompanyProfileResponse] = None
    amounts: InvoiceAmounts
    amount_in_words: str
