"""
Bill aggregate builder.

Turns bill inputs plus the looked-up reference records into the fields that
get persisted, and turns a stored bill plus its references into the
denormalized view shown in lists and printed on invoices. Lookups and
persistence belong to the caller.
"""

from datetime import date
from typing import Any, NamedTuple, Optional

from textile_billing.core.exceptions import DueDateOutOfRangeError, ReferenceNotFoundError
from textile_billing.schemas.bill import BillBase, BillView
from textile_billing.utils.bill_amounts import compute_amounts, total_amount
from textile_billing.utils.due_dates import (
    classify_status,
    compute_days_to_due,
    resolve_due_date,
)


class BillReferences(NamedTuple):
    """Reference records of a bill. A ``None`` entry means the lookup failed."""
    buyer: Optional[Any]
    dalal: Optional[Any]
    material: Optional[Any]
    dhara: Optional[Any]
    tax: Optional[Any]
    
    @classmethod
    def of(cls, bill: Any) -> "BillReferences":
        """References already attached to a loaded bill."""
        return cls(
            buyer=bill.buyer,
            dalal=bill.dalal,
            material=bill.material,
            dhara=bill.dhara,
            tax=bill.tax,
        )


# (reference name, foreign key field on the bill)
REFERENCE_KEYS = (
    ("buyer", "buyer_id"),
    ("dalal", "dalal_id"),
    ("material", "material_id"),
    ("dhara", "dhara_id"),
    ("tax", "tax_id"),
)


def ensure_references(bill: Any, refs: BillReferences) -> None:
    """
    Raise ReferenceNotFoundError for the first reference that did not resolve.
    """
    for name, key in REFERENCE_KEYS:
        if getattr(refs, name) is None:
            raise ReferenceNotFoundError(name, getattr(bill, key, None))


def ensure_due_date(bill_date: date, term_days: int) -> None:
    """Raise DueDateOutOfRangeError when the due date overflows the calendar."""
    try:
        resolve_due_date(bill_date, term_days)
    except OverflowError as e:
        raise DueDateOutOfRangeError(bill_date, term_days) from e


def build_bill_record(bill_data: BillBase, refs: BillReferences) -> dict:
    """
    Validate references and compute the stored amounts of a bill.
    
    Used for both create and update: an edited bill is recomputed in full
    from its new inputs and the tax rate as it is today.
    
    Args:
        bill_data: Validated bill inputs
        refs: Reference records looked up from the bill's foreign keys
        
    Returns:
        Column values ready to be written
        
    Raises:
        ReferenceNotFoundError: If any of the five references is missing
        DueDateOutOfRangeError: If the due date cannot be represented
    """
    ensure_references(bill_data, refs)
    ensure_due_date(bill_data.date, refs.dhara.days)
    amounts = compute_amounts(bill_data.meter, bill_data.price_rate, refs.tax.percentage)
    
    record = bill_data.model_dump()
    record["base_amount"] = amounts.base_amount
    record["tax_amount"] = amounts.tax_amount
    record["tax_percentage"] = refs.tax.percentage
    return record


def build_bill_view(bill: Any, refs: BillReferences, today: date) -> BillView:
    """
    Join a stored bill with its references and age it against ``today``.
    
    The total and the printed tax percentage come from the stored bill, so a
    later change to the tax rate does not alter existing bills.
    """
    ensure_references(bill, refs)
    
    due_date = resolve_due_date(bill.date, refs.dhara.days)
    days_to_due = compute_days_to_due(due_date, today)
    
    return BillView(
        id=bill.id,
        bill_no=bill.bill_no,
        date=bill.date,
        buyer_id=bill.buyer_id,
        buyer_name=refs.buyer.name,
        buyer_gst=refs.buyer.gst_number,
        dalal_id=bill.dalal_id,
        dalal_name=refs.dalal.name,
        material_id=bill.material_id,
        material_name=refs.material.name,
        material_hsn_code=refs.material.hsn_code,
        dhara_id=bill.dhara_id,
        dhara_name=refs.dhara.dhara_name,
        dhara_days=refs.dhara.days,
        tax_id=bill.tax_id,
        tax_name=refs.tax.name,
        tax_percentage=bill.tax_percentage,
        meter=bill.meter,
        price_rate=bill.price_rate,
        chalan_no=bill.chalan_no,
        taka_count=bill.taka_count,
        payment_received=bool(bill.payment_received),
        base_amount=bill.base_amount,
        tax_amount=bill.tax_amount,
        total_amount=total_amount(bill.base_amount, bill.tax_amount),
        due_date=due_date,
        days_to_due=days_to_due,
        status=classify_status(bool(bill.payment_received), days_to_due),
    )
