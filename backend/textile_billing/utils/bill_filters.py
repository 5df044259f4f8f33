"""
Filtering and ordering of bill views.

Functions here never mutate their input and return new lists.
"""

from typing import Iterable, List

from textile_billing.schemas.bill import BillFilter, BillStatusFilter, BillView
from textile_billing.utils.due_dates import DUE_SOON_DAYS


def _matches(bill: BillView, bill_filter: BillFilter) -> bool:
    if bill_filter.status == BillStatusFilter.PENDING and bill.payment_received:
        return False
    if bill_filter.status == BillStatusFilter.PAID and not bill.payment_received:
        return False
    if bill_filter.buyer_id is not None and bill.buyer_id != bill_filter.buyer_id:
        return False
    # ISO dates order the same lexicographically and chronologically
    bill_day = bill.date.isoformat()
    if bill_filter.from_date is not None and bill_day < bill_filter.from_date.isoformat():
        return False
    if bill_filter.to_date is not None and bill_day > bill_filter.to_date.isoformat():
        return False
    return True


def sort_by_date_desc(bills: Iterable[BillView]) -> List[BillView]:
    """Most recent bill first; bills of the same day by id, newest first."""
    return sorted(bills, key=lambda bill: (bill.date, bill.id), reverse=True)


def filter_bills(bills: Iterable[BillView], bill_filter: BillFilter) -> List[BillView]:
    """
    Apply a bill filter and return the matches, most recent first.
    
    The "pending" status keeps every unpaid bill regardless of how close or
    how far past its due date it is.
    """
    return sort_by_date_desc(bill for bill in bills if _matches(bill, bill_filter))


def is_urgent(bill: BillView) -> bool:
    """Unpaid and due within DUE_SOON_DAYS, including every overdue bill."""
    return not bill.payment_received and bill.days_to_due <= DUE_SOON_DAYS


def urgent_bills(bills: Iterable[BillView]) -> List[BillView]:
    """Bills needing attention, most overdue first."""
    return sorted(
        (bill for bill in bills if is_urgent(bill)),
        key=lambda bill: (bill.days_to_due, bill.id),
    )
