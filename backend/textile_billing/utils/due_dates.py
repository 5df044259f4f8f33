"""
Due date and aging rules for bills.

"Today" is always an argument. Nothing here reads the clock, so the same bill
ages deterministically in tests.
"""

import enum
from datetime import date, datetime, timedelta

# A bill due within this many days (inclusive) is "due soon"
DUE_SOON_DAYS = 5


class BillStatus(str, enum.Enum):
    """Payment status of a bill as seen on a given day."""
    PAID = "paid"
    OVERDUE = "overdue"
    DUE_SOON = "due-soon"
    PENDING = "pending"


def _as_date(value: date) -> date:
    # datetime is a date subclass but cannot be subtracted from a plain date
    if isinstance(value, datetime):
        return value.date()
    return value


def resolve_due_date(bill_date: date, term_days: int) -> date:
    """Bill date plus the credit period of its payment term (0 = cash)."""
    return _as_date(bill_date) + timedelta(days=term_days)


def compute_days_to_due(due_date: date, today: date) -> int:
    """
    Whole days from ``today`` until ``due_date``.
    
    Positive means due in the future, zero means due today and negative means
    overdue by that many days.
    """
    return (_as_date(due_date) - _as_date(today)).days


def classify_status(payment_received: bool, days_to_due: int) -> BillStatus:
    """
    Classify a bill. Priority is paid, overdue, due soon, pending.
    
    A paid bill is always PAID, however long ago it fell due.
    """
    if payment_received:
        return BillStatus.PAID
    if days_to_due < 0:
        return BillStatus.OVERDUE
    if days_to_due <= DUE_SOON_DAYS:
        return BillStatus.DUE_SOON
    return BillStatus.PENDING
