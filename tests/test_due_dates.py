"""
Due date and aging tests.
"""

from datetime import date, datetime, timedelta

import pytest

from textile_billing.utils.due_dates import (
    BillStatus,
    DUE_SOON_DAYS,
    classify_status,
    compute_days_to_due,
    resolve_due_date,
)


def test_worked_example():
    due_date = resolve_due_date(date(2025, 8, 5), 10)
    
    assert due_date == date(2025, 8, 15)
    days_to_due = compute_days_to_due(due_date, date(2025, 8, 20))
    assert days_to_due == -5
    assert classify_status(False, days_to_due) == BillStatus.OVERDUE


@pytest.mark.parametrize("term_days", [0, 1, 10, 35, 60, 365])
def test_due_date_is_term_days_after_bill_date(term_days):
    bill_date = date(2024, 2, 20)
    
    due_date = resolve_due_date(bill_date, term_days)
    
    assert (due_date - bill_date).days == term_days
    assert compute_days_to_due(due_date, bill_date) == term_days


def test_cash_term_is_due_same_day():
    bill_date = date(2025, 3, 1)
    
    due_date = resolve_due_date(bill_date, 0)
    
    assert due_date == bill_date
    assert compute_days_to_due(due_date, bill_date) == 0
    assert classify_status(False, 0) == BillStatus.DUE_SOON


def test_due_date_crosses_month_and_leap_day():
    assert resolve_due_date(date(2024, 2, 25), 10) == date(2024, 3, 6)
    assert resolve_due_date(date(2025, 12, 20), 35) == date(2026, 1, 24)


def test_future_bill_date_is_not_rejected():
    today = date(2025, 1, 1)
    due_date = resolve_due_date(today + timedelta(days=30), 35)
    
    assert compute_days_to_due(due_date, today) == 65


def test_datetime_today_is_truncated_to_day():
    due_date = date(2025, 8, 15)
    
    assert compute_days_to_due(due_date, datetime(2025, 8, 14, 23, 59)) == 1


def test_paid_wins_over_overdue():
    assert classify_status(True, -100) == BillStatus.PAID
    assert classify_status(True, 3) == BillStatus.PAID
    assert classify_status(True, 40) == BillStatus.PAID


@pytest.mark.parametrize(
    "days_to_due, expected",
    [
        (-30, BillStatus.OVERDUE),
        (-1, BillStatus.OVERDUE),
        (0, BillStatus.DUE_SOON),
        (3, BillStatus.DUE_SOON),
        (DUE_SOON_DAYS, BillStatus.DUE_SOON),
        (DUE_SOON_DAYS + 1, BillStatus.PENDING),
        (35, BillStatus.PENDING),
    ],
)
def test_unpaid_status_boundaries(days_to_due, expected):
    assert classify_status(False, days_to_due) == expected


def test_status_values():
    assert [status.value for status in BillStatus] == ["paid", "overdue", "due-soon", "pending"]
