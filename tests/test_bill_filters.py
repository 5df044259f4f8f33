"""
Bill filter and urgent list tests.
"""

from datetime import date, timedelta

import pytest
from pydantic import ValidationError

from textile_billing.schemas.bill import BillFilter, BillStatusFilter, BillView
from textile_billing.utils.bill_filters import filter_bills, is_urgent, urgent_bills
from textile_billing.utils.due_dates import classify_status


def make_view(id, bill_date, buyer_id=1, paid=False, days_to_due=10):
    return BillView(
        id=id,
        bill_no=id,
        date=bill_date,
        buyer_id=buyer_id,
        buyer_name=f"Buyer {buyer_id}",
        dalal_id=1,
        dalal_name="Kishan Patel",
        material_id=1,
        material_name="Cotton",
        dhara_id=1,
        dhara_name="Regular (35 days)",
        dhara_days=35,
        tax_id=1,
        tax_name="GST",
        tax_percentage=5,
        meter=10,
        price_rate=100,
        chalan_no=str(id),
        taka_count=2,
        payment_received=paid,
        base_amount=1000,
        tax_amount=50,
        total_amount=1050,
        due_date=bill_date + timedelta(days=35),
        days_to_due=days_to_due,
        status=classify_status(paid, days_to_due),
    )


@pytest.fixture
def bills():
    return [
        make_view(1, date(2025, 7, 1), buyer_id=1, paid=True, days_to_due=-15),
        make_view(2, date(2025, 8, 5), buyer_id=2, days_to_due=-5),
        make_view(3, date(2025, 8, 5), buyer_id=1, days_to_due=3),
        make_view(4, date(2025, 6, 10), buyer_id=2, days_to_due=-40),
        make_view(5, date(2025, 9, 1), buyer_id=1, days_to_due=20),
    ]


def ids(bills):
    return [bill.id for bill in bills]


def test_empty_filter_returns_everything_newest_first(bills):
    result = filter_bills(bills, BillFilter())
    
    assert ids(result) == [5, 3, 2, 1, 4]
    assert sorted(ids(result)) == sorted(ids(bills))


def test_pending_keeps_every_unpaid_bill(bills):
    result = filter_bills(bills, BillFilter(status=BillStatusFilter.PENDING))
    
    assert ids(result) == [5, 3, 2, 4]


def test_paid(bills):
    assert ids(filter_bills(bills, BillFilter(status="paid"))) == [1]


def test_buyer_filter(bills):
    assert ids(filter_bills(bills, BillFilter(buyer_id=2))) == [2, 4]


def test_date_range_is_inclusive(bills):
    bill_filter = BillFilter(from_date=date(2025, 7, 1), to_date=date(2025, 8, 5))
    
    assert ids(filter_bills(bills, bill_filter)) == [3, 2, 1]


def test_criteria_combine(bills):
    bill_filter = BillFilter(status="pending", buyer_id=1, from_date=date(2025, 8, 1))
    
    assert ids(filter_bills(bills, bill_filter)) == [5, 3]


def test_filter_does_not_mutate_input(bills):
    before = ids(bills)
    
    filter_bills(bills, BillFilter(status="pending"))
    filter_bills(bills, BillFilter(status="pending"))
    
    assert ids(bills) == before


def test_inverted_date_range_is_rejected():
    with pytest.raises(ValidationError):
        BillFilter(from_date=date(2025, 9, 1), to_date=date(2025, 8, 1))


def test_urgent_has_no_lower_bound_and_sorts_most_overdue_first(bills):
    assert ids(urgent_bills(bills)) == [4, 2, 3]


def test_urgent_boundary():
    assert is_urgent(make_view(1, date(2025, 8, 1), days_to_due=5))
    assert not is_urgent(make_view(2, date(2025, 8, 1), days_to_due=6))
    assert not is_urgent(make_view(3, date(2025, 8, 1), paid=True, days_to_due=-3))
