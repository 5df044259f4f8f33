"""
Rate and tax calculator tests.
"""

import pytest

from textile_billing.utils.bill_amounts import compute_amounts, compute_tax_amount, total_amount


def test_worked_example():
    amounts = compute_amounts(50, 200, 10)
    
    assert amounts.base_amount == 10000
    assert amounts.tax_amount == 1000
    assert amounts.total_amount == 11000


def test_zero_tax_rate_is_allowed():
    amounts = compute_amounts(12.5, 80, 0)
    
    assert amounts.tax_amount == 0
    assert amounts.total_amount == amounts.base_amount == 1000


@pytest.mark.parametrize(
    "meter, price_rate, tax_percentage",
    [
        (1, 1, 5),
        (33.3, 47.75, 5),
        (120.25, 99.99, 12),
        (0.01, 10000, 18),
        (7, 3.1, 2.5),
    ],
)
def test_total_is_base_plus_tax(meter, price_rate, tax_percentage):
    amounts = compute_amounts(meter, price_rate, tax_percentage)
    
    assert amounts.base_amount == pytest.approx(meter * price_rate)
    assert amounts.tax_amount == pytest.approx(amounts.base_amount * tax_percentage / 100)
    assert amounts.total_amount == pytest.approx(amounts.base_amount + amounts.tax_amount)


def test_no_rounding_is_applied():
    amounts = compute_amounts(3, 0.335, 5)
    
    # 1.005 would round to 1.0 or 1.01 at two decimals
    assert amounts.base_amount == pytest.approx(1.005)
    assert amounts.tax_amount == pytest.approx(0.05025)


def test_same_input_same_output():
    assert compute_amounts(42.5, 310, 5) == compute_amounts(42.5, 310, 5)


def test_helpers():
    assert compute_tax_amount(2000, 5) == 100
    assert total_amount(2000, 100) == 2100
