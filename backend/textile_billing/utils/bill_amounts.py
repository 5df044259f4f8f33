"""
Rate and tax arithmetic for bills.

Amounts are kept at full float precision; rounding to two decimals happens only
where values are displayed or printed.
"""

from typing import NamedTuple


class BillAmounts(NamedTuple):
    """Money figures of a single bill."""
    base_amount: float
    tax_amount: float
    total_amount: float


def compute_tax_amount(base_amount: float, tax_percentage: float) -> float:
    """Tax charged on ``base_amount`` at ``tax_percentage`` percent."""
    return base_amount * tax_percentage / 100


def total_amount(base_amount: float, tax_amount: float) -> float:
    """Total payable from the stored base and tax amounts."""
    return base_amount + tax_amount


def compute_amounts(meter: float, price_rate: float, tax_percentage: float) -> BillAmounts:
    """
    Compute base, tax and total amounts of a bill.
    
    Callers validate that meter and price_rate are positive and that the tax
    percentage is non-negative (0 is a legal no-tax rate).
    
    Args:
        meter: Quantity of fabric in meters
        price_rate: Price per meter
        tax_percentage: Tax rate in percent
        
    Returns:
        BillAmounts with base, tax and total amounts
    """
    base_amount = meter * price_rate
    tax_amount = compute_tax_amount(base_amount, tax_percentage)
    return BillAmounts(
        base_amount=base_amount,
        tax_amount=tax_amount,
        total_amount=total_amount(base_amount, tax_amount),
    )
