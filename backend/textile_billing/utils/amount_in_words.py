"""
Indian-English amount in words for printed invoices.

Groups use the Indian numbering system (thousand, lakh, crore), e.g.
150075.50 -> "One Lakh Fifty Thousand Seventy Five Rupees and Fifty Paise Only".
"""

import math

ONES = ["", "One", "Two", "Three", "Four", "Five", "Six", "Seven", "Eight", "Nine"]
TEENS = [
    "Ten", "Eleven", "Twelve", "Thirteen", "Fourteen",
    "Fifteen", "Sixteen", "Seventeen", "Eighteen", "Nineteen",
]
TENS = ["", "", "Twenty", "Thirty", "Forty", "Fifty", "Sixty", "Seventy", "Eighty", "Ninety"]

# Largest first
GROUPS = (
    (10_000_000, "Crore"),
    (100_000, "Lakh"),
    (1_000, "Thousand"),
    (100, "Hundred"),
)


def number_to_words(n: int) -> str:
    """Spell a positive integer. Zero yields an empty string."""
    if n < 10:
        return ONES[n]
    if n < 20:
        return TEENS[n - 10]
    if n < 100:
        tens, ones = divmod(n, 10)
        return f"{TENS[tens]} {ONES[ones]}" if ones else TENS[tens]
    
    # Largest group that fits; Hundred always does from here on
    divisor, label = next(group for group in GROUPS if n >= group[0])
    head, rest = divmod(n, divisor)
    words = f"{number_to_words(head)} {label}"
    return f"{words} {number_to_words(rest)}" if rest else words


def split_rupees_paise(amount: float) -> tuple[int, int]:
    """Split an amount into whole rupees and paise rounded half up."""
    rupees = math.floor(amount)
    paise = math.floor((amount - rupees) * 100 + 0.5)
    if paise == 100:
        rupees, paise = rupees + 1, 0
    return int(rupees), int(paise)


def amount_to_words(amount: float) -> str:
    """
    Spell a rupee amount for an invoice.
    
    Args:
        amount: Non-negative, finite amount in rupees
        
    Returns:
        Words ending in "Only"; paise are included only when non-zero
        
    Raises:
        ValueError: If the amount is negative or not finite
    """
    if not math.isfinite(amount) or amount < 0:
        raise ValueError(f"Amount must be a non-negative finite number, got {amount!r}")
    
    rupees, paise = split_rupees_paise(amount)
    words = f"{number_to_words(rupees) or 'Zero'} Rupees"
    if paise > 0:
        words += f" and {number_to_words(paise)} Paise"
    return f"{words} Only"
