"""Number formatting shared by the gap, recommendation and cost reports.

Exact ties round away from zero: 6.25 prints as '6.3' and $1.25M as '$1.3M'.
Other values round to the nearest digit of their exact binary value.
"""

from decimal import ROUND_HALF_UP, Decimal


def to_fixed(value: float, digits: int = 0) -> str:
    """Format value with a fixed number of decimals, ties rounded up.

    Args:
        value: Finite number to format.
        digits: Decimal places to keep.

    Returns:
        The formatted number, e.g. to_fixed(6.25, 1) -> '6.3'.
    """
    quantum = Decimal(1).scaleb(-digits)
    return str(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def format_currency(amount: float) -> str:
    """Format a dollar amount with a K or M suffix.

    Examples: 1_050_000 -> '$1.1M', 1_250_000 -> '$1.3M', 300_000 -> '$300K',
    750 -> '$750'.
    """
    if amount >= 1_000_000:
        return f"${to_fixed(amount / 1_000_000, 1)}M"
    if amount >= 1_000:
        return f"${to_fixed(amount / 1_000)}K"
    return f"${to_fixed(amount)}"
