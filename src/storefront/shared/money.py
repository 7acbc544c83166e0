"""Monetary rounding for prices held in ``Float`` fields."""

from decimal import ROUND_HALF_UP, Decimal

_CENT = Decimal("0.01")


def to_cents(amount):
    """Round ``amount`` half-up to two decimal places; ``None`` stays ``None``.

    Goes through the decimal string form, so 1.005 becomes 1.01.
    """
    if amount is None:
        return None
    return float(Decimal(str(amount)).quantize(_CENT, rounding=ROUND_HALF_UP))
