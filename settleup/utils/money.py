"""
Money helpers.

Amounts enter and leave the service as two-place ``Decimal`` values. All
arithmetic inside the balance and settlement code happens on integer cents,
rounding half away from zero at the boundary.
"""
from decimal import Decimal, ROUND_HALF_UP, InvalidOperation
from typing import Any

CENT = Decimal("0.01")


def to_decimal(value: Any) -> Decimal:
    """Coerce a stored or user supplied amount to ``Decimal``.

    Floats go through ``str`` so ``0.1`` becomes ``Decimal("0.1")`` and not
    its binary expansion. Unparseable values count as zero.
    """
    if isinstance(value, Decimal):
        return value
    if value is None:
        return Decimal(0)
    try:
        return Decimal(str(value))
    except (InvalidOperation, ValueError):
        return Decimal(0)


def to_cents(value: Any) -> int:
    """Convert an amount to integer cents (half away from zero)."""
    amount = to_decimal(value)
    if not amount.is_finite():
        return 0
    return int((amount * 100).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def from_cents(cents: int) -> Decimal:
    """Convert integer cents back to a two-place ``Decimal``."""
    return (Decimal(cents) / 100).quantize(CENT)


def round_currency(value: Any) -> Decimal:
    """Round an amount to the nearest cent."""
    return from_cents(to_cents(value))
