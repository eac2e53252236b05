"""Decimal helpers for amounts and currency display."""

from decimal import Decimal

CENTS = Decimal("0.01")

Amount = Decimal | int | float | str


def to_decimal(value: Amount) -> Decimal:
    """Normalise an amount to ``Decimal``.

    Floats go through ``str()`` so that ``0.05`` becomes ``Decimal("0.05")``
    instead of its binary expansion.
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def format_currency(amount: Decimal, symbol: str = "$") -> str:
    """Format an amount with two decimals, e.g. ``$1250.00``."""
    return f"{symbol}{amount.quantize(CENTS):.2f}"


def format_rate(rate: Decimal) -> str:
    """Format a rate fraction as a percentage, e.g. ``5.00%``."""
    return f"{(rate * 100).quantize(CENTS):.2f}%"
