"""Decimal rounding helpers for monetary values and rates."""

from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal

CENT = Decimal("0.01")
ZERO = Decimal("0.00")


def to_money(value: Decimal | int) -> Decimal:
    """Round to two decimal places, half away from zero."""
    return Decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


def sum_money(values: Iterable[Decimal]) -> Decimal:
    """Sum amounts and round the total."""
    return to_money(sum(values, Decimal("0")))


def round_rate(numerator: float | int, denominator: float | int) -> float:
    """Percentage of numerator over denominator with two decimals, 0 on empty denominator."""
    if not denominator:
        return 0.0
    return round(numerator / denominator * 100, 2)
