"""
Decimal Utilities
ospa/scoring/utils.py

Exact decimal math for scoring. Subtotals stay unrounded; quantizing only
happens in projection.py.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Union

Number = Union[int, float, str, Decimal]

ZERO = Decimal("0")
TWO_PLACES = Decimal("0.01")
THREE_PLACES = Decimal("0.001")


def to_decimal(value: Number) -> Decimal:
    """Convert to Decimal via str so 0.13 stays 0.13 rather than its binary float."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def decimal_sum(values: Iterable[Decimal]) -> Decimal:
    """Sum that returns Decimal("0") for an empty iterable."""
    return sum(values, ZERO)


def quantize(value: Decimal, places: Decimal = TWO_PLACES) -> Decimal:
    """Round half up to the given exponent (0.01 by default)."""
    return value.quantize(places, rounding=ROUND_HALF_UP)
