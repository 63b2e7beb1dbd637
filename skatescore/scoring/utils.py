"""
Decimal Utilities
skatescore/scoring/utils.py

Provides precision-safe decimal math for scoring calculations.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Union

CENT = Decimal("0.01")


def to_decimal(value: Union[float, int, str, Decimal], places: int = 2) -> Decimal:
    """Convert a number to Decimal with explicit precision."""
    return Decimal(str(value)).quantize(
        Decimal(10) ** -places, rounding=ROUND_HALF_UP
    )


def round_score(value: Decimal) -> Decimal:
    """
    Round a point value to hundredths, halves away from zero.

    Negative halves go down (-0.945 -> -0.95), matching how positive halves
    go up. Rounding halves toward +inf instead (Math.round style) would give
    -0.94 and make a negative GOE worth less than its mirrored positive one.
    """
    # + 0 turns Decimal("-0.00") into Decimal("0.00")
    return Decimal(value).quantize(CENT, rounding=ROUND_HALF_UP) + 0


def clamp(
    value: Decimal,
    min_val: Decimal = Decimal("0"),
    max_val: Decimal = Decimal("10"),
) -> Decimal:
    """Clamp value to range [min_val, max_val]."""
    return max(min_val, min(max_val, value))


def decimal_sum(values: Iterable[Decimal]) -> Decimal:
    """Sum Decimals, returning Decimal("0") for an empty iterable."""
    return sum(values, Decimal("0"))
