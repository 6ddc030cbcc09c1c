"""
Exponent-normalised value conversion.

Amounts arrive as integers in an asset's smallest unit (10^-exponent of a
whole unit). These helpers rescale them to the valuation unit
(VALUATION_EXPONENT) so heterogeneous assets can be summed and divided.

- exponent_factor(): exact 10^(result - initial), bounded by the decimal grid.
- normalized_amount(): amount expressed in whole units of the valuation scale.
- value_at_reference(): amount valued at a unit price, quantised to the grid.
"""

from __future__ import annotations

from decimal import Decimal

from .constants import DECIMAL_CONTEXT, MAX_EXPONENT_DIFFERENCE, VALUATION_EXPONENT
from .exc import InvalidExponent
from .fmt import check_amount, check_decimal, quantize_even


def exponent_factor(initial: int, result: int) -> Decimal:
    """Return 10^(result - initial) as an exact Decimal.

    Raises InvalidExponent for negative exponents or when the difference
    falls outside +/- MAX_EXPONENT_DIFFERENCE.
    """
    if initial < 0 or result < 0:
        raise InvalidExponent(initial, result)
    diff = result - initial
    if abs(diff) > MAX_EXPONENT_DIFFERENCE:
        raise InvalidExponent(initial, result, limit=MAX_EXPONENT_DIFFERENCE)
    return Decimal(1).scaleb(diff, context=DECIMAL_CONTEXT)


def normalized_amount(amount: int, exponent: int) -> Decimal:
    """Express `amount` smallest units as whole units at VALUATION_EXPONENT."""
    check_amount(amount)
    factor = exponent_factor(exponent, VALUATION_EXPONENT)
    return DECIMAL_CONTEXT.multiply(factor, Decimal(amount))


def value_at_reference(amount: int, exponent: int, unit_price: Decimal) -> Decimal:
    """Value of `amount` smallest units at `unit_price` per whole unit."""
    price = check_decimal(unit_price, "unit_price")
    units = normalized_amount(amount, exponent)
    return quantize_even(DECIMAL_CONTEXT.multiply(units, price))


__all__ = [
    "exponent_factor",
    "normalized_amount",
    "value_at_reference",
]
