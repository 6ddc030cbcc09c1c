"""
Directional conversion rates between two priced denominations.

rate(from, to) answers: how many smallest units of `to` is one smallest unit
of `from` worth. The price ratio and the exponent shift are quantised
separately, so rate(a, b) * rate(b, a) need not equal 1. Swap and redeem
rates are each derived on their own.
"""

from __future__ import annotations

from decimal import Decimal

from .constants import DECIMAL_CONTEXT
from .exc import ZeroPrice
from .exponents import exponent_factor
from .fmt import check_decimal, quantize_even


def rate(price_from: Decimal, price_to: Decimal, exponent_from: int, exponent_to: int) -> Decimal:
    """Return price_from / price_to scaled by 10^(exponent_to - exponent_from)."""
    price_from = check_decimal(price_from, "price_from")
    price_to = check_decimal(price_to, "price_to")
    if price_to == 0:
        raise ZeroPrice(price_from, price_to)
    factor = exponent_factor(exponent_from, exponent_to)
    ratio = quantize_even(DECIMAL_CONTEXT.divide(price_from, price_to))
    return quantize_even(DECIMAL_CONTEXT.multiply(ratio, factor))


def swap_rate(asset_price: Decimal, index_price: Decimal, asset_exponent: int, index_exponent: int) -> Decimal:
    """Index-token units obtained per asset unit."""
    return rate(asset_price, index_price, asset_exponent, index_exponent)


def redeem_rate(asset_price: Decimal, index_price: Decimal, asset_exponent: int, index_exponent: int) -> Decimal:
    """Asset units obtained per index-token unit."""
    return rate(index_price, asset_price, index_exponent, asset_exponent)


__all__ = [
    "rate",
    "swap_rate",
    "redeem_rate",
]
