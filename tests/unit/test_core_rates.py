import pytest
from decimal import Decimal

from metoken_pricing.core.exc import InvalidExponent, ZeroPrice
from metoken_pricing.core.rates import rate, redeem_rate, swap_rate


def _d(x: str) -> Decimal:
    return Decimal(x)


def test_rate_same_exponent_is_price_ratio():
    print("[rate-basic] 1 USD asset vs 500 USD index, both exp 6 -> 0.002")
    assert rate(_d("1"), _d("500"), 6, 6) == _d("0.002")
    assert rate(_d("500"), _d("1"), 6, 6) == _d("500")


def test_rate_applies_exponent_shift():
    print("[rate-exponent] ETH (exp 18) at 2000 into index (exp 6) at 500 -> 4e-12 per wei")
    assert rate(_d("2000"), _d("500"), 18, 6) == _d("4e-12")
    print("[rate-exponent] index (exp 6) at 500 into ETH (exp 18) at 2000 -> 0.25e12 wei per unit")
    assert rate(_d("500"), _d("2000"), 6, 18) == _d("250000000000")


def test_rate_zero_target_price_raises_before_division():
    print("[rate-zero] price_to == 0 -> expect ZeroPrice, never DivisionByZero")
    with pytest.raises(ZeroPrice) as ei:
        rate(_d("1"), _d("0"), 6, 6)
    assert ei.value.price_to == 0


def test_rate_zero_source_price_is_zero_rate():
    assert rate(_d("0"), _d("3"), 6, 6) == 0


def test_rate_invalid_exponent_surfaces():
    with pytest.raises(InvalidExponent):
        rate(_d("1"), _d("1"), 0, 19)


def test_swap_and_redeem_rounded_independently():
    print("[rate-independent] ETH 2000 vs index 1000.5: each direction rounds on its own grid")
    asset_price, index_price = _d("2000"), _d("1000.5")
    swap = swap_rate(asset_price, index_price, 18, 6)
    redeem = redeem_rate(asset_price, index_price, 18, 6)
    print("swap ->", swap, "; redeem ->", redeem)
    # 2000/1000.5 = 1.99900049975012493753... -> 1.999000499750124938, then * 1e-12 -> 18 places
    assert swap == _d("0.000000000001999000")
    # 1000.5/2000 = 0.50025, * 1e12
    assert redeem == _d("500250000000")


def test_swap_rate_small_quotient_rounding():
    print("[rate-rounding] 1/1000.5 = 0.000999500249875062(4...) -> rounds down at 18 places")
    assert swap_rate(_d("1"), _d("1000.5"), 6, 6) == _d("0.000999500249875062")
    print("[rate-rounding] 2/3 -> 0.666666666666666667 (half-even)")
    assert rate(_d("2"), _d("3"), 0, 0) == _d("0.666666666666666667")
