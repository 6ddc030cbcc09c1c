import pytest
from decimal import Decimal, localcontext

from metoken_pricing.core.exc import AmountDomainError, InvariantViolation
from metoken_pricing.core.fmt import (
    check_amount,
    check_decimal,
    fmt_dec,
    fmt_fixed,
    quantize_down,
    quantize_even,
    truncate_int,
)


# -----------------------------
# Domain checks
# -----------------------------

@pytest.mark.parametrize("x,expected", [(Decimal("1.5"), Decimal("1.5")), (3, Decimal(3)), ("0.25", Decimal("0.25"))])
def test_check_decimal_accepts_exact_inputs(x, expected):
    assert check_decimal(x) == expected


@pytest.mark.parametrize("x", [1.0, True, Decimal("-1"), Decimal("NaN"), Decimal("Infinity"), "abc", None])
def test_check_decimal_rejects(x):
    print(f"[check_decimal] {x!r} -> expect AmountDomainError")
    with pytest.raises(AmountDomainError):
        check_decimal(x)


@pytest.mark.parametrize("n", [-1, 1.0, "1", False])
def test_check_amount_rejects(n):
    with pytest.raises(AmountDomainError):
        check_amount(n)


@pytest.mark.parametrize("x", [Decimal("1e1000000"), Decimal("1e-1000000"), Decimal("1e81"), "1e-81"])
def test_check_decimal_rejects_extreme_magnitudes(x):
    print(f"[check_decimal] {x!r} outside 1e-80..1e80 -> expect AmountDomainError")
    with pytest.raises(AmountDomainError):
        check_decimal(x)


def test_check_decimal_magnitude_bounds_inclusive():
    assert check_decimal(Decimal("1e80")) == Decimal("1e80")
    assert check_decimal(Decimal("9.99e80")) == Decimal("9.99e80")
    assert check_decimal(Decimal("1e-80")) == Decimal("1e-80")
    assert check_decimal(0) == 0


def test_check_amount_rejects_beyond_bound():
    assert check_amount(10**80 - 1) == 10**80 - 1
    with pytest.raises(AmountDomainError):
        check_amount(10**80)


# -----------------------------
# Quantisation
# -----------------------------

def test_quantize_even_and_down():
    print("[quantize] 2/3 at 18 places: even -> ...667, down -> ...666")
    x = Decimal(2) / Decimal(3)
    assert quantize_even(x) == Decimal("0.666666666666666667")
    assert quantize_down(x) == Decimal("0.666666666666666666")


def test_quantize_independent_of_thread_context():
    print("[quantize-context] a low-precision caller context must not change results")
    x = Decimal("12345678901234567890.123456789012345678")
    with localcontext() as ctx:
        ctx.prec = 5
        assert quantize_even(x) == Decimal("12345678901234567890.123456789012345678")


def test_quantize_beyond_precision_raises():
    with pytest.raises(InvariantViolation):
        quantize_even(Decimal("1e90"))


def test_truncate_int_never_rounds_up():
    assert truncate_int(Decimal("3999999.999999")) == 3999999
    assert truncate_int(Decimal("0")) == 0
    with pytest.raises(AmountDomainError):
        truncate_int(Decimal("-1"))


# -----------------------------
# Display
# -----------------------------

def test_fmt_dec_scientific_formatting():
    print("[fmt_dec] check scientific formatting stability")
    assert fmt_dec(Decimal("1")) == "1.000000000000000000E+0"
    assert fmt_dec(Decimal("123456")) == "1.234560000000000000E+5"


def test_fmt_fixed_truncates():
    assert fmt_fixed(Decimal("1000.5"), 2) == "1000.50"
    assert fmt_fixed(Decimal("0.000999500249875062"), 6) == "0.000999"
    assert fmt_fixed(Decimal("4e-12"), 18) == "0.000000000004000000"
