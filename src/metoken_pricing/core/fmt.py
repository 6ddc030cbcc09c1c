"""
Decimal domain checks, grid quantisation and display helpers.

All quantisation runs in DECIMAL_CONTEXT so results are identical on every
node regardless of the caller's thread-local Decimal settings.
"""

from decimal import Decimal, InvalidOperation, ROUND_DOWN, ROUND_HALF_EVEN

from .constants import DECIMAL_CONTEXT, DECIMAL_QUANTUM, MAX_MAGNITUDE
from .exc import AmountDomainError, InvariantViolation


# ---------------------------------------------------------------------------
# Domain checks (I/O boundary)
# ---------------------------------------------------------------------------

def check_decimal(x, what: str = "value") -> Decimal:
    """Return `x` as a finite, non-negative Decimal.

    Accepts Decimal, int and numeric strings. Floats are rejected: their
    binary expansion is not reproducible as an exact decimal price.
    """
    if isinstance(x, bool) or isinstance(x, float):
        raise AmountDomainError(f"{what}: expected Decimal, int or str, got {type(x).__name__}")
    if isinstance(x, (int, str)):
        try:
            x = Decimal(x)
        except InvalidOperation:
            raise AmountDomainError(f"{what}: not a decimal number: {x!r}") from None
    if not isinstance(x, Decimal):
        raise AmountDomainError(f"{what}: expected Decimal, got {type(x).__name__}")
    if x.is_nan() or x.is_infinite():
        raise AmountDomainError(f"{what}: invalid Decimal {x}")
    if x < 0:
        raise AmountDomainError(f"{what}: negative value not allowed: {x}")
    if x != 0 and abs(x.adjusted()) > MAX_MAGNITUDE:
        raise AmountDomainError(f"{what}: magnitude outside 1e-{MAX_MAGNITUDE}..1e{MAX_MAGNITUDE}: {x}")
    return x


def check_amount(n, what: str = "amount") -> int:
    """Return `n` if it is a non-negative integer amount (smallest units)."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise AmountDomainError(f"{what}: expected int, got {type(n).__name__}")
    if n < 0:
        raise AmountDomainError(f"{what}: negative amount not allowed: {n}")
    if n >= 10**MAX_MAGNITUDE:
        raise AmountDomainError(f"{what}: amount exceeds 1e{MAX_MAGNITUDE}")
    return n


# ---------------------------------------------------------------------------
# Grid quantisation
# ---------------------------------------------------------------------------

def _quantize(x: Decimal, quantum: Decimal, rounding: str) -> Decimal:
    try:
        return x.quantize(quantum, rounding=rounding, context=DECIMAL_CONTEXT)
    except InvalidOperation:
        raise InvariantViolation(f"value {x} exceeds the working decimal precision") from None


def quantize_even(x: Decimal, quantum: Decimal = DECIMAL_QUANTUM) -> Decimal:
    """Round to the grid, ties to even (used for products and quotients)."""
    return _quantize(x, quantum, ROUND_HALF_EVEN)


def quantize_down(x: Decimal, quantum: Decimal = DECIMAL_QUANTUM) -> Decimal:
    """Truncate to the grid toward zero."""
    return _quantize(x, quantum, ROUND_DOWN)


def truncate_int(x: Decimal) -> int:
    """Integer part of a non-negative Decimal (never rounds up)."""
    if x < 0:
        raise AmountDomainError("negative input not allowed for truncate_int")
    return int(x.to_integral_value(rounding=ROUND_DOWN, context=DECIMAL_CONTEXT))


# ---------------------------------------------------------------------------
# Display
# ---------------------------------------------------------------------------

def fmt_dec(x: Decimal, places: int = 18) -> str:
    """Format a Decimal in scientific notation with fixed fractional digits.

    The output is stable for logs and tests, e.g.:
      Decimal('1')        -> '1.000000000000000000E+0'
      Decimal('123456')   -> '1.234560000000000000E+5'
    """
    return format(x, f".{places}E")


def fmt_fixed(x: Decimal, places: int = 18) -> str:
    """Format a Decimal in plain notation, truncated to `places` digits."""
    if places < 0:
        raise AmountDomainError(f"places must be >= 0, got {places}")
    return format(quantize_down(x, Decimal(1).scaleb(-places)), "f")


__all__ = [
    "check_decimal",
    "check_amount",
    "quantize_even",
    "quantize_down",
    "truncate_int",
    "fmt_dec",
    "fmt_fixed",
]
