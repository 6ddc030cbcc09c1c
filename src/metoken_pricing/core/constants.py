"""
metoken_pricing Core Constants
==============================

Fixed-point parameters shared by every valuation step. All arithmetic runs
through `DECIMAL_CONTEXT`; the thread-local global Decimal context is never
touched.
"""

# NOTE: DECIMAL_PLACES and MAX_EXPONENT_DIFFERENCE move together; 10^-(places+1)
# is not representable on the working grid.

from decimal import Context, Decimal, DivisionByZero, InvalidOperation, Overflow, ROUND_HALF_EVEN

# ---------------------------------------------------------------------------
# Reference unit
# ---------------------------------------------------------------------------

#: Exponent of the common valuation unit (whole USD-like unit).
VALUATION_EXPONENT: int = 0


# ---------------------------------------------------------------------------
# Fixed-point grid
# ---------------------------------------------------------------------------

#: Fractional digits carried by every quantised product/quotient.
DECIMAL_PLACES: int = 18

#: Grid step: 1e-18.
DECIMAL_QUANTUM: Decimal = Decimal(1).scaleb(-DECIMAL_PLACES)

#: Largest |result - initial| accepted by exponent_factor().
MAX_EXPONENT_DIFFERENCE: int = DECIMAL_PLACES

#: Significant digits available to intermediate results.
DECIMAL_PRECISION: int = 100

#: Inputs (prices, amounts) must lie within 10^-MAX_MAGNITUDE .. 10^MAX_MAGNITUDE.
#: Products and quotients of bounded inputs then stay far inside Emin..Emax.
MAX_MAGNITUDE: int = 80

#: Context for all valuation arithmetic. Traps make precision loss loud.
DECIMAL_CONTEXT: Context = Context(
    prec=DECIMAL_PRECISION,
    rounding=ROUND_HALF_EVEN,
    Emax=999_999,
    Emin=-999_999,
    traps=[InvalidOperation, DivisionByZero, Overflow],
)


__all__ = [
    "VALUATION_EXPONENT",
    "DECIMAL_PLACES",
    "DECIMAL_QUANTUM",
    "MAX_EXPONENT_DIFFERENCE",
    "DECIMAL_PRECISION",
    "MAX_MAGNITUDE",
    "DECIMAL_CONTEXT",
]
