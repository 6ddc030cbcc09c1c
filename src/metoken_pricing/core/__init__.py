"""
metoken_pricing Core
====================

Unified exports for the fixed-point primitives behind index valuation:
exponent normalisation, directional rates, datatypes and faults.
All arithmetic is exact Decimal in a dedicated context; no binary floats.
"""

# NOTE:
#   Everything in `core` is pure. Collaborator access (oracle, registry,
#   reserves) lives in `metoken_pricing.sources`; orchestration in
#   `metoken_pricing.valuation`.

# Fixed-point configuration
from .constants import (
    VALUATION_EXPONENT,
    DECIMAL_PLACES,
    DECIMAL_QUANTUM,
    MAX_EXPONENT_DIFFERENCE,
    DECIMAL_CONTEXT,
)

# Domain checks, quantisation and display
from .fmt import (
    check_decimal,
    check_amount,
    quantize_even,
    quantize_down,
    truncate_int,
    fmt_dec,
    fmt_fixed,
)

# Exponent normalisation
from .exponents import (
    exponent_factor,
    normalized_amount,
    value_at_reference,
)

# Rate derivation
from .rates import (
    rate,
    swap_rate,
    redeem_rate,
)

# Datatypes
from .datatypes import (
    Index,
    AssetBalance,
    ReserveState,
    MarketPrice,
    AssetSettings,
    AssetValuation,
    IndexValuation,
)

# Faults
from .exc import (
    ValuationError,
    AmountDomainError,
    InvariantViolation,
    InvalidExponent,
    ZeroPrice,
    AssetConfigNotFound,
    PriceUnavailable,
    ReserveBalanceMissing,
    NoAcceptedAssets,
    AssetNotInIndex,
    SnapshotFormatError,
)

__all__ = [
    # constants
    "VALUATION_EXPONENT",
    "DECIMAL_PLACES",
    "DECIMAL_QUANTUM",
    "MAX_EXPONENT_DIFFERENCE",
    "DECIMAL_CONTEXT",
    # fmt
    "check_decimal",
    "check_amount",
    "quantize_even",
    "quantize_down",
    "truncate_int",
    "fmt_dec",
    "fmt_fixed",
    # exponents
    "exponent_factor",
    "normalized_amount",
    "value_at_reference",
    # rates
    "rate",
    "swap_rate",
    "redeem_rate",
    # datatypes
    "Index",
    "AssetBalance",
    "ReserveState",
    "MarketPrice",
    "AssetSettings",
    "AssetValuation",
    "IndexValuation",
    # exceptions
    "ValuationError",
    "AmountDomainError",
    "InvariantViolation",
    "InvalidExponent",
    "ZeroPrice",
    "AssetConfigNotFound",
    "PriceUnavailable",
    "ReserveBalanceMissing",
    "NoAcceptedAssets",
    "AssetNotInIndex",
    "SnapshotFormatError",
]
