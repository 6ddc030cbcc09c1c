"""
Core exception types for metoken_pricing.core.

These are dependency-free and may be imported by all modules. Every fault is
terminal to a single valuation call; callers decide on retry or rejection.
"""

__all__ = [
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


class ValuationError(Exception):
    """Base class for every fault raised while pricing an index."""
    pass


class AmountDomainError(ValuationError):
    """Raised when inputs violate the non-negative domain or basic preconditions."""
    pass


class InvariantViolation(ValuationError):
    """Raised when inputs or arithmetic would break core invariants."""
    pass


class InvalidExponent(ValuationError):
    """Raised when an exponent pair cannot be scaled within the decimal grid.

    Attributes
    ----------
    initial : int
        Exponent the value is currently expressed in.
    result : int
        Exponent the value was to be converted to.
    """

    def __init__(self, initial, result, *, limit=None):
        reason = f"difference exceeds the supported range of {limit}" if limit is not None else "negative exponent"
        super().__init__(f"cannot scale exponent {initial} to {result}: {reason}")
        self.initial = initial
        self.result = result
        self.limit = limit


class ZeroPrice(ValuationError):
    """Raised when a rate is requested against a zero denominator price."""

    def __init__(self, price_from, price_to):
        super().__init__(f"cannot derive rate from price {price_from}: target price is {price_to}")
        self.price_from = price_from
        self.price_to = price_to


class AssetConfigNotFound(ValuationError):
    """Raised when the asset registry has no settings for an accepted asset."""

    def __init__(self, base_denom):
        super().__init__(f"asset settings not found for denom {base_denom}")
        self.base_denom = base_denom


class PriceUnavailable(ValuationError):
    """Raised when no market price observation exists for a required symbol."""

    def __init__(self, symbol):
        super().__init__(f"price not found in oracle for denom {symbol}")
        self.symbol = symbol


class ReserveBalanceMissing(ValuationError):
    """Raised when an accepted asset has no entry in the reserve balances."""

    def __init__(self, base_denom, index_denom):
        super().__init__(f"balance for denom {base_denom} not found in index {index_denom}")
        self.base_denom = base_denom
        self.index_denom = index_denom


class NoAcceptedAssets(ValuationError):
    """Raised when a zero-supply index has no accepted assets to average over."""

    def __init__(self, index_denom):
        super().__init__(f"index {index_denom} has no accepted assets")
        self.index_denom = index_denom


class AssetNotInIndex(ValuationError):
    """Raised when a valuation is queried for a denom outside the index."""

    def __init__(self, base_denom, index_denom):
        super().__init__(f"denom {base_denom} is not an accepted asset of index {index_denom}")
        self.base_denom = base_denom
        self.index_denom = index_denom


class SnapshotFormatError(ValuationError):
    """Raised when a serialized snapshot document is malformed."""
    pass
