# Top-level API for metoken_pricing.
"""
Top-level API for metoken_pricing.

This module exposes the stable interface for pricing an index token:
  - valuate: index price and per-asset swap/redeem rates from a snapshot
  - quote_index: snapshot the collaborators, then valuate
  - collaborator contracts and their in-memory implementations

Core datatypes, exponent normalisation and rate derivation live in
`metoken_pricing.core`; reporting and JSON snapshot I/O are imported
explicitly from `metoken_pricing.report` and `metoken_pricing.snapshot_io`.
"""

from __future__ import annotations

from .valuation import valuate, latest_price
from .sources import (
    PriceOracle,
    AssetRegistry,
    ReserveLedger,
    StaticPriceOracle,
    StaticAssetRegistry,
    StaticReserveLedger,
    ValuationSnapshot,
    take_snapshot,
    valuate_snapshot,
    quote_index,
)
from .core import (
    Index,
    AssetBalance,
    ReserveState,
    MarketPrice,
    AssetSettings,
    AssetValuation,
    IndexValuation,
    exponent_factor,
    normalized_amount,
    value_at_reference,
    rate,
    ValuationError,
)

__all__ = [
    # valuation
    "valuate",
    "latest_price",
    # collaborators
    "PriceOracle",
    "AssetRegistry",
    "ReserveLedger",
    "StaticPriceOracle",
    "StaticAssetRegistry",
    "StaticReserveLedger",
    "ValuationSnapshot",
    "take_snapshot",
    "valuate_snapshot",
    "quote_index",
    # core datatypes
    "Index",
    "AssetBalance",
    "ReserveState",
    "MarketPrice",
    "AssetSettings",
    "AssetValuation",
    "IndexValuation",
    # core arithmetic
    "exponent_factor",
    "normalized_amount",
    "value_at_reference",
    "rate",
    "ValuationError",
]
