"""
Core datatypes for index valuation.

Inputs (Index, ReserveState, MarketPrice, AssetSettings) are snapshots owned by
external collaborators; outputs (AssetValuation, IndexValuation) are values
owned by the caller. All are immutable so a valuation can be shared or cached
without defensive copies.

Notes:
- Amounts are integers in smallest units; prices and rates are Decimal.
- Constructors validate the non-negative domain at the boundary.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, Optional, Tuple

from .constants import DECIMAL_CONTEXT
from .exc import AmountDomainError, AssetNotInIndex, InvariantViolation
from .fmt import check_amount, check_decimal, truncate_int


# ---------------------------------------------------------------------------
# Index definition
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Index:
    """Index token definition.

    Fields:
    - denom: identifier of the index token.
    - exponent: display exponent of the index token.
    - accepted_assets: base denoms of reserve assets, in composition order.
    """

    denom: str
    exponent: int
    accepted_assets: Tuple[str, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "accepted_assets", tuple(self.accepted_assets))
        if not self.denom:
            raise InvariantViolation("index denom must be non-empty")
        check_amount(self.exponent, f"exponent of {self.denom}")
        if len(set(self.accepted_assets)) != len(self.accepted_assets):
            raise InvariantViolation(f"duplicate accepted assets in index {self.denom}")

    def is_accepted(self, base_denom: str) -> bool:
        return base_denom in self.accepted_assets


# ---------------------------------------------------------------------------
# Reserve state
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class AssetBalance:
    """Reserve holdings of one accepted asset (smallest units).

    `leveraged` is supplied to the lending market and `reserved` is held
    idle; both back the index. Fees and interest belong to the protocol.
    """

    denom: str
    leveraged: int = 0
    reserved: int = 0
    fees: int = 0
    interest: int = 0

    def __post_init__(self):
        for name in ("leveraged", "reserved", "fees", "interest"):
            check_amount(getattr(self, name), f"{name} of {self.denom}")

    @property
    def available_supply(self) -> int:
        return self.leveraged + self.reserved


@dataclass(frozen=True)
class ReserveState:
    """Issued supply and per-asset balances of one index, read at a single point."""

    index_denom: str
    supply: int
    balances: Tuple[AssetBalance, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "balances", tuple(self.balances))
        check_amount(self.supply, f"supply of {self.index_denom}")
        denoms = [b.denom for b in self.balances]
        if len(set(denoms)) != len(denoms):
            raise InvariantViolation(f"duplicate balance entries for index {self.index_denom}")

    def asset_balance(self, denom: str) -> Optional[AssetBalance]:
        for balance in self.balances:
            if balance.denom == denom:
                return balance
        return None


# ---------------------------------------------------------------------------
# External quotes and registry records
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class MarketPrice:
    """Oracle observation: price of one whole unit of `symbol` at `height`."""

    symbol: str
    price: Decimal
    height: int

    def __post_init__(self):
        object.__setattr__(self, "price", check_decimal(self.price, f"price of {self.symbol}"))
        check_amount(self.height, f"height of {self.symbol}")


@dataclass(frozen=True)
class AssetSettings:
    base_denom: str
    symbol: str
    exponent: int

    def __post_init__(self):
        check_amount(self.exponent, f"exponent of {self.base_denom}")


# ---------------------------------------------------------------------------
# Valuation results
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class AssetValuation:
    """Resolved price and conversion rates of one accepted asset.

    Rates are None until the index price is known; with_rates() returns the
    completed copy.
    """

    base_denom: str
    symbol: str
    price: Decimal
    exponent: int
    swap_rate: Optional[Decimal] = None
    redeem_rate: Optional[Decimal] = None

    def has_rates(self) -> bool:
        return self.swap_rate is not None and self.redeem_rate is not None

    def with_rates(self, swap_rate: Decimal, redeem_rate: Decimal) -> "AssetValuation":
        return AssetValuation(
            base_denom=self.base_denom,
            symbol=self.symbol,
            price=self.price,
            exponent=self.exponent,
            swap_rate=swap_rate,
            redeem_rate=redeem_rate,
        )


@dataclass(frozen=True)
class IndexValuation:
    """Index token price plus one AssetValuation per accepted asset.

    `assets` follows the index composition order.
    """

    denom: str
    price: Decimal
    exponent: int
    assets: Tuple[AssetValuation, ...] = ()
    _by_denom: Dict[str, int] = field(default_factory=dict, init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "assets", tuple(self.assets))
        object.__setattr__(self, "_by_denom", {a.base_denom: i for i, a in enumerate(self.assets)})

    def asset(self, base_denom: str) -> AssetValuation:
        i = self._by_denom.get(base_denom)
        if i is None:
            raise AssetNotInIndex(base_denom, self.denom)
        return self.assets[i]

    def swap_amount(self, base_denom: str, amount: int) -> int:
        """Index-token smallest units minted for `amount` asset smallest units."""
        return self._convert(self.asset(base_denom).swap_rate, amount)

    def redeem_amount(self, base_denom: str, amount: int) -> int:
        """Asset smallest units returned for `amount` index-token smallest units."""
        return self._convert(self.asset(base_denom).redeem_rate, amount)

    @staticmethod
    def _convert(exchange_rate: Optional[Decimal], amount: int) -> int:
        check_amount(amount)
        if exchange_rate is None:
            raise AmountDomainError("rates have not been derived for this valuation")
        return truncate_int(DECIMAL_CONTEXT.multiply(exchange_rate, Decimal(amount)))


__all__ = [
    "Index",
    "AssetBalance",
    "ReserveState",
    "MarketPrice",
    "AssetSettings",
    "AssetValuation",
    "IndexValuation",
]
