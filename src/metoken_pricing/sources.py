"""
Collaborator contracts and in-memory implementations.

The valuation reads three external subsystems through narrow interfaces:

- PriceOracle.latest_prices(): every known observation per tracked symbol.
- AssetRegistry.settings(base_denom): symbol and exponent, or AssetConfigNotFound.
- ReserveLedger.balances(index_denom): issued supply and per-asset balances.

take_snapshot() reads oracle and ledger exactly once so a single valuation
never mixes balances and prices from different points in time.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, Protocol, Tuple

from .core.datatypes import AssetSettings, Index, IndexValuation, MarketPrice, ReserveState
from .core.exc import AssetConfigNotFound, InvariantViolation
from .valuation import valuate

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Contracts
# ---------------------------------------------------------------------------

class PriceOracle(Protocol):
    def latest_prices(self) -> Iterable[MarketPrice]:
        ...


class AssetRegistry(Protocol):
    def settings(self, base_denom: str) -> AssetSettings:
        ...


class ReserveLedger(Protocol):
    def balances(self, index_denom: str) -> ReserveState:
        ...


# ---------------------------------------------------------------------------
# In-memory implementations
# ---------------------------------------------------------------------------

class StaticPriceOracle:
    """Oracle backed by a fixed list of observations."""

    def __init__(self, observations: Iterable[MarketPrice] = ()) -> None:
        self._observations = list(observations)

    def record(self, observation: MarketPrice) -> None:
        self._observations.append(observation)

    def latest_prices(self) -> Tuple[MarketPrice, ...]:
        return tuple(self._observations)


class StaticAssetRegistry:
    """Registry backed by a dict keyed by base denom."""

    def __init__(self, settings: Iterable[AssetSettings] = ()) -> None:
        self._settings: Dict[str, AssetSettings] = {}
        for s in settings:
            self.register(s)

    def register(self, settings: AssetSettings) -> None:
        if settings.base_denom in self._settings:
            raise InvariantViolation(f"asset {settings.base_denom} registered twice")
        self._settings[settings.base_denom] = settings

    def settings(self, base_denom: str) -> AssetSettings:
        try:
            return self._settings[base_denom]
        except KeyError:
            raise AssetConfigNotFound(base_denom) from None


class StaticReserveLedger:
    """Ledger backed by one ReserveState per index denom."""

    def __init__(self, states: Iterable[ReserveState] = ()) -> None:
        self._states: Dict[str, ReserveState] = {}
        for s in states:
            self.update(s)

    def update(self, state: ReserveState) -> None:
        self._states[state.index_denom] = state

    def balances(self, index_denom: str) -> ReserveState:
        try:
            return self._states[index_denom]
        except KeyError:
            raise InvariantViolation(f"index balance for denom {index_denom} not found") from None


# ---------------------------------------------------------------------------
# Snapshot
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ValuationSnapshot:
    """Point-in-time inputs for a single valuation."""

    index: Index
    reserve_state: ReserveState
    market_prices: Tuple[MarketPrice, ...]


def take_snapshot(index: Index, oracle: PriceOracle, ledger: ReserveLedger) -> ValuationSnapshot:
    reserve_state = ledger.balances(index.denom)
    market_prices = tuple(oracle.latest_prices())
    logger.debug("snapshot for %s: supply=%d, observations=%d", index.denom, reserve_state.supply, len(market_prices))
    return ValuationSnapshot(index=index, reserve_state=reserve_state, market_prices=market_prices)


def valuate_snapshot(snapshot: ValuationSnapshot, registry: AssetRegistry) -> IndexValuation:
    return valuate(snapshot.index, snapshot.reserve_state, snapshot.market_prices, registry)


def quote_index(index: Index, oracle: PriceOracle, ledger: ReserveLedger, registry: AssetRegistry) -> IndexValuation:
    """Snapshot the collaborators, then valuate."""
    return valuate_snapshot(take_snapshot(index, oracle, ledger), registry)


__all__ = [
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
]
