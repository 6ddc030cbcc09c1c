"""
Index valuation: one price for the index token, two rates per accepted asset.

Flow (per call, no retained state):
  1) For each accepted asset in composition order, resolve registry settings
     and the freshest oracle price, and accumulate the reserve value in the
     valuation unit.
  2) Price the index:
       - supply == 0: arithmetic mean of the constituent unit prices
         (bootstrap price before anything is minted);
       - supply  > 0: total reserve value / normalised supply.
  3) Derive swap and redeem rates for every asset against the index price.

Any fault aborts the whole call; a partially priced basket is never returned.
The caller supplies a consistent snapshot of reserves and prices.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import TYPE_CHECKING, Iterable, List

from .core.constants import DECIMAL_CONTEXT
from .core.datatypes import AssetValuation, Index, IndexValuation, MarketPrice, ReserveState
from .core.exc import InvariantViolation, NoAcceptedAssets, PriceUnavailable, ReserveBalanceMissing
from .core.exponents import normalized_amount, value_at_reference
from .core.fmt import quantize_down, quantize_even
from .core.rates import redeem_rate, swap_rate

if TYPE_CHECKING:
    from .sources import AssetRegistry

logger = logging.getLogger(__name__)


def latest_price(prices: Iterable[MarketPrice], symbol: str) -> Decimal:
    """Return the price of the most recent observation of `symbol`.

    Observations at height 0 carry no information and are ignored. Candidates
    are ordered by (height, price) and the last wins, so equal-height
    duplicates resolve to the higher price independent of input order.
    """
    candidates = sorted(
        (p for p in prices if p.symbol == symbol and p.height > 0),
        key=lambda p: (p.height, p.price),
    )
    if not candidates:
        raise PriceUnavailable(symbol)
    latest = candidates[-1]
    if len(candidates) > 1:
        runner_up = candidates[-2]
        if runner_up.height == latest.height and runner_up.price != latest.price:
            logger.warning(
                "conflicting prices for %s at height %d: %s and %s; using %s",
                symbol, latest.height, runner_up.price, latest.price, latest.price,
            )
    return latest.price


def valuate(index: Index, reserve_state: ReserveState, market_prices: Iterable[MarketPrice], registry: AssetRegistry) -> IndexValuation:
    """Price `index` from a reserve snapshot and a set of oracle observations.

    `registry` must expose settings(base_denom) -> AssetSettings and raise
    AssetConfigNotFound for unknown denoms.
    """
    if reserve_state.index_denom != index.denom:
        raise InvariantViolation(
            f"reserve state for {reserve_state.index_denom} passed to valuation of {index.denom}"
        )

    prices = tuple(market_prices)
    supply = reserve_state.supply
    bootstrap = supply == 0
    logger.debug("valuating %s: supply=%d, assets=%d, bootstrap=%s", index.denom, supply, len(index.accepted_assets), bootstrap)

    assets: List[AssetValuation] = []
    total_value = Decimal(0)
    for base_denom in index.accepted_assets:
        settings = registry.settings(base_denom)
        asset_price = latest_price(prices, settings.symbol)
        assets.append(
            AssetValuation(
                base_denom=base_denom,
                symbol=settings.symbol,
                price=asset_price,
                exponent=settings.exponent,
            )
        )

        # Before the first mint the basket is valued by unit prices alone.
        if bootstrap:
            contribution = asset_price
        else:
            balance = reserve_state.asset_balance(base_denom)
            if balance is None:
                logger.error("unexpected: no reserve balance for %s in index %s", base_denom, index.denom)
                raise ReserveBalanceMissing(base_denom, index.denom)
            contribution = value_at_reference(balance.available_supply, settings.exponent, asset_price)
        total_value = DECIMAL_CONTEXT.add(total_value, contribution)
        logger.debug("  %s (%s): price=%s contribution=%s total=%s", base_denom, settings.symbol, asset_price, contribution, total_value)

    index_price = _index_price(index, supply, total_value)
    logger.debug("index %s price=%s", index.denom, index_price)

    priced = tuple(
        a.with_rates(
            swap_rate(a.price, index_price, a.exponent, index.exponent),
            redeem_rate(a.price, index_price, a.exponent, index.exponent),
        )
        for a in assets
    )
    return IndexValuation(denom=index.denom, price=index_price, exponent=index.exponent, assets=priced)


def _index_price(index: Index, supply: int, total_value: Decimal) -> Decimal:
    if supply == 0:
        count = len(index.accepted_assets)
        if count == 0:
            raise NoAcceptedAssets(index.denom)
        return quantize_down(DECIMAL_CONTEXT.divide(total_value, Decimal(count)))

    # supply > 0 and a non-negative exponent keep the divisor strictly positive
    units = normalized_amount(supply, index.exponent)
    return quantize_even(DECIMAL_CONTEXT.divide(total_value, units))


__all__ = [
    "latest_price",
    "valuate",
]
