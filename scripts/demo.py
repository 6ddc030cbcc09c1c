"""Demo: pricing a two-asset index before and after the first mint.

Scenarios covered:
S1) Bootstrap: zero supply, index price = mean of constituent prices
S2) Minted: supply > 0, index price = reserve value / supply
S3) Fault: one constituent has no oracle price, no valuation is produced
"""
from __future__ import annotations

from decimal import Decimal
import argparse
import logging

from metoken_pricing import (
    AssetBalance,
    AssetSettings,
    Index,
    MarketPrice,
    ReserveState,
    StaticAssetRegistry,
    StaticPriceOracle,
    StaticReserveLedger,
    quote_index,
)
from metoken_pricing.core.exc import PriceUnavailable
from metoken_pricing.report import format_summary

INDEX = Index(denom="me/USD", exponent=6, accepted_assets=("ibc/USDT", "weth"))

REGISTRY = StaticAssetRegistry([
    AssetSettings(base_denom="ibc/USDT", symbol="USDT", exponent=6),
    AssetSettings(base_denom="weth", symbol="ETH", exponent=18),
])

PRICES = [
    MarketPrice(symbol="USDT", price=Decimal("0.99"), height=10),
    MarketPrice(symbol="USDT", price=Decimal("1.00"), height=20),
    MarketPrice(symbol="ETH", price=Decimal("2000.00"), height=20),
]


def scenario_bootstrap(places: int) -> None:
    ledger = StaticReserveLedger([ReserveState(index_denom=INDEX.denom, supply=0)])
    valuation = quote_index(INDEX, StaticPriceOracle(PRICES), ledger, REGISTRY)
    print("\n=== S1 bootstrap (supply = 0) ===")
    print(format_summary(valuation, places))


def scenario_minted(places: int) -> None:
    state = ReserveState(
        index_denom=INDEX.denom,
        supply=100 * 10**6,
        balances=(
            AssetBalance(denom="ibc/USDT", reserved=4_000 * 10**6, leveraged=6_000 * 10**6),
            AssetBalance(denom="weth", reserved=20 * 10**18, fees=10**15),
        ),
    )
    valuation = quote_index(INDEX, StaticPriceOracle(PRICES), StaticReserveLedger([state]), REGISTRY)
    print("\n=== S2 minted (supply = 100, reserves = 50,000) ===")
    print(format_summary(valuation, places))
    print(f"- 1 ETH mints {valuation.swap_amount('weth', 10**18)} me/USD units")
    print(f"- 1 me/USD redeems {valuation.redeem_amount('ibc/USDT', 10**6)} USDT units")


def scenario_missing_price() -> None:
    ledger = StaticReserveLedger([ReserveState(index_denom=INDEX.denom, supply=0)])
    oracle = StaticPriceOracle([p for p in PRICES if p.symbol != "ETH"])
    print("\n=== S3 missing ETH price ===")
    try:
        quote_index(INDEX, oracle, ledger, REGISTRY)
    except PriceUnavailable as e:
        print(f"- rejected: {e}")


def main() -> None:
    parser = argparse.ArgumentParser(description="Index valuation demo")
    parser.add_argument("--places", type=int, default=6, help="Fractional digits shown")
    parser.add_argument("--debug", action="store_true", help="Show valuation trace logs")
    args = parser.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING, format="%(name)s: %(message)s")

    scenario_bootstrap(args.places)
    scenario_minted(args.places)
    scenario_missing_price()


if __name__ == "__main__":
    main()
