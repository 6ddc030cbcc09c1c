from __future__ import annotations
from decimal import Decimal
from typing import List

import pytest

# Import project primitives
from metoken_pricing.core import AssetBalance, AssetSettings, Index, MarketPrice, ReserveState
from metoken_pricing.sources import StaticAssetRegistry


# -----------------------------
# Test helpers (pure functions)
# -----------------------------

def usd(x: str) -> Decimal:
    return Decimal(x)


def _minted_state(index: Index, supply: int, **available: int) -> ReserveState:
    """ReserveState with each asset's holdings placed in `reserved`.

    Keyword names are base denoms with '/' replaced by '_'.
    """
    balances = tuple(
        AssetBalance(denom=denom, reserved=available.get(denom.replace("/", "_"), 0))
        for denom in index.accepted_assets
    )
    return ReserveState(index_denom=index.denom, supply=supply, balances=balances)


# -----------------------------
# Pytest fixtures
# -----------------------------

@pytest.fixture()
def index_two_assets() -> Index:
    """USDT (exponent 6) and ETH (exponent 18) backing an exponent-6 index."""
    return Index(denom="me/USD", exponent=6, accepted_assets=("ibc/USDT", "weth"))


@pytest.fixture()
def registry_default() -> StaticAssetRegistry:
    return StaticAssetRegistry([
        AssetSettings(base_denom="ibc/USDT", symbol="USDT", exponent=6),
        AssetSettings(base_denom="weth", symbol="ETH", exponent=18),
        AssetSettings(base_denom="ibc/DAI", symbol="DAI", exponent=18),
    ])


@pytest.fixture()
def prices_default() -> List[MarketPrice]:
    return [
        MarketPrice(symbol="USDT", price=usd("1.00"), height=20),
        MarketPrice(symbol="ETH", price=usd("2000.00"), height=20),
        MarketPrice(symbol="DAI", price=usd("1.00"), height=20),
    ]


@pytest.fixture()
def state_unminted(index_two_assets) -> ReserveState:
    return ReserveState(index_denom=index_two_assets.denom, supply=0)


@pytest.fixture()
def state_minted(index_two_assets) -> ReserveState:
    """100 index tokens backed by 10,000 USDT + 20 ETH = 50,000 USD."""
    return _minted_state(
        index_two_assets,
        supply=100 * 10**6,
        ibc_USDT=10_000 * 10**6,
        weth=20 * 10**18,
    )


@pytest.fixture()
def minted_state():
    """Factory: minted_state(index, supply, ibc_USDT=..., weth=...)."""
    return _minted_state
