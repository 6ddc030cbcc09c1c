from decimal import Decimal

from metoken_pricing.core import IndexValuation
from metoken_pricing.report import COLUMNS, format_frame, format_summary, valuation_frame
from metoken_pricing.valuation import valuate


def test_valuation_frame_rows_follow_composition(index_two_assets, state_minted, prices_default, registry_default):
    v = valuate(index_two_assets, state_minted, prices_default, registry_default)
    df = valuation_frame(v)
    print(df)
    assert list(df.columns) == COLUMNS
    assert list(df["base_denom"]) == ["ibc/USDT", "weth"]
    # Decimal objects survive untouched (no float64 coercion)
    assert df.loc[1, "swap_rate"] == Decimal("4e-12")
    assert isinstance(df.loc[1, "redeem_rate"], Decimal)


def test_format_frame_renders_fixed_point(index_two_assets, state_minted, prices_default, registry_default):
    v = valuate(index_two_assets, state_minted, prices_default, registry_default)
    out = format_frame(valuation_frame(v), places=12)
    assert out.loc[1, "swap_rate"] == "0.000000000004"
    assert out.loc[0, "redeem_rate"] == "500.000000000000"


def test_format_summary_mentions_index_and_assets(index_two_assets, state_unminted, prices_default, registry_default):
    v = valuate(index_two_assets, state_unminted, prices_default, registry_default)
    text = format_summary(v, places=2)
    print(text)
    assert "index me/USD (exponent 6)" in text
    assert "price: 1000.50" in text
    assert "weth" in text and "USDT" in text


def test_format_summary_empty_index():
    v = IndexValuation(denom="me/EMPTY", price=Decimal("0"), exponent=6)
    assert "(no accepted assets)" in format_summary(v)
