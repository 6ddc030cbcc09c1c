"""Tabular and text views of an IndexValuation (display only)."""

from __future__ import annotations

from typing import List

import pandas as pd

from .core.datatypes import IndexValuation
from .core.fmt import fmt_fixed

COLUMNS: List[str] = ["base_denom", "symbol", "price", "exponent", "swap_rate", "redeem_rate"]


def valuation_frame(valuation: IndexValuation) -> pd.DataFrame:
    """One row per accepted asset, in composition order.

    Decimal values are kept as objects so no precision is lost to float64.
    """
    rows = [
        {
            "base_denom": a.base_denom,
            "symbol": a.symbol,
            "price": a.price,
            "exponent": a.exponent,
            "swap_rate": a.swap_rate,
            "redeem_rate": a.redeem_rate,
        }
        for a in valuation.assets
    ]
    return pd.DataFrame(rows, columns=COLUMNS)


def format_frame(df: pd.DataFrame, places: int = 18) -> pd.DataFrame:
    """Copy of `df` with Decimal columns rendered as fixed-point strings."""
    out = df.copy()
    for col in ("price", "swap_rate", "redeem_rate"):
        out[col] = out[col].map(lambda v: "" if v is None or pd.isna(v) else fmt_fixed(v, places))
    return out


def format_summary(valuation: IndexValuation, places: int = 18) -> str:
    lines = [
        f"index {valuation.denom} (exponent {valuation.exponent})",
        f"price: {fmt_fixed(valuation.price, places)}",
    ]
    if valuation.assets:
        lines.append(format_frame(valuation_frame(valuation), places).to_string(index=False))
    else:
        lines.append("(no accepted assets)")
    return "\n".join(lines)


__all__ = [
    "COLUMNS",
    "valuation_frame",
    "format_frame",
    "format_summary",
]
