"""
JSON snapshot documents.

A snapshot bundles everything one valuation needs:

    {
      "index":    {"denom": "me/USD", "exponent": 6, "accepted_assets": ["ibc/USDT", "weth"]},
      "supply":   "100000000",
      "balances": [{"denom": "ibc/USDT", "reserved": "...", "leveraged": "..."}],
      "assets":   [{"base_denom": "ibc/USDT", "symbol": "USDT", "exponent": 6}],
      "prices":   [{"symbol": "USDT", "price": "1.00", "height": 20}]
    }

Numbers may be JSON numbers or strings; they are parsed straight to Decimal
or int, never through float.
"""

from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path
from typing import Any, Dict, List, Tuple, Union

from .core.constants import MAX_MAGNITUDE
from .core.datatypes import AssetBalance, AssetSettings, Index, MarketPrice, ReserveState
from .core.exc import SnapshotFormatError, ValuationError
from .sources import StaticAssetRegistry

SnapshotParts = Tuple[Index, ReserveState, List[MarketPrice], StaticAssetRegistry]


def _field(obj: Dict[str, Any], key: str, where: str) -> Any:
    if not isinstance(obj, dict):
        raise SnapshotFormatError(f"{where}: expected an object, got {type(obj).__name__}")
    if key not in obj:
        raise SnapshotFormatError(f"{where}: missing field '{key}'")
    return obj[key]


def _int(value: Any, where: str) -> int:
    if isinstance(value, bool):
        raise SnapshotFormatError(f"{where}: expected an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, (str, Decimal)):
        try:
            d = Decimal(value)
        except ArithmeticError:
            raise SnapshotFormatError(f"{where}: not a number: {value!r}") from None
        if d.is_finite() and d != 0 and d.adjusted() > MAX_MAGNITUDE:
            raise SnapshotFormatError(f"{where}: integer too large: {value!r}")
        if d.is_finite() and d == d.to_integral_value():
            return int(d)
    raise SnapshotFormatError(f"{where}: expected an integer, got {value!r}")


def _decimal(value: Any, where: str) -> Decimal:
    if isinstance(value, bool) or isinstance(value, float):
        raise SnapshotFormatError(f"{where}: expected a decimal, got {value!r}")
    try:
        return Decimal(value) if isinstance(value, (int, str)) else value
    except ArithmeticError:
        raise SnapshotFormatError(f"{where}: not a number: {value!r}") from None


def _list(value: Any, where: str) -> list:
    if not isinstance(value, list):
        raise SnapshotFormatError(f"{where}: expected a list")
    return value


def parse_snapshot(payload: Dict[str, Any]) -> SnapshotParts:
    """Build (Index, ReserveState, prices, registry) from a decoded document."""
    try:
        raw_index = _field(payload, "index", "snapshot")
        index = Index(
            denom=str(_field(raw_index, "denom", "index")),
            exponent=_int(_field(raw_index, "exponent", "index"), "index.exponent"),
            accepted_assets=tuple(str(d) for d in _list(_field(raw_index, "accepted_assets", "index"), "index.accepted_assets")),
        )

        balances = []
        for i, raw in enumerate(_list(payload.get("balances", []), "balances")):
            where = f"balances[{i}]"
            balances.append(
                AssetBalance(
                    denom=str(_field(raw, "denom", where)),
                    leveraged=_int(raw.get("leveraged", 0), f"{where}.leveraged"),
                    reserved=_int(raw.get("reserved", 0), f"{where}.reserved"),
                    fees=_int(raw.get("fees", 0), f"{where}.fees"),
                    interest=_int(raw.get("interest", 0), f"{where}.interest"),
                )
            )
        reserve_state = ReserveState(
            index_denom=index.denom,
            supply=_int(payload.get("supply", 0), "supply"),
            balances=tuple(balances),
        )

        registry = StaticAssetRegistry()
        for i, raw in enumerate(_list(_field(payload, "assets", "snapshot"), "assets")):
            where = f"assets[{i}]"
            registry.register(
                AssetSettings(
                    base_denom=str(_field(raw, "base_denom", where)),
                    symbol=str(_field(raw, "symbol", where)),
                    exponent=_int(_field(raw, "exponent", where), f"{where}.exponent"),
                )
            )

        prices = []
        for i, raw in enumerate(_list(_field(payload, "prices", "snapshot"), "prices")):
            where = f"prices[{i}]"
            prices.append(
                MarketPrice(
                    symbol=str(_field(raw, "symbol", where)),
                    price=_decimal(_field(raw, "price", where), f"{where}.price"),
                    height=_int(_field(raw, "height", where), f"{where}.height"),
                )
            )
    except SnapshotFormatError:
        raise
    except ValuationError as e:
        raise SnapshotFormatError(f"invalid snapshot: {e}") from e
    return index, reserve_state, prices, registry


def load_snapshot(path: Union[str, Path]) -> SnapshotParts:
    """Read and parse a snapshot file."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            payload = json.load(f, parse_float=Decimal)
    except json.JSONDecodeError as e:
        raise SnapshotFormatError(f"{path}: invalid JSON: {e}") from e
    except ValueError as e:
        # UnicodeDecodeError, or an integer literal beyond the int parsing limit
        raise SnapshotFormatError(f"{path}: unreadable snapshot: {e}") from e
    return parse_snapshot(payload)


__all__ = [
    "SnapshotParts",
    "parse_snapshot",
    "load_snapshot",
]
