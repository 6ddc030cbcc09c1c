#!/usr/bin/env python3
"""Price an index token from a JSON snapshot and print the per-asset rates."""

from __future__ import annotations

import argparse
import logging
import sys

from metoken_pricing.core.exc import SnapshotFormatError, ValuationError
from metoken_pricing.report import format_summary, valuation_frame
from metoken_pricing.snapshot_io import load_snapshot
from metoken_pricing.valuation import valuate

EXIT_OK = 0
EXIT_VALUATION_ERROR = 1
EXIT_BAD_INPUT = 2


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Valuate an index token from a snapshot file.")
    parser.add_argument("snapshot", help="Path to a JSON snapshot (index, supply, balances, assets, prices)")
    parser.add_argument("--csv", default=None, help="Also write the per-asset table to this CSV path")
    parser.add_argument("--places", type=int, default=18, help="Fractional digits shown in the report")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = parser.parse_args(argv)
    if args.places < 0:
        parser.error(f"--places must be >= 0, got {args.places}")
    return args


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        index, reserve_state, prices, registry = load_snapshot(args.snapshot)
    except (OSError, SnapshotFormatError) as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT

    try:
        valuation = valuate(index, reserve_state, prices, registry)
    except ValuationError as e:
        print(f"valuation failed: {e}", file=sys.stderr)
        return EXIT_VALUATION_ERROR

    print(format_summary(valuation, args.places))
    if args.csv:
        valuation_frame(valuation).to_csv(args.csv, index=False)
        print(f"[written] {args.csv}")
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
