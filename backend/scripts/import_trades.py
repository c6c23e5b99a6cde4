"""Import a broker export and print the trade candidates it contains."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Sequence

from app.config import get_settings
from app.core.logging import setup_logging
from trade_journal import (
    EmptyFileError,
    FormatError,
    InsufficientInputError,
    Trade,
    enrich_with_distance,
    export_csv,
    import_trades,
)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Normalize an MT4/MT5, cTrader or TradingView export")
    parser.add_argument("path", help="CSV file exported from the trading platform")
    parser.add_argument("--output", choices=("json", "csv"), default="json")
    parser.add_argument("--account", default=None, help="Account id attached to promoted trades")
    parser.add_argument(
        "--environment",
        choices=("live", "demo", "backtest"),
        default=get_settings().default_trade_environment,
    )
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)

    # stdout carries the JSON/CSV output
    setup_logging("DEBUG" if args.verbose else "WARNING", stream=sys.stderr)

    source = Path(args.path)
    if not source.exists():
        raise SystemExit(f"File not found: {source}")

    try:
        result = import_trades(source.read_bytes())
    except (FormatError, EmptyFileError) as exc:
        print(f"Import failed: {exc}", file=sys.stderr)
        return 1

    trades = []
    for candidate in result.trades:
        trade = Trade.from_candidate(candidate, account_id=args.account, trade_environment=args.environment)
        try:
            trade = enrich_with_distance(trade)
        except InsufficientInputError:
            pass  # leave pips_or_ticks at 0 for rows without a symbol
        trades.append(trade)

    if args.output == "csv":
        print(export_csv(trades))
    else:
        payload = {
            "format": result.format.value,
            "count": len(trades),
            "trades": [trade.to_record() for trade in trades],
        }
        print(json.dumps(payload, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
