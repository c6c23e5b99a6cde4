"""Per-format row normalizers.

Every normalizer maps one broker's columns onto ``CanonicalTrade``. Rows are
read leniently: the only reason a row is dropped is an unrecognised
direction token. Any other missing or malformed cell falls back to ``0`` for
required numbers and ``None`` for optional price levels, so the user can
still review and correct the candidate before saving it.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Mapping, Optional, Sequence

from .errors import FormatError
from .formats import FormatKind
from .models import CanonicalTrade, Direction
from .numbers import parse_number, parse_optional_number

logger = logging.getLogger(__name__)

Row = Mapping[str, Optional[str]]


def build_row(header_row: Sequence[str], line: str) -> Dict[str, Optional[str]]:
    """Align the fields of a data line with the header columns.

    Missing trailing fields map to ``None``. When a column name repeats, the
    right-most column wins.
    """

    values = line.split(",")
    row: Dict[str, Optional[str]] = {}
    for index, column in enumerate(header_row):
        value = values[index].strip() if index < len(values) else None
        row[column.strip()] = value
    return row


def parse_quantity(value: Optional[str]) -> float:
    """Trade size as a magnitude; the side comes from the direction column."""

    return abs(parse_number(value))


def split_datetime(value: Optional[str], *, dotted_dates: bool = False) -> tuple[str, str]:
    """Split ``"<date> <time>"`` on the first space.

    ``dotted_dates`` rewrites ``2024.03.05`` style dates to ``2024-03-05``.
    """

    if not value:
        return "", ""
    parts = value.split(" ")
    day = parts[0]
    clock = parts[1] if len(parts) > 1 else ""
    if dotted_dates:
        day = day.replace(".", "-")
    return day, clock


class RowNormalizer:
    """Shared row loop; subclasses describe their columns."""

    kind: FormatKind
    provenance: str = ""
    direction_column: str = "Type"

    def direction(self, row: Row) -> Direction | None:
        token = (row.get(self.direction_column) or "").lower()
        if token == Direction.BUY.value:
            return Direction.BUY
        if token == Direction.SELL.value:
            return Direction.SELL
        return None

    def normalize_row(self, row: Row, direction: Direction) -> CanonicalTrade:
        raise NotImplementedError

    def normalize_rows(self, header_row: Sequence[str], data_rows: Iterable[str]) -> list[CanonicalTrade]:
        trades: list[CanonicalTrade] = []
        skipped = 0
        for line in data_rows:
            row = build_row(header_row, line)
            direction = self.direction(row)
            if direction is None:
                skipped += 1
                logger.debug(
                    "Skipping %s row with direction %r",
                    self.kind.value,
                    row.get(self.direction_column),
                )
                continue
            trades.append(self.normalize_row(row, direction))
        if skipped:
            logger.info("Skipped %d %s row(s) without a buy/sell direction", skipped, self.kind.value)
        return trades


class MT4Normalizer(RowNormalizer):
    """MetaTrader 4/5 account history export."""

    kind = FormatKind.MT4
    provenance = "Imported from MetaTrader"

    def normalize_row(self, row: Row, direction: Direction) -> CanonicalTrade:
        open_date, open_time = split_datetime(row.get("Open Time"), dotted_dates=True)
        _, close_time = split_datetime(row.get("Close Time"))
        # MT4 exports carry no separate exit price column.
        price = parse_number(row.get("Price"))
        return CanonicalTrade(
            symbol=row.get("Item") or "",
            direction=direction,
            quantity=parse_quantity(row.get("Size")),
            entry_price=price,
            exit_price=price,
            stop_loss=parse_optional_number(row.get("S/L")),
            take_profit=parse_optional_number(row.get("T/P")),
            date=open_date,
            entry_time=open_time,
            exit_time=close_time,
            profit_loss=parse_number(row.get("Profit")),
            provenance=self.provenance,
        )


class CTraderNormalizer(RowNormalizer):
    """cTrader history export. Direction tokens are matched case-sensitively."""

    kind = FormatKind.CTRADER
    provenance = "Imported from cTrader"
    _tokens = {"Buy": Direction.BUY, "Sell": Direction.SELL}

    def direction(self, row: Row) -> Direction | None:
        return self._tokens.get(row.get(self.direction_column) or "")

    def normalize_row(self, row: Row, direction: Direction) -> CanonicalTrade:
        entry_date, entry_time = split_datetime(row.get("EntryTime"), dotted_dates=True)
        _, exit_time = split_datetime(row.get("ExitTime"))
        return CanonicalTrade(
            symbol=row.get("Symbol") or "",
            direction=direction,
            quantity=parse_quantity(row.get("Volume")),
            entry_price=parse_number(row.get("EntryPrice")),
            exit_price=parse_number(row.get("ExitPrice")),
            stop_loss=parse_optional_number(row.get("StopLoss")),
            take_profit=parse_optional_number(row.get("TakeProfit")),
            date=entry_date,
            entry_time=entry_time,
            exit_time=exit_time,
            profit_loss=parse_number(row.get("NetProfit")),
            provenance=self.provenance,
        )


class TradingViewNormalizer(RowNormalizer):
    """TradingView strategy tester list-of-trades export."""

    kind = FormatKind.TRADINGVIEW
    provenance = "Imported from TradingView"
    direction_column = "Order"

    def normalize_row(self, row: Row, direction: Direction) -> CanonicalTrade:
        trade_date, entry_time = split_datetime(row.get("Date"))
        return CanonicalTrade(
            symbol=row.get("Symbol") or "",
            direction=direction,
            quantity=1.0,
            entry_price=parse_number(row.get("Price")),
            exit_price=parse_number(row.get("Exit Price")),
            date=trade_date,
            entry_time=entry_time,
            exit_time="",
            profit_loss=parse_number(row.get("Profit")),
            provenance=self.provenance,
        )


NORMALIZERS: Dict[FormatKind, RowNormalizer] = {
    FormatKind.MT4: MT4Normalizer(),
    FormatKind.CTRADER: CTraderNormalizer(),
    FormatKind.TRADINGVIEW: TradingViewNormalizer(),
}

_unmapped = set(FormatKind) - set(NORMALIZERS)
if _unmapped:
    raise RuntimeError(f"No row normalizer registered for {sorted(k.value for k in _unmapped)}")


def normalizer_for(kind: FormatKind) -> RowNormalizer:
    try:
        return NORMALIZERS[FormatKind(kind)]
    except (KeyError, ValueError) as exc:
        raise FormatError() from exc


def normalize_rows(
    kind: FormatKind,
    header_row: Sequence[str],
    data_rows: Iterable[str],
) -> list[CanonicalTrade]:
    """Normalize ``data_rows`` of a detected format into trade candidates."""

    return normalizer_for(kind).normalize_rows(header_row, data_rows)


__all__ = [
    "CTraderNormalizer",
    "MT4Normalizer",
    "NORMALIZERS",
    "RowNormalizer",
    "TradingViewNormalizer",
    "build_row",
    "normalize_rows",
    "normalizer_for",
    "parse_quantity",
    "split_datetime",
]
