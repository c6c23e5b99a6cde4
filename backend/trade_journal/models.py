"""Domain models used by the trade journal core."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date as date_type, datetime
from enum import Enum
from typing import Any, Mapping, Optional, Sequence, Tuple

from .numbers import parse_optional_number, round_half_up


class Direction(str, Enum):
    BUY = "buy"
    SELL = "sell"


class Outcome(str, Enum):
    WIN = "WIN"
    LOSS = "LOSS"
    BREAKEVEN = "BREAKEVEN"


class TradeEnvironment(str, Enum):
    LIVE = "live"
    DEMO = "demo"
    BACKTEST = "backtest"


def outcome_for(profit_loss: float | None) -> Outcome:
    """Classify a signed P&L figure; a missing figure counts as breakeven."""

    if profit_loss is None:
        return Outcome.BREAKEVEN
    if profit_loss > 0:
        return Outcome.WIN
    if profit_loss < 0:
        return Outcome.LOSS
    return Outcome.BREAKEVEN


def record_value(record: Any, key: str, default: Any = None) -> Any:
    """Read ``key`` from a mapping or an object with attributes."""

    if isinstance(record, Mapping):
        value = record.get(key, default)
    else:
        value = getattr(record, key, default)
    return default if value is None else value


def date_key(value: Any) -> str:
    """Return the exact ``YYYY-MM-DD`` key used to partition trades by day."""

    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date_type):
        return value.isoformat()
    return "" if value is None else str(value)


def parse_calendar_date(value: Any) -> date_type | None:
    """Parse a trade date for range comparisons; ``None`` when unreadable."""

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date_type):
        return value
    if not value:
        return None
    text = str(value)
    try:
        parsed = date_type.fromisoformat(text)
    except ValueError:
        return None
    # Only the YYYY-MM-DD form used as the day key is accepted.
    if parsed.isoformat() != text:
        return None
    return parsed


@dataclass(frozen=True)
class CanonicalTrade:
    """A trade candidate produced by the import pipeline.

    ``outcome`` is derived from ``profit_loss`` and cannot be set directly.
    ``provenance`` names the platform the row was imported from.
    """

    symbol: str
    direction: Direction
    quantity: float
    entry_price: float
    exit_price: float
    stop_loss: Optional[float] = None
    take_profit: Optional[float] = None
    date: str = ""
    entry_time: str = ""
    exit_time: str = ""
    profit_loss: float = 0.0
    provenance: str = ""

    @property
    def outcome(self) -> Outcome:
        return outcome_for(self.profit_loss)

    def to_record(self) -> dict[str, Any]:
        """Return the key/value shape handed to the storage collaborator."""

        return {
            "symbol": self.symbol,
            "direction": self.direction.value,
            "quantity": self.quantity,
            "entry_price": self.entry_price,
            "exit_price": self.exit_price,
            "stop_loss": self.stop_loss,
            "take_profit": self.take_profit,
            "date": self.date,
            "entry_time": self.entry_time,
            "exit_time": self.exit_time,
            "profit_loss": self.profit_loss,
            "outcome": self.outcome.value,
            "provenance": self.provenance,
        }


@dataclass(frozen=True)
class TakeProfitLevel:
    price: float
    quantity: float = 0.0


@dataclass(frozen=True)
class Trade(CanonicalTrade):
    """A persisted journal entry.

    Identity and audit columns belong to the storage layer; ``id`` is carried
    through untouched when present.
    """

    id: Optional[str] = None
    account_id: Optional[str] = None
    trade_environment: TradeEnvironment = TradeEnvironment.LIVE
    take_profit_levels: Tuple[TakeProfitLevel, ...] = field(default_factory=tuple)
    pips_or_ticks: int = 0
    notes: str = ""

    @classmethod
    def from_candidate(
        cls,
        candidate: CanonicalTrade,
        *,
        account_id: str | None = None,
        trade_environment: TradeEnvironment | str = TradeEnvironment.LIVE,
        notes: str | None = None,
    ) -> "Trade":
        """Promote an import candidate once the user confirms it."""

        levels: Tuple[TakeProfitLevel, ...] = ()
        if candidate.take_profit is not None:
            levels = (TakeProfitLevel(price=candidate.take_profit, quantity=candidate.quantity),)
        return cls(
            symbol=candidate.symbol,
            direction=candidate.direction,
            quantity=candidate.quantity,
            entry_price=candidate.entry_price,
            exit_price=candidate.exit_price,
            stop_loss=candidate.stop_loss,
            take_profit=candidate.take_profit,
            date=candidate.date,
            entry_time=candidate.entry_time,
            exit_time=candidate.exit_time,
            profit_loss=candidate.profit_loss,
            provenance=candidate.provenance,
            account_id=account_id,
            trade_environment=TradeEnvironment(trade_environment),
            take_profit_levels=levels,
            notes=candidate.provenance if notes is None else notes,
        )

    def to_record(self) -> dict[str, Any]:
        record = super().to_record()
        record.update(
            {
                "id": self.id,
                "account_id": self.account_id,
                "trade_environment": self.trade_environment.value,
                "take_profit_levels": [
                    {"price": level.price, "quantity": level.quantity}
                    for level in self.take_profit_levels
                ],
                "pips_or_ticks": self.pips_or_ticks,
                "notes": self.notes,
            }
        )
        return record


def _bucket_stats(trades: Sequence[Any]) -> tuple[float, int, int | None]:
    total = 0.0
    valid = 0
    winners = 0
    for trade in trades:
        pnl = parse_optional_number(record_value(trade, "profit_loss"))
        if pnl is None:
            continue
        total += pnl
        valid += 1
        if pnl > 0:
            winners += 1
    win_rate = round_half_up(100 * winners / valid) if valid else None
    return total, len(trades), win_rate


@dataclass(frozen=True)
class DayBucket:
    """All trades recorded on one calendar day."""

    date: date_type
    trades: Tuple[Any, ...] = ()

    @property
    def day(self) -> int:
        return self.date.day

    @property
    def total_pnl(self) -> float:
        return _bucket_stats(self.trades)[0]

    @property
    def trade_count(self) -> int:
        return len(self.trades)

    @property
    def win_rate(self) -> int | None:
        return _bucket_stats(self.trades)[2]


@dataclass(frozen=True)
class WeekBucket:
    """One display row of the month grid.

    ``start_date``/``end_date`` are ``None`` for rows that fall entirely
    outside the month.
    """

    week_index: int
    start_date: Optional[date_type]
    end_date: Optional[date_type]
    trades: Tuple[Any, ...] = ()

    @property
    def total_pnl(self) -> float:
        return _bucket_stats(self.trades)[0]

    @property
    def trade_count(self) -> int:
        return len(self.trades)

    @property
    def win_rate(self) -> int | None:
        return _bucket_stats(self.trades)[2]


__all__ = [
    "CanonicalTrade",
    "DayBucket",
    "Direction",
    "Outcome",
    "TakeProfitLevel",
    "Trade",
    "TradeEnvironment",
    "WeekBucket",
    "date_key",
    "outcome_for",
    "parse_calendar_date",
    "record_value",
]
