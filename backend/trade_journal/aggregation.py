"""Calendar aggregation of journal trades.

``build_month_view`` buckets trades into day cells and into the six week rows
of a Sunday-first month grid. Both the dashboard and the calendar page render
from the same view, so the computation is pure: no clock, no I/O, and the
input trades are returned untouched inside their buckets.

``group_journal`` produces the year, month and week-of-month grouping used by
the journal list.
"""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Any, Dict, Iterable, List, Sequence, Tuple

from .models import (
    DayBucket,
    WeekBucket,
    date_key,
    parse_calendar_date,
    record_value,
)
from .numbers import parse_optional_number, round_half_up

WEEK_ROWS = 6
ALL_ACCOUNTS = "all"


@dataclass(frozen=True)
class TradeSummary:
    trade_count: int
    total_pnl: float
    wins: int
    losses: int
    breakevens: int
    win_rate: int | None
    best: float
    worst: float


def summarize_trades(trades: Iterable[Any]) -> TradeSummary:
    """Headline figures over any set of trades.

    Trades without a P&L figure are counted but excluded from the win rate.
    """

    count = 0
    pnls: List[float] = []
    for trade in trades:
        count += 1
        pnl = parse_optional_number(record_value(trade, "profit_loss"))
        if pnl is not None:
            pnls.append(pnl)
    wins = sum(1 for pnl in pnls if pnl > 0)
    losses = sum(1 for pnl in pnls if pnl < 0)
    return TradeSummary(
        trade_count=count,
        total_pnl=sum(pnls),
        wins=wins,
        losses=losses,
        breakevens=len(pnls) - wins - losses,
        win_rate=round_half_up(100 * wins / len(pnls)) if pnls else None,
        best=max(pnls, default=0.0),
        worst=min(pnls, default=0.0),
    )


@dataclass(frozen=True)
class MonthView:
    year: int
    month_index: int
    first_weekday: int
    days_in_month: int
    day_buckets: Tuple[DayBucket, ...]
    week_buckets: Tuple[WeekBucket, ...]

    @property
    def summary(self) -> TradeSummary:
        return summarize_trades(
            trade for bucket in self.day_buckets for trade in bucket.trades
        )


def month_geometry(year: int, month_index: int) -> tuple[int, int]:
    """Return ``(first_weekday, days_in_month)`` with Sunday as weekday 0."""

    monday_first, days_in_month = calendar.monthrange(year, month_index + 1)
    return (monday_first + 1) % 7, days_in_month


def week_range(
    year: int,
    month_index: int,
    week_index: int,
    *,
    spill_previous_month: bool = False,
) -> tuple[date | None, date | None]:
    """Inclusive date range covered by one week row.

    The range is clamped to the month. Rows lying wholly past the last day
    return ``(None, None)``. With ``spill_previous_month`` the first row keeps
    its nominal start on the previous month's tail days.
    """

    first_weekday, days_in_month = month_geometry(year, month_index)
    first_of_month = date(year, month_index + 1, 1)
    nominal_start = 1 + week_index * 7 - first_weekday
    nominal_end = 1 + (week_index + 1) * 7 - first_weekday - 1
    end_day = min(nominal_end, days_in_month)
    start_day = nominal_start if spill_previous_month else max(nominal_start, 1)
    if start_day > end_day or end_day < 1:
        return None, None
    start = first_of_month + timedelta(days=start_day - 1)
    end = first_of_month + timedelta(days=end_day - 1)
    return start, end


def _partition_by_date(trades: Sequence[Any]) -> Dict[str, List[Any]]:
    by_date: Dict[str, List[Any]] = {}
    for trade in trades:
        by_date.setdefault(date_key(record_value(trade, "date")), []).append(trade)
    return by_date


JournalGroups = Dict[int, Dict[str, Dict[int, List[Any]]]]


def filter_by_account(trades: Iterable[Any], account_id: str | None = None) -> List[Any]:
    """Keep the trades booked to ``account_id``; ``None`` or ``"all"`` keeps every trade."""

    if account_id is None or account_id == ALL_ACCOUNTS:
        return list(trades)
    return [trade for trade in trades if record_value(trade, "account_id") == account_id]


def week_of_month(day: int) -> int:
    """One-based week of the month counted in seven-day blocks from the 1st."""

    return (day + 6) // 7


def _journal_date(trade: Any) -> date | None:
    trade_date = parse_calendar_date(record_value(trade, "date"))
    if trade_date is not None:
        return trade_date
    created_at = record_value(trade, "created_at")
    if isinstance(created_at, str):
        created_at = created_at[:10]
    return parse_calendar_date(created_at)


def group_journal(trades: Iterable[Any], account_id: str | None = None) -> JournalGroups:
    """Group trades by year, month name and week of month for the journal list.

    The trade date is used, falling back to the ``created_at`` timestamp.
    Trades with neither are left out. Groups keep the input order of trades.
    """

    grouped: JournalGroups = {}
    for trade in filter_by_account(trades, account_id):
        trade_date = _journal_date(trade)
        if trade_date is None:
            continue
        month = calendar.month_name[trade_date.month]
        weeks = grouped.setdefault(trade_date.year, {}).setdefault(month, {})
        weeks.setdefault(week_of_month(trade_date.day), []).append(trade)
    return grouped


def build_month_view(
    trades: Iterable[Any],
    year: int,
    month_index: int,
    *,
    spill_previous_month: bool = False,
) -> MonthView:
    """Bucket ``trades`` by day and by week row for one month.

    ``month_index`` is zero based. Trades may be ``Trade`` objects or plain
    mappings with ``date`` and ``profit_loss`` keys; the ``date`` must already
    be in ``YYYY-MM-DD`` form. Validating the month is the caller's job.
    """

    trades = list(trades)
    first_weekday, days_in_month = month_geometry(year, month_index)
    by_date = _partition_by_date(trades)

    day_buckets = []
    for day in range(1, days_in_month + 1):
        current = date(year, month_index + 1, day)
        day_buckets.append(DayBucket(date=current, trades=tuple(by_date.get(current.isoformat(), ()))))

    dated = [(parse_calendar_date(record_value(trade, "date")), trade) for trade in trades]
    week_buckets = []
    for week_index in range(WEEK_ROWS):
        start, end = week_range(
            year,
            month_index,
            week_index,
            spill_previous_month=spill_previous_month,
        )
        members: Tuple[Any, ...] = ()
        if start is not None and end is not None:
            members = tuple(
                trade for trade_date, trade in dated
                if trade_date is not None and start <= trade_date <= end
            )
        week_buckets.append(
            WeekBucket(week_index=week_index, start_date=start, end_date=end, trades=members)
        )

    return MonthView(
        year=year,
        month_index=month_index,
        first_weekday=first_weekday,
        days_in_month=days_in_month,
        day_buckets=tuple(day_buckets),
        week_buckets=tuple(week_buckets),
    )


__all__ = [
    "ALL_ACCOUNTS",
    "JournalGroups",
    "MonthView",
    "TradeSummary",
    "WEEK_ROWS",
    "build_month_view",
    "filter_by_account",
    "group_journal",
    "month_geometry",
    "summarize_trades",
    "week_of_month",
    "week_range",
]
