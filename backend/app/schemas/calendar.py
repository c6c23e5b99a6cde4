"""Schemas for the month calendar view."""

from __future__ import annotations

import datetime as dt
from typing import Any

from pydantic import BaseModel, Field

from trade_journal import DayBucket, MonthView, TradeSummary, WeekBucket

from .trades import TradeRecord


class MonthViewRequest(BaseModel):
    trades: list[TradeRecord] = Field(default_factory=list)
    year: int | None = Field(default=None, ge=1, le=9999)
    month_index: int | None = Field(default=None, ge=0, le=11, description="0 = January")
    spill_previous_month: bool | None = None


class JournalRequest(BaseModel):
    trades: list[TradeRecord] = Field(default_factory=list)
    account_id: str | None = Field(default=None, description="Account to keep; \"all\" or omitted keeps every trade")


class JournalResponse(BaseModel):
    """Trades grouped as ``{year: {month name: {week of month: [trades]}}}``."""

    groups: dict[int, dict[str, dict[int, list[dict[str, Any]]]]]
    count: int


class TradeSummarySchema(BaseModel):
    trade_count: int
    total_pnl: float
    wins: int
    losses: int
    breakevens: int
    win_rate: int | None
    best: float
    worst: float

    @classmethod
    def from_summary(cls, summary: TradeSummary) -> "TradeSummarySchema":
        return cls(
            trade_count=summary.trade_count,
            total_pnl=summary.total_pnl,
            wins=summary.wins,
            losses=summary.losses,
            breakevens=summary.breakevens,
            win_rate=summary.win_rate,
            best=summary.best,
            worst=summary.worst,
        )


class DayBucketSchema(BaseModel):
    date: dt.date
    day: int
    trade_count: int
    total_pnl: float
    win_rate: int | None
    trades: list[dict[str, Any]]

    @classmethod
    def from_bucket(cls, bucket: DayBucket) -> "DayBucketSchema":
        return cls(
            date=bucket.date,
            day=bucket.day,
            trade_count=bucket.trade_count,
            total_pnl=bucket.total_pnl,
            win_rate=bucket.win_rate,
            trades=list(bucket.trades),
        )


class WeekBucketSchema(BaseModel):
    week_index: int
    start_date: dt.date | None
    end_date: dt.date | None
    trade_count: int
    total_pnl: float
    win_rate: int | None
    trades: list[dict[str, Any]]

    @classmethod
    def from_bucket(cls, bucket: WeekBucket) -> "WeekBucketSchema":
        return cls(
            week_index=bucket.week_index,
            start_date=bucket.start_date,
            end_date=bucket.end_date,
            trade_count=bucket.trade_count,
            total_pnl=bucket.total_pnl,
            win_rate=bucket.win_rate,
            trades=list(bucket.trades),
        )


class MonthViewResponse(BaseModel):
    year: int
    month_index: int
    first_weekday: int = Field(..., description="0 = Sunday")
    days_in_month: int
    days: list[DayBucketSchema]
    weeks: list[WeekBucketSchema]
    summary: TradeSummarySchema

    @classmethod
    def from_view(cls, view: MonthView) -> "MonthViewResponse":
        return cls(
            year=view.year,
            month_index=view.month_index,
            first_weekday=view.first_weekday,
            days_in_month=view.days_in_month,
            days=[DayBucketSchema.from_bucket(bucket) for bucket in view.day_buckets],
            weeks=[WeekBucketSchema.from_bucket(bucket) for bucket in view.week_buckets],
            summary=TradeSummarySchema.from_summary(view.summary),
        )


__all__ = [
    "DayBucketSchema",
    "JournalRequest",
    "JournalResponse",
    "MonthViewRequest",
    "MonthViewResponse",
    "TradeSummarySchema",
    "WeekBucketSchema",
]
