"""Pydantic schemas exposed by the API layer."""

from .calendar import (
    DayBucketSchema,
    JournalRequest,
    JournalResponse,
    MonthViewRequest,
    MonthViewResponse,
    TradeSummarySchema,
    WeekBucketSchema,
)
from .trades import (
    CanonicalTradeSchema,
    DistanceRequest,
    DistanceResponse,
    ExportRequest,
    ImportRequest,
    ImportResponse,
    TakeProfitLevelSchema,
    TradeRecord,
)

__all__ = [
    "CanonicalTradeSchema",
    "DayBucketSchema",
    "DistanceRequest",
    "DistanceResponse",
    "ExportRequest",
    "ImportRequest",
    "ImportResponse",
    "JournalRequest",
    "JournalResponse",
    "MonthViewRequest",
    "MonthViewResponse",
    "TakeProfitLevelSchema",
    "TradeRecord",
    "TradeSummarySchema",
    "WeekBucketSchema",
]
