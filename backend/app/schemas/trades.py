"""Pydantic schemas for trade import, distance and export."""

from __future__ import annotations

import datetime as dt
from typing import Any

from pydantic import BaseModel, Field

from trade_journal import CanonicalTrade, FormatKind


class TakeProfitLevelSchema(BaseModel):
    price: float
    quantity: float = 0.0


class TradeRecord(BaseModel):
    """A journal trade as handed over by the storage layer.

    Unknown keys are preserved so the record round-trips back to the caller.
    """

    id: str | None = None
    symbol: str = ""
    direction: str | None = None
    quantity: float | None = None
    entry_price: float | None = None
    exit_price: float | None = None
    stop_loss: float | None = None
    take_profit: float | None = None
    take_profit_levels: list[TakeProfitLevelSchema] = Field(default_factory=list)
    date: str = Field(default="", examples=["2024-03-05"])
    entry_time: str | None = None
    exit_time: str | None = None
    profit_loss: float | None = None
    pips_or_ticks: int | None = None
    account_id: str | None = None
    account_name: str | None = None
    trade_environment: str | None = None
    notes: str | None = None

    class Config:
        extra = "allow"

    def to_record(self) -> dict[str, Any]:
        return self.model_dump()


class CanonicalTradeSchema(BaseModel):
    symbol: str
    direction: str
    quantity: float
    entry_price: float
    exit_price: float
    stop_loss: float | None = None
    take_profit: float | None = None
    date: str
    entry_time: str
    exit_time: str
    profit_loss: float
    outcome: str
    provenance: str

    @classmethod
    def from_candidate(cls, trade: CanonicalTrade) -> "CanonicalTradeSchema":
        return cls(**trade.to_record())


class ImportRequest(BaseModel):
    content: str = Field(..., description="Raw broker export, header line first")


class ImportResponse(BaseModel):
    format: FormatKind
    count: int
    trades: list[CanonicalTradeSchema]

    class Config:
        json_schema_extra = {
            "example": {
                "format": "MT4",
                "count": 1,
                "trades": [
                    {
                        "symbol": "EURUSD",
                        "direction": "buy",
                        "quantity": 1.0,
                        "entry_price": 1.1,
                        "exit_price": 1.1,
                        "stop_loss": None,
                        "take_profit": None,
                        "date": "2024-03-05",
                        "entry_time": "10:00",
                        "exit_time": "12:00",
                        "profit_loss": 50.0,
                        "outcome": "WIN",
                        "provenance": "Imported from MetaTrader",
                    }
                ],
            }
        }


class DistanceRequest(BaseModel):
    symbol: str | None = Field(default=None, examples=["EURUSD"])
    entry_price: float | str | None = None
    exit_price: float | str | None = None


class DistanceResponse(BaseModel):
    pips_or_ticks: int
    unit: str
    unit_size: float
    instrument_class: str


class ExportRequest(BaseModel):
    trades: list[TradeRecord]
    date: dt.date | None = Field(default=None, description="Used to name the downloaded file")


__all__ = [
    "CanonicalTradeSchema",
    "DistanceRequest",
    "DistanceResponse",
    "ExportRequest",
    "ImportRequest",
    "ImportResponse",
    "TakeProfitLevelSchema",
    "TradeRecord",
]
