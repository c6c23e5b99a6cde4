"""Seven-column CSV export of journal trades."""

from __future__ import annotations

from decimal import Decimal
from enum import Enum
from typing import Any, Iterable, Mapping

from .models import record_value
from .numbers import parse_optional_number

EXPORT_HEADER = ("Symbol", "Direction", "Entry", "Exit", "P&L", "Account", "Notes")


def _quote(value: Any) -> str:
    if isinstance(value, Enum):
        value = value.value
    text = "" if value is None else str(value)
    return '"' + text.replace('"', '""') + '"'


def _number(value: Any) -> str:
    # Zero and missing values render as empty cells.
    number = parse_optional_number(value)
    if not number:
        return ""
    if number.is_integer():
        return str(int(number))
    return format(Decimal(repr(number)), "f")


def _account(trade: Any) -> str:
    nested = record_value(trade, "trading_accounts")
    if isinstance(nested, Mapping) and nested.get("account_name"):
        return str(nested["account_name"])
    return str(record_value(trade, "account_name") or record_value(trade, "account_id") or "")


def export_row(trade: Any) -> str:
    """Serialize one trade, or trade mapping, to an export line."""

    notes = record_value(trade, "notes") or record_value(trade, "provenance") or ""
    return ",".join(
        [
            _quote(record_value(trade, "symbol", "")),
            _quote(record_value(trade, "direction", "")),
            _number(record_value(trade, "entry_price")),
            _number(record_value(trade, "exit_price")),
            _number(record_value(trade, "profit_loss")),
            _quote(_account(trade)),
            _quote(notes),
        ]
    )


def export_csv(trades: Iterable[Any]) -> str:
    """Return the header line followed by one line per trade."""

    lines = [",".join(EXPORT_HEADER)]
    lines.extend(export_row(trade) for trade in trades)
    return "\n".join(lines)


__all__ = ["EXPORT_HEADER", "export_csv", "export_row"]
